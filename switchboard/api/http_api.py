"""
HTTP API adapter for Switchboard.

Endpoint responsibilities:
- `POST /api/route`: validate the prompt, route it to a tool and attach a
  deep link and an empty task passport.
- `GET /api/route`, `OPTIONS /api/route`: discovery and CORS preflight.
- `POST /api/workflows`: validate the title and return quick/thorough plans
  with per-step deep links.
- `POST /api/run`: forward a prompt to the configured chat-completion
  provider and return its text.
- `GET /api/run`: discovery.

Input validation behavior:
- Missing, non-string or blank `prompt`/`title` -> HTTP 400.
- Unparseable JSON bodies are treated as empty bodies.

Error handling strategy (`/api/run`):
- Missing API key -> HTTP 500.
- Upstream non-2xx -> HTTP 502 with upstream status and body.
- Other provider failures -> HTTP 500 with the error message.

Side effects:
- `/api/run` performs one outbound HTTP request.
- Request debug logging only when `DEBUG == "true"`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError

from switchboard.llm.client import ProviderError, ProviderHTTPError, ProviderKeyMissingError
from switchboard.llm.service import run_prompt
from switchboard.nlp.deep_links import build_deep_link
from switchboard.nlp.intent_router import route
from switchboard.planning.workflows import get_workflow_link, suggest_workflows


logger = logging.getLogger(__name__)

app = FastAPI(title="Switchboard")
# Sensitive request/response debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


# ============================================================
# Request Schemas
# ============================================================

class PromptRequest(BaseModel):
    prompt: str | None = None


class WorkflowRequest(BaseModel):
    title: str | None = None


async def _read_body(request: Request) -> dict:
    """Return the JSON body as a dict; anything else becomes `{}`."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _clean_field(model, body: dict, field_name: str) -> str:
    """Validate `body` against `model` and return the stripped field or `""`."""
    try:
        parsed = model.model_validate(body)
    except ValidationError:
        return ""
    return (getattr(parsed, field_name) or "").strip()


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def build_passport(goal: str) -> dict:
    """Empty task passport seeded with the user's goal."""
    return {
        "goal": goal,
        "audience": None,
        "tone": None,
        "constraints": [],
        "assets": [],
        "next_step": None,
    }


# ============================================================
# Tool Routing
# ============================================================

@app.post("/api/route")
async def route_prompt(request: Request):
    """Route a prompt to a tool card."""
    body = await _read_body(request)
    prompt = _clean_field(PromptRequest, body, "prompt")

    if DEBUG:
        logger.info("Route request prompt=%r", prompt)

    if not prompt:
        return _bad_request("Missing 'prompt' in request body")

    decision = route(prompt)
    link = build_deep_link(decision.tool, prompt)

    return {
        "result": "toolcard",
        **decision.to_dict(),
        "passport": build_passport(prompt),
        "openUrl": link.url,
        "openLabel": link.label,
    }


@app.get("/api/route")
def route_info():
    return {"ok": True, "expects": "POST"}


@app.options("/api/route")
def route_preflight():
    return Response(status_code=204, headers=CORS_HEADERS)


# ============================================================
# Workflow Suggestions
# ============================================================

@app.post("/api/workflows")
async def workflows(request: Request):
    """Return quick/thorough workflow suggestions for a project title."""
    body = await _read_body(request)
    title = _clean_field(WorkflowRequest, body, "title")

    if not title:
        return _bad_request("Missing 'title' in request body")

    payload = []
    for workflow in suggest_workflows(title):
        data = workflow.to_dict()
        for step, step_data in zip(workflow.steps, data["steps"]):
            link = get_workflow_link(step)
            step_data["link"] = link.to_dict() if link else None
        payload.append(data)

    return {"workflows": payload}


# ============================================================
# Run Proxy
# ============================================================

@app.post("/api/run")
async def run(request: Request):
    """Forward a prompt to the chat-completion provider."""
    body = await _read_body(request)
    prompt = _clean_field(PromptRequest, body, "prompt")

    if not prompt:
        return _bad_request("Missing 'prompt' in request body")

    try:
        output = await run_in_threadpool(run_prompt, prompt, request.headers.get("origin"))
    except ProviderKeyMissingError as err:
        return JSONResponse(status_code=500, content={"error": str(err)})
    except ProviderHTTPError as err:
        return JSONResponse(
            status_code=502,
            content={"error": "OpenRouter error", "status": err.status_code, "body": err.body},
        )
    except ProviderError as err:
        return JSONResponse(status_code=500, content={"error": str(err)})

    if DEBUG:
        logger.info("Run output length=%d", len(output))

    return {"output": output}


@app.get("/api/run")
def run_info():
    return {"ok": True, "expects": "POST"}


# ============================================================
# Server Entrypoint
# ============================================================

def serve():
    """Run the API with uvicorn on `HOST`/`PORT`."""
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    serve()
