"""Tests for the FastAPI adapter."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from switchboard.api.http_api import app
from switchboard.llm import client as llm_client


@pytest.fixture
def client():
    return TestClient(app)


def test_route_returns_tool_card(client):
    response = client.post("/api/route", json={"prompt": "  write code for a website  "})

    assert response.status_code == 200
    data = response.json()
    assert data["result"] == "toolcard"
    assert data["tool"] == "lovable"
    assert data["confidence"] == 0.85
    assert data["alternatives"] == ["chatgpt", "framer_ai"]
    assert data["openUrl"] == "https://lovable.dev/?prompt=write%20code%20for%20a%20website"
    assert data["openLabel"] == "Open Loveable"
    assert data["passport"] == {
        "goal": "write code for a website",
        "audience": None,
        "tone": None,
        "constraints": [],
        "assets": [],
        "next_step": None,
    }


@pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}, {"prompt": 42}, []])
def test_route_rejects_missing_prompt(client, body):
    response = client.post("/api/route", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing 'prompt' in request body"}


def test_route_rejects_invalid_json(client):
    response = client.post(
        "/api/route", content="not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400


def test_route_get_and_preflight(client):
    assert client.get("/api/route").json() == {"ok": True, "expects": "POST"}

    response = client.options("/api/route")
    assert response.status_code == 204
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "POST, GET, OPTIONS"


def test_workflows_endpoint(client):
    response = client.post("/api/workflows", json={"title": "make a video and write an article"})

    assert response.status_code == 200
    workflows = response.json()["workflows"]
    assert [w["id"] for w in workflows] == [
        "quick-video", "thorough-video", "quick-writing", "thorough-writing",
    ]
    quick_step = workflows[0]["steps"][0]
    assert quick_step["tool"] == "runway"
    assert quick_step["link"] == {
        "url": "https://app.runwayml.com/?prompt=make%20a%20video%20and%20write%20an%20article",
        "label": "Open Runway",
    }


def test_workflows_requires_title(client):
    response = client.post("/api/workflows", json={"title": " "})

    assert response.status_code == 400


def test_run_missing_key(client):
    with patch.object(llm_client, "get_api_key", return_value=None):
        response = client.post("/api/run", json={"prompt": "hi"})

    assert response.status_code == 500
    assert response.json() == {"error": "Missing OPENROUTER_API_KEY in environment."}


def test_run_upstream_error_maps_to_502(client):
    upstream = MagicMock(ok=False, status_code=503, text="unavailable")

    with patch.object(llm_client, "get_api_key", return_value="secret"), \
            patch.object(llm_client.requests, "post", return_value=upstream):
        response = client.post("/api/run", json={"prompt": "hi"})

    assert response.status_code == 502
    assert response.json() == {"error": "OpenRouter error", "status": 503, "body": "unavailable"}


def test_run_success(client):
    upstream = MagicMock(ok=True, status_code=200)
    upstream.json.return_value = {"choices": [{"message": {"content": "Hello!"}}]}

    with patch.object(llm_client, "get_api_key", return_value="secret"), \
            patch.object(llm_client.requests, "post", return_value=upstream):
        response = client.post("/api/run", json={"prompt": "hi"})

    assert response.status_code == 200
    assert response.json() == {"output": "Hello!"}


def test_run_rejects_empty_prompt(client):
    assert client.post("/api/run", json={}).status_code == 400
    assert client.get("/api/run").json() == {"ok": True, "expects": "POST"}
