"""Prompt-to-payload adapter for the run proxy.

Model call flow:
    prompt -> single user message payload -> `client.send_request(...)`.

Determinism:
    Payload construction is deterministic; generated output is not.
"""

from switchboard.llm.client import send_request
from switchboard.llm.provider_config import (
    APP_URL,
    DEFAULT_REFERER,
    EMPTY_OUTPUT,
    MODEL_NAME,
)


def resolve_referer(origin: str | None = None) -> str:
    """Pick the attribution referer: configured app URL, request origin, default."""
    return APP_URL or origin or DEFAULT_REFERER


def run_prompt(prompt: str, origin: str | None = None) -> str:
    """Forward one user prompt to the configured model and return its text.

    Provider failures propagate as `switchboard.llm.client.ProviderError`.
    """
    payload = {
        "model": MODEL_NAME,
        "messages": [{"role": "user", "content": prompt}],
    }
    content = send_request(payload, resolve_referer(origin))
    return content if content is not None else EMPTY_OUTPUT
