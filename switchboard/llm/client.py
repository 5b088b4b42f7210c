"""Transport client for OpenRouter chat completions.

Invocation flow:
    `service.run_prompt` -> `send_request(payload, referer)` -> POST to the
    OpenRouter endpoint -> first choice message content.

Retry behavior:
    None. Each call is attempted once with `REQUEST_TIMEOUT`.

Failure handling model:
    Failures raise typed exceptions so the HTTP adapter can map them to
    status codes:
    - `ProviderKeyMissingError`: no API key configured.
    - `ProviderHTTPError`: non-2xx upstream response (status and body kept).
    - `ProviderRequestError`: connection/timeout/decoding failures.
"""

import logging

import requests

from switchboard.llm.provider_config import (
    APP_TITLE,
    OPENROUTER_URL,
    REQUEST_TIMEOUT,
    get_api_key,
)


logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Base class for run-proxy provider failures."""


class ProviderKeyMissingError(ProviderError):
    def __init__(self):
        super().__init__("Missing OPENROUTER_API_KEY in environment.")


class ProviderHTTPError(ProviderError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"OpenRouter HTTP error ({status_code})")
        self.status_code = status_code
        self.body = body


class ProviderRequestError(ProviderError):
    pass


def extract_content(data) -> str | None:
    """Return `choices[0].message.content` or `None` when absent."""
    try:
        return data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None


def send_request(payload: dict, referer: str) -> str | None:
    """Send one chat-completion request and return the message content.

    Args:
        payload: OpenAI-compatible chat payload.
        referer: Value for the `HTTP-Referer` attribution header.

    Returns:
        Message content, or `None` when the response carries none.
    """
    api_key = get_api_key()
    if not api_key:
        raise ProviderKeyMissingError()

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "HTTP-Referer": referer,
        "X-Title": APP_TITLE,
    }

    try:
        response = requests.post(
            OPENROUTER_URL,
            headers=headers,
            json=payload,
            timeout=REQUEST_TIMEOUT,
        )
    except requests.exceptions.RequestException as err:
        logger.exception("OpenRouter request failed")
        raise ProviderRequestError(str(err)) from err

    if not response.ok:
        logger.warning("OpenRouter returned HTTP %s", response.status_code)
        raise ProviderHTTPError(response.status_code, response.text)

    try:
        data = response.json()
    except ValueError as err:
        raise ProviderRequestError("OpenRouter returned invalid JSON") from err

    return extract_content(data)
