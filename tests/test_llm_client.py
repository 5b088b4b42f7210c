"""Tests for the run-proxy provider client and service."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from switchboard.llm import client, provider_config
from switchboard.llm.client import (
    ProviderHTTPError,
    ProviderKeyMissingError,
    ProviderRequestError,
    send_request,
)
from switchboard.llm.service import resolve_referer, run_prompt


def _response(ok=True, status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.text = text
    response.json.return_value = json_data
    return response


def test_missing_key_raises():
    with patch.object(client, "get_api_key", return_value=None):
        with pytest.raises(ProviderKeyMissingError):
            send_request({}, "http://localhost:3000")


def test_successful_request_sends_attribution_headers():
    data = {"choices": [{"message": {"content": "hi there"}}]}

    with patch.object(client, "get_api_key", return_value="secret"), \
            patch.object(client.requests, "post", return_value=_response(json_data=data)) as post:
        assert send_request({"model": "m"}, "https://example.com") == "hi there"

    headers = post.call_args.kwargs["headers"]
    assert headers["Authorization"] == "Bearer secret"
    assert headers["HTTP-Referer"] == "https://example.com"
    assert headers["X-Title"] == provider_config.APP_TITLE
    assert post.call_args.kwargs["json"] == {"model": "m"}


def test_http_error_keeps_status_and_body():
    with patch.object(client, "get_api_key", return_value="secret"), \
            patch.object(client.requests, "post",
                         return_value=_response(ok=False, status_code=429, text="slow down")):
        with pytest.raises(ProviderHTTPError) as excinfo:
            send_request({}, "r")

    assert excinfo.value.status_code == 429
    assert excinfo.value.body == "slow down"


def test_transport_error_is_wrapped():
    with patch.object(client, "get_api_key", return_value="secret"), \
            patch.object(client.requests, "post", side_effect=requests.exceptions.ConnectionError("down")):
        with pytest.raises(ProviderRequestError):
            send_request({}, "r")


def test_missing_content_returns_none():
    with patch.object(client, "get_api_key", return_value="secret"), \
            patch.object(client.requests, "post", return_value=_response(json_data={"choices": []})):
        assert send_request({}, "r") is None


def test_run_prompt_builds_payload_and_defaults_output():
    with patch("switchboard.llm.service.send_request", return_value=None) as send:
        assert run_prompt("hello", origin="https://app.test") == "(no content returned by the model)"

    payload, referer = send.call_args.args
    assert payload["messages"] == [{"role": "user", "content": "hello"}]
    assert payload["model"] == provider_config.MODEL_NAME


def test_resolve_referer_order():
    with patch("switchboard.llm.service.APP_URL", None):
        assert resolve_referer("https://origin.test") == "https://origin.test"
        assert resolve_referer(None) == "http://localhost:3000"
    with patch("switchboard.llm.service.APP_URL", "https://configured.test"):
        assert resolve_referer("https://origin.test") == "https://configured.test"


# ============================================================
# Key resolution
# ============================================================

@pytest.fixture
def key_env(monkeypatch, tmp_path):
    """Isolate key lookup from the real environment and key files."""
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    monkeypatch.delenv("SECRETS_API_KEY", raising=False)
    monkeypatch.setattr(provider_config, "OPENROUTER_KEY_FILE", str(tmp_path / "openrouter.key"))
    return tmp_path


def test_env_key_wins_over_key_file(key_env, monkeypatch):
    (key_env / "openrouter.key").write_text("sk-file\n")
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-env")

    assert provider_config.get_api_key() == "sk-env"


def test_key_file_used_when_env_unset(key_env):
    (key_env / "openrouter.key").write_text("  sk-file\n")

    assert provider_config.get_api_key() == "sk-file"


def test_missing_or_blank_key_file_returns_none(key_env, monkeypatch):
    assert provider_config.get_api_key() is None

    (key_env / "openrouter.key").write_text("   \n")
    monkeypatch.setenv("OPENROUTER_API_KEY", "   ")
    assert provider_config.get_api_key() is None


def test_env_key_read_with_custom_key_file_name(key_env, monkeypatch):
    monkeypatch.setattr(provider_config, "OPENROUTER_KEY_FILE", str(key_env / "secrets.key"))
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-env")

    assert provider_config.get_api_key() == "sk-env"


def test_custom_key_file_contents_used(key_env, monkeypatch):
    custom = key_env / "secrets.key"
    custom.write_text("sk-custom")
    monkeypatch.setattr(provider_config, "OPENROUTER_KEY_FILE", str(custom))

    assert provider_config.get_api_key() == "sk-custom"


def test_send_request_uses_env_key_with_custom_key_file(key_env, monkeypatch):
    monkeypatch.setattr(provider_config, "OPENROUTER_KEY_FILE", str(key_env / "secrets.key"))
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-env")
    data = {"choices": [{"message": {"content": "ok"}}]}

    with patch.object(client.requests, "post", return_value=_response(json_data=data)) as post:
        assert send_request({}, "r") == "ok"

    assert post.call_args.kwargs["headers"]["Authorization"] == "Bearer sk-env"
