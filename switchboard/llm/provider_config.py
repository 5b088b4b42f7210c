"""Provider/runtime configuration for the run proxy and adapters.

Architectural role:
    Centralizes endpoint, model, header and credential lookup consumed by
    `switchboard.llm.client` and `switchboard.llm.service`, plus the store path
    used by the API adapters.

Determinism:
    Values are resolved from the process environment at import time;
    `load_key` and `get_api_key` read the environment/key file on each call.
"""

import os
from dotenv import load_dotenv

load_dotenv()

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
OPENROUTER_KEY_ENV = "OPENROUTER_API_KEY"
OPENROUTER_KEY_FILE = os.getenv("OPENROUTER_KEY_FILE", "config/openrouter.key")

MODEL_NAME = os.getenv("RUN_MODEL_NAME", "openai/gpt-4o-mini")
APP_URL = os.getenv("APP_URL")
APP_TITLE = os.getenv("APP_TITLE", "Switchboard")
DEFAULT_REFERER = "http://localhost:3000"

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "120"))

STORE_PATH = os.getenv("SWITCHBOARD_STORE_PATH", "switchboard_store.json")

EMPTY_OUTPUT = "(no content returned by the model)"


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/openrouter.key` -> `OPENROUTER_API_KEY`).
        2. Raw file contents at `path`.

    Edge cases:
        - `None` path returns `None`.
        - Missing file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = (os.getenv(key_name) or "").strip()
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


def get_api_key():
    """Return the OpenRouter key or `None`.

    `OPENROUTER_API_KEY` wins whatever `OPENROUTER_KEY_FILE` is named; the key
    file is only read when the variable is unset or blank.
    """
    env_value = (os.getenv(OPENROUTER_KEY_ENV) or "").strip()
    if env_value:
        return env_value
    return load_key(OPENROUTER_KEY_FILE)
