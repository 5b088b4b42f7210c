"""Closed catalog of external AI tools.

Every tool is identified by a short string tag. `Tool` subclasses `str` so
values serialize to JSON as their plain tag and compare equal to raw strings
coming from request bodies or the project store.
"""

from enum import Enum


class Tool(str, Enum):
    """External AI service identifiers."""

    CHATGPT = "chatgpt"
    PERPLEXITY = "perplexity"
    DALLE = "dalle"
    SD_IMAGE = "sd_image"
    CANVA = "canva"
    FRAMER_AI = "framer_ai"
    LOVABLE = "lovable"
    RUNWAY = "runway"
    PIKA = "pika"
    KAIBER = "kaiber"
    ELEVENLABS = "elevenlabs"
    WHISPER = "whisper"
    SUNO = "suno"
    UDIO = "udio"
    DESCRIPT = "descript"
    GAMMA = "gamma"
    TOME = "tome"

    def __str__(self) -> str:
        return self.value


# Catalog order. Used as the last-resort pool for tool substitution.
TOOL_CATALOG = list(Tool)

DEFAULT_TOOL = Tool.CHATGPT


def parse_tool(value) -> Tool | None:
    """Return the `Tool` for a tag, or `None` for unknown/empty values."""
    if value is None:
        return None
    if isinstance(value, Tool):
        return value
    try:
        return Tool(str(value).strip().lower())
    except ValueError:
        return None
