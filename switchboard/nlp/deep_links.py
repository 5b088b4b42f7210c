"""Deep-link construction for routed tools.

Maps `(tool, text)` to a URL that opens the tool pre-filled with the text,
plus a human button label. Only builds a string; nothing is fetched.

Encoding:
    Text is percent-encoded with the same safe set as JavaScript
    `encodeURIComponent`, so spaces become `%20`.

Failure handling:
    Total. Unknown tools fall back to the general-purpose tool link.
"""

from dataclasses import dataclass
from urllib.parse import quote

from switchboard.core.tools import DEFAULT_TOOL, Tool, parse_tool


URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class DeepLink:
    url: str
    label: str

    def to_dict(self) -> dict:
        return {"url": self.url, "label": self.label}


# tool -> (base URL, query parameter, label)
DEEP_LINK_TARGETS = {

    # Text & research
    Tool.CHATGPT: ("https://chat.openai.com/", "q", "Open in ChatGPT"),
    Tool.PERPLEXITY: ("https://www.perplexity.ai/search", "q", "Open in Perplexity"),

    # Images & design
    Tool.DALLE: ("https://labs.openai.com/", "prompt", "Open DALL·E"),
    Tool.SD_IMAGE: ("https://clipdrop.co/stable-diffusion", "prompt", "Open Stable Diffusion"),
    Tool.CANVA: ("https://www.canva.com/", "query", "Open Canva"),
    Tool.FRAMER_AI: ("https://www.framer.com/ai/", "prompt", "Open Framer AI"),
    Tool.LOVABLE: ("https://lovable.dev/", "prompt", "Open Loveable"),

    # Video
    Tool.RUNWAY: ("https://app.runwayml.com/", "prompt", "Open Runway"),
    Tool.PIKA: ("https://pika.art/", "prompt", "Open Pika Labs"),
    Tool.KAIBER: ("https://www.kaiber.ai/", "prompt", "Open Kaiber"),

    # Audio, voice & music
    Tool.ELEVENLABS: ("https://elevenlabs.io/app/speech-synthesis", "text", "Open ElevenLabs"),
    Tool.WHISPER: ("https://huggingface.co/spaces/openai/whisper", "prompt", "Open Whisper"),
    Tool.SUNO: ("https://suno.com/", "prompt", "Open Suno"),
    Tool.UDIO: ("https://www.udio.com/", "prompt", "Open Udio"),

    # Narrative & presentations
    Tool.DESCRIPT: ("https://www.descript.com/app", "prompt", "Open Descript"),
    Tool.GAMMA: ("https://gamma.app/", "prompt", "Open Gamma"),
    Tool.TOME: ("https://tome.app/", "prompt", "Open Tome"),
}

_default_url, _default_param, _ = DEEP_LINK_TARGETS[DEFAULT_TOOL]
FALLBACK_TARGET = (_default_url, _default_param, "Open ChatGPT")


def encode_query_value(text: str | None) -> str:
    """Percent-encode text like `encodeURIComponent`."""
    return quote(text or "", safe=URI_COMPONENT_SAFE)


def build_deep_link(tool, text: str | None) -> DeepLink:
    """Build the pre-filled URL and label for `tool`.

    Args:
        tool: `Tool` member or raw tag string.
        text: Prompt text to pre-fill. `None` is treated as empty.

    Returns:
        `DeepLink` with the encoded URL and button label.
    """
    target = DEEP_LINK_TARGETS.get(parse_tool(tool), FALLBACK_TARGET)
    base_url, param, label = target
    return DeepLink(url=f"{base_url}?{param}={encode_query_value(text)}", label=label)
