"""Keyword-cascade tool router producing `RouteDecision`.

Classification logic:
- The input is lower-cased once and tested for case-insensitive substring
  membership against fixed keyword lists.
- Categories are evaluated in a fixed priority order:
  coding -> reasoning -> research -> image -> website -> video -> voice ->
  transcription -> music -> presentation -> narrative -> writing -> default.
- The first category with any keyword hit wins. There is no scoring across
  categories.
- Inside a winning category, sub-rules are checked in order and may refine the
  tool and confidence. The last sub-rule of each category has no keywords and
  always matches.

Ordering matters:
    Prompts that hit several keyword families ("write code for a website") are
    resolved by list position. Reordering `ROUTING_RULES` or any sub-rule list
    changes output for ambiguous inputs.

Determinism:
- Deterministic and side-effect free for identical input.

Failure handling:
- Never raises. Unmatched and empty input resolve to `DEFAULT_DECISION`.
"""

import logging
from dataclasses import dataclass

from switchboard.core.routing_types import RouteDecision
from switchboard.core.tools import Tool


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubRule:
    """Terminal branch of a category. Empty `keywords` always matches."""

    keywords: tuple[str, ...]
    decision: RouteDecision


@dataclass(frozen=True)
class CategoryRule:
    """Category gate plus its ordered refinement branches."""

    name: str
    keywords: tuple[str, ...]
    branches: tuple[SubRule, ...]


def _decision(tool: Tool, confidence: float, *alternatives: Tool) -> RouteDecision:
    return RouteDecision(tool=tool, confidence=confidence, alternatives=tuple(alternatives))


def has_any(text: str, words) -> bool:
    """Return whether any keyword is a substring of the lower-cased text."""
    lowered = text.lower()
    return any(word in lowered for word in words)


# =========================================================
# CATEGORY KEYWORDS
# =========================================================

CODING_KEYWORDS = (
    "code", "coding", "programming", "program", "script", "function", "algorithm",
    "debug", "bug", "fix", "error", "syntax", "api", "framework", "library",
    "javascript", "python", "typescript", "react", "node", "html", "css",
    "database", "sql", "query", "backend", "frontend", "full-stack",
    "component", "module", "package", "npm", "git", "repository", "repo",
    "test", "testing", "unit test", "integration", "deploy", "build",
)

REASONING_KEYWORDS = (
    "analyze", "analysis", "reasoning", "logic", "think", "solve", "problem",
    "strategy", "plan", "decide", "decision", "recommend", "suggest", "advice",
    "explain", "understand", "concept", "theory", "how does", "why", "what if",
    "complex", "sophisticated", "multi-step", "workflow", "process", "automate",
    "agent", "assistant", "task",
)

RESEARCH_KEYWORDS = (
    "research", "sources", "citations", "cite", "reference", "latest", "recent",
    "news", "article", "data", "statistics", "facts", "accurate", "verify",
    "compare", "comparison", "versus", "vs", "difference", "find", "search",
    "what is", "who is", "when did", "where is", "current", "up-to-date",
)

IMAGE_KEYWORDS = (
    "image", "picture", "photo", "logo", "poster", "thumbnail", "art", "illustration",
    "graphic", "design", "visual", "drawing", "painting", "icon", "avatar",
    "banner", "header", "cover", "background", "wallpaper", "meme", "cartoon",
)

WEBSITE_KEYWORDS = (
    "website", "landing page", "web page", "site", "portfolio", "homepage",
    "layout", "ui", "user interface", "design system", "component library",
)

VIDEO_KEYWORDS = (
    "video", "b-roll", "shot list", "motion", "tiktok", "reel", "short",
    "clip", "footage", "animation", "animate", "moving", "dynamic",
)

VOICE_KEYWORDS = (
    "voice", "narration", "voiceover", "tts", "text-to-speech", "speak",
    "say", "audio", "sound", "vocal", "narrate",
)

TRANSCRIPTION_KEYWORDS = (
    "transcribe", "transcription", "speech to text", "stt", "convert audio",
    "audio to text", "subtitles", "captions", "dictation",
)

MUSIC_KEYWORDS = (
    "song", "music", "melody", "lyrics", "track", "beat", "instrumental",
    "composition", "musical", "audio track", "background music",
)

PRESENTATION_KEYWORDS = (
    "slides", "deck", "presentation", "pitch", "pitch deck", "slideshow",
    "powerpoint", "ppt", "keynote",
)

NARRATIVE_KEYWORDS = (
    "script", "narrative", "story", "podcast", "storytelling", "content",
    "video script", "audio script", "text-based", "edit video", "edit audio",
)

WRITING_KEYWORDS = (
    "write", "writing", "essay", "article", "blog", "content", "copy",
    "draft", "compose", "generate text", "create text",
)


# =========================================================
# RULE TABLE (ORDER IS PRIORITY)
# =========================================================

ROUTING_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("coding", CODING_KEYWORDS, (
        # Full app/website builds go to an app builder.
        SubRule(("app", "website", "web app", "application", "prototype", "ui builder"),
                _decision(Tool.LOVABLE, 0.85, Tool.CHATGPT, Tool.FRAMER_AI)),
        SubRule((), _decision(Tool.CHATGPT, 0.88, Tool.PERPLEXITY, Tool.LOVABLE)),
    )),
    CategoryRule("reasoning", REASONING_KEYWORDS, (
        SubRule((), _decision(Tool.CHATGPT, 0.86, Tool.PERPLEXITY, Tool.GAMMA)),
    )),
    CategoryRule("research", RESEARCH_KEYWORDS, (
        SubRule((), _decision(Tool.PERPLEXITY, 0.87, Tool.CHATGPT, Tool.GAMMA)),
    )),
    CategoryRule("image", IMAGE_KEYWORDS, (
        SubRule(("detailed", "specific", "parameter", "style", "control", "precise"),
                _decision(Tool.SD_IMAGE, 0.82, Tool.DALLE, Tool.CANVA)),
        SubRule(("logo", "brand", "template", "quick", "professional"),
                _decision(Tool.CANVA, 0.8, Tool.DALLE, Tool.SD_IMAGE)),
        SubRule((), _decision(Tool.DALLE, 0.81, Tool.SD_IMAGE, Tool.CANVA)),
    )),
    CategoryRule("website", WEBSITE_KEYWORDS, (
        SubRule((), _decision(Tool.FRAMER_AI, 0.83, Tool.CANVA, Tool.LOVABLE)),
    )),
    CategoryRule("video", VIDEO_KEYWORDS, (
        SubRule(("cinematic", "music video", "lyric", "visualizer", "ambient", "atmospheric"),
                _decision(Tool.KAIBER, 0.84, Tool.RUNWAY, Tool.PIKA)),
        SubRule(("fast", "quick", "stylized", "style", "artistic"),
                _decision(Tool.PIKA, 0.82, Tool.RUNWAY, Tool.KAIBER)),
        SubRule((), _decision(Tool.RUNWAY, 0.85, Tool.PIKA, Tool.KAIBER)),
    )),
    CategoryRule("voice", VOICE_KEYWORDS, (
        SubRule((), _decision(Tool.ELEVENLABS, 0.84, Tool.DESCRIPT, Tool.CHATGPT)),
    )),
    CategoryRule("transcription", TRANSCRIPTION_KEYWORDS, (
        SubRule((), _decision(Tool.WHISPER, 0.86, Tool.DESCRIPT, Tool.CHATGPT)),
    )),
    CategoryRule("music", MUSIC_KEYWORDS, (
        SubRule(("lyrics", "song with lyrics", "vocal", "singing"),
                _decision(Tool.UDIO, 0.83, Tool.SUNO, Tool.CHATGPT)),
        SubRule((), _decision(Tool.SUNO, 0.85, Tool.UDIO, Tool.CHATGPT)),
    )),
    CategoryRule("presentation", PRESENTATION_KEYWORDS, (
        SubRule((), _decision(Tool.GAMMA, 0.83, Tool.TOME, Tool.CANVA)),
    )),
    CategoryRule("narrative", NARRATIVE_KEYWORDS, (
        SubRule(("edit", "editing", "video edit", "audio edit"),
                _decision(Tool.DESCRIPT, 0.82, Tool.CHATGPT, Tool.GAMMA)),
        SubRule(("story", "narrative", "tome", "presentation story"),
                _decision(Tool.TOME, 0.79, Tool.GAMMA, Tool.CHATGPT)),
        SubRule((), _decision(Tool.DESCRIPT, 0.78, Tool.CHATGPT, Tool.GAMMA)),
    )),
    CategoryRule("writing", WRITING_KEYWORDS, (
        # Writing that needs citations goes to a research tool.
        SubRule(("research", "sources", "cite", "facts", "accurate"),
                _decision(Tool.PERPLEXITY, 0.84, Tool.CHATGPT, Tool.GAMMA)),
        SubRule((), _decision(Tool.CHATGPT, 0.8, Tool.PERPLEXITY, Tool.GAMMA)),
    )),
)

DEFAULT_DECISION = _decision(Tool.CHATGPT, 0.75, Tool.PERPLEXITY, Tool.GAMMA)


# =========================================================
# MAIN ROUTER
# =========================================================

def route(text: str) -> RouteDecision:
    """
    Map free text to a tool, confidence and up to two alternatives.

    Parsing rules:
    1. Categories in `ROUTING_RULES` are tried in order; first keyword hit wins.
    2. Branches of the winning category are tried in order; first hit wins.
    3. No category hit -> `DEFAULT_DECISION`.

    Edge cases:
    - Empty or `None` text -> `DEFAULT_DECISION`. Rejecting empty prompts is
      the caller's job.
    """
    lowered = (text or "").lower()

    for category in ROUTING_RULES:
        if not has_any(lowered, category.keywords):
            continue

        for index, branch in enumerate(category.branches):
            if not branch.keywords or has_any(lowered, branch.keywords):
                logger.debug(
                    "Routed to %s via category=%s branch=%d",
                    branch.decision.tool.value, category.name, index,
                )
                return branch.decision

    logger.debug("No category matched; using default decision")
    return DEFAULT_DECISION


rule_router = route
