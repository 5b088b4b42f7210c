"""Route decision data contract for the tool router.

Architectural role:
    Defines the schema returned by `switchboard.nlp.intent_router.route` and
    consumed by the HTTP/CLI adapters, which enrich it with a deep link.

Determinism:
    Purely structural. Determinism depends on the router that populates it.
"""

from dataclasses import dataclass, field

from switchboard.core.tools import Tool


@dataclass(frozen=True)
class RouteDecision:
    """Tool selection produced by the rule router.

    Attributes:
        tool: Primary tool for the request.
        confidence: Hard-coded rule confidence in `[0, 1]`.
        alternatives: Up to two other tools, distinct from `tool` and each other.
    """

    tool: Tool
    confidence: float
    alternatives: tuple[Tool, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "tool": self.tool.value,
            "confidence": self.confidence,
            "alternatives": [alt.value for alt in self.alternatives],
        }
