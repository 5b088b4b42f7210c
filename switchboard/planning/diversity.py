"""Single-pass tool diversity normalization for ordered task steps.

Rules, applied left to right for every position `i >= 1` where step `i` and
step `i - 1` share a defined tool:
1. Swap tools with step `i + 1` when it exists, has a defined tool, and that
   tool differs from the duplicated one.
2. Otherwise substitute a tool from a role pool chosen by keywords in the
   step title/description (research, writing, editing, planning, creation),
   taking the first pool member that is not the duplicated tool.
3. If the pool has nothing else, take the first catalog tool that is not the
   duplicated tool.

Known limitation:
    Each position is compared once against its already-normalized
    predecessor. A swap moves the duplicated tool to `i + 1`, where the next
    iteration handles it; earlier positions are never re-checked and a swap
    is not validated against step `i + 2` up front.

Determinism:
    Deterministic; input steps are copied and never mutated.
"""

from typing import Sequence

from switchboard.core.tools import TOOL_CATALOG, Tool
from switchboard.core.workflow_types import TaskStep


# =========================================================
# ROLE POOLS (checked in this order)
# =========================================================

ROLE_KEYWORDS = (
    ("research", ("research",)),
    ("writing", ("write", "draft", "script")),
    ("editing", ("edit", "refine", "polish")),
    ("planning", ("plan", "outline", "organize")),
)

ROLE_POOLS = {
    "research": (Tool.PERPLEXITY, Tool.CHATGPT),
    "writing": (Tool.CHATGPT, Tool.PERPLEXITY, Tool.TOME),
    "editing": (Tool.DESCRIPT, Tool.CANVA, Tool.CHATGPT),
    "planning": (Tool.CHATGPT, Tool.GAMMA, Tool.PERPLEXITY),
    "creation": (Tool.CANVA, Tool.GAMMA, Tool.DALLE, Tool.RUNWAY, Tool.SUNO),
}


def step_role(step: TaskStep) -> str:
    """Classify a step into a tool-pool role from its title and description."""
    text = f"{step.title} {step.description}".lower()
    for role, keywords in ROLE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return role
    return "creation"


def alternative_tool(step: TaskStep, duplicate: Tool) -> Tool:
    """Return a replacement for `duplicate` suited to the step's role."""
    for tool in ROLE_POOLS[step_role(step)]:
        if tool != duplicate:
            return tool
    for tool in TOOL_CATALOG:
        if tool != duplicate:
            return tool
    return duplicate


def diversify(steps: Sequence[TaskStep]) -> list[TaskStep]:
    """Remove back-to-back tool repeats with one forward sweep."""
    result = [step.copy() for step in steps]

    for i in range(1, len(result)):
        current, previous = result[i], result[i - 1]
        if current.tool is None or previous.tool is None or current.tool != previous.tool:
            continue

        duplicate = current.tool
        following = result[i + 1] if i + 1 < len(result) else None

        if following is not None and following.tool is not None and following.tool != duplicate:
            current.tool, following.tool = following.tool, current.tool
        else:
            current.tool = alternative_tool(current, duplicate)

    return result
