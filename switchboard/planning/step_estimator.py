"""Heuristic step-count estimation for thorough plans.

Scoring rules (starting from 2):
- +1 when the text is longer than 100 characters.
- +1 more when it is longer than 200 characters.
- +1 when it has more than 20 words.
- +1 when it mentions any complexity keyword.
- +1 when more than 2 distinct conjunctive words appear as whole words.

The result is clamped to `[MIN_STEPS, MAX_STEPS]`.

Determinism:
- Fully deterministic given identical input.
"""

import re


MIN_STEPS = 2
MAX_STEPS = 5

COMPLEXITY_KEYWORDS = (
    "comprehensive", "detailed", "complex", "thorough", "in-depth",
    "advanced", "multi-step", "professional", "complete", "full",
)

CONJUNCTIONS = {"and", "then", "after", "before", "also", "plus"}


def _tokenize(text: str):
    """Tokenize lower-cased text into word tokens."""
    return re.findall(r"\b\w+\b", text.lower())


def estimate_step_count(prompt: str) -> int:
    """Estimate how many steps a request needs, in `[2, 5]`."""
    text = prompt or ""
    lowered = text.lower()
    count = MIN_STEPS

    if len(text) > 100:
        count += 1
    if len(text) > 200:
        count += 1

    if len(text.split()) > 20:
        count += 1

    if any(keyword in lowered for keyword in COMPLEXITY_KEYWORDS):
        count += 1

    conjunctions_used = CONJUNCTIONS.intersection(_tokenize(lowered))
    if len(conjunctions_used) > 2:
        count += 1

    return max(MIN_STEPS, min(MAX_STEPS, count))
