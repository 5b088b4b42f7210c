"""Rule-based text routing utilities.

Module scope:
- Tool routing over a static keyword rule table (`intent_router`).
- Deep-link construction for routed tools (`deep_links`).

Determinism profile:
- Fully deterministic; no model inference and no I/O.
"""
