"""Switchboard: route free-text requests to external AI tools and plan workflows.

Package layout:
- `core`: shared data contracts (tool catalog, route decisions, workflow types).
- `nlp`: rule-based tool router and deep-link construction.
- `planning`: step-count estimation, template selection, tool diversity and
  workflow synthesis.
- `memory`: JSON-backed project/step repository.
- `llm`: provider configuration and transport for the run proxy.
- `api`: HTTP and CLI adapters.
"""
