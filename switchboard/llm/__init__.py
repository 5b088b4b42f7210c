"""LLM access package for the run proxy.

Module split:
    - `provider_config`: environment-driven endpoint, model and key lookup.
    - `service`: prompt-to-payload adapter.
    - `client`: HTTP transport and response parsing.
"""
