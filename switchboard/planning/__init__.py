"""Workflow planning package.

Pipeline:
    title -> category detection (`workflows`) -> step count
    (`step_estimator`) -> template selection (`template_selector`) -> tool
    diversity pass (`diversity`) -> quick/thorough `Workflow` pair.

All functions are pure and deterministic.
"""
