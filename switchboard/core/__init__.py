"""Core data contracts package.

Composition:
    - `tools`: closed catalog of external AI tool identifiers.
    - `routing_types`: route decision schema produced by the tool router.
    - `workflow_types`: step template, task step and workflow schemas.

Import is deterministic and side-effect free.
"""
