"""Select or extend step templates to an exact step count.

Selection (count <= number of templates):
    The first and last templates are anchors and always kept. The `count - 2`
    middle slots sample the templates strictly between the anchors at indices
    `floor(i * middle_len / middle_count)`, preserving template order.

Extension (count > number of templates):
    Start from every template in order. While short, copy the template nearest
    the midpoint (index `(n - 1) // 2`), mark the copy as a continuation and
    insert it right after that template.

Output:
    Exactly `count` `TaskStep` objects with `order` and `id` set to the 1-based
    position.

Preconditions:
    `templates` must be non-empty and `count >= 2`; violations raise
    `ValueError`.
"""

from dataclasses import replace
from typing import Sequence

from switchboard.core.workflow_types import StepTemplate, TaskStep


CONTINUED_SUFFIX = " (Continued)"


def continuation_of(template: StepTemplate) -> StepTemplate:
    """Return a continuation copy of `template`."""
    return replace(
        template,
        title=f"{template.title}{CONTINUED_SUFFIX}",
        description=f"Continue {template.description.lower()}",
    )


def _sample(templates: Sequence[StepTemplate], count: int) -> list[StepTemplate]:
    first, last = templates[0], templates[-1]
    if count == 2:
        return [first, last]

    middle = templates[1:-1]
    middle_count = count - 2
    sampled = [middle[(i * len(middle)) // middle_count] for i in range(middle_count)]
    return [first, *sampled, last]


def _extend(templates: Sequence[StepTemplate], count: int) -> list[StepTemplate]:
    selected = list(templates)
    source_index = (len(selected) - 1) // 2
    continuation = continuation_of(selected[source_index])

    while len(selected) < count:
        selected.insert(source_index + 1, continuation)

    return selected


def select_templates(templates: Sequence[StepTemplate], count: int) -> list[TaskStep]:
    """Pick exactly `count` templates and number them as task steps."""
    if not templates:
        raise ValueError("select_templates requires at least one template")
    if count < 2:
        raise ValueError(f"step count must be at least 2, got {count}")

    if count <= len(templates):
        selected = _sample(templates, count)
    else:
        selected = _extend(templates, count)

    return [
        TaskStep.from_template(template, position)
        for position, template in enumerate(selected[:count], start=1)
    ]
