"""Tests for template selection and extension."""

import pytest

from switchboard.core.tools import Tool
from switchboard.core.workflow_types import StepTemplate
from switchboard.planning.template_selector import select_templates


def _templates(*names):
    return [StepTemplate(title=name, description=f"Do {name}", tool=Tool.CHATGPT) for name in names]


FIVE = _templates("A", "B", "C", "D", "E")


def _titles(steps):
    return [step.title for step in steps]


def test_count_two_keeps_anchors_only():
    assert _titles(select_templates(FIVE, 2)) == ["A", "E"]


def test_middle_sampling_preserves_order():
    assert _titles(select_templates(FIVE, 3)) == ["A", "B", "E"]
    assert _titles(select_templates(FIVE, 4)) == ["A", "B", "C", "E"]
    assert _titles(select_templates(FIVE, 5)) == ["A", "B", "C", "D", "E"]


@pytest.mark.parametrize("count", [2, 3, 4, 5])
def test_anchor_invariant(count):
    steps = select_templates(FIVE, count)

    assert steps[0].title == "A"
    assert steps[-1].title == "E"
    assert len(steps) == count


def test_orders_and_ids_are_positions():
    steps = select_templates(FIVE, 4)

    assert [step.order for step in steps] == [1, 2, 3, 4]
    assert [step.id for step in steps] == ["1", "2", "3", "4"]


def test_extension_inserts_continuations_after_midpoint():
    templates = [
        StepTemplate("Research", "Gather facts", Tool.PERPLEXITY, "p1"),
        StepTemplate("Write Script", "Create a Script", Tool.CHATGPT, "p2"),
        StepTemplate("Create Video", "Render it", Tool.RUNWAY, "p3"),
    ]

    steps = select_templates(templates, 5)

    assert _titles(steps) == [
        "Research",
        "Write Script",
        "Write Script (Continued)",
        "Write Script (Continued)",
        "Create Video",
    ]
    assert steps[2].description == "Continue create a script"
    assert steps[2].tool == Tool.CHATGPT
    assert steps[2].prompt == "p2"
    assert [step.order for step in steps] == [1, 2, 3, 4, 5]


def test_single_template_is_extended():
    steps = select_templates(_templates("Only"), 3)

    assert _titles(steps) == ["Only", "Only (Continued)", "Only (Continued)"]


def test_empty_templates_rejected():
    with pytest.raises(ValueError):
        select_templates([], 2)


def test_count_below_two_rejected():
    with pytest.raises(ValueError):
        select_templates(FIVE, 1)
