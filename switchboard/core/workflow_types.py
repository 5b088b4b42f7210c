"""Workflow planning data contracts.

Architectural role:
    Shared schema between the planning modules (`switchboard.planning`), the
    project store (planned steps are persisted as `TaskStep` dictionaries) and
    the API adapters.

Ordering:
    `TaskStep.order` is the 1-based position inside the owning workflow and is
    assigned by `select_templates`. Ids are the same position as a string.
"""

from dataclasses import dataclass, field, replace

from switchboard.core.tools import Tool, parse_tool


@dataclass(frozen=True)
class StepTemplate:
    """Unordered step blueprint used by the template selector."""

    title: str
    description: str
    tool: Tool | None = None
    prompt: str | None = None


@dataclass
class TaskStep:
    """One positioned unit of a workflow."""

    id: str
    title: str
    description: str
    order: int
    tool: Tool | None = None
    prompt: str | None = None

    @classmethod
    def from_template(cls, template: StepTemplate, position: int) -> "TaskStep":
        return cls(
            id=str(position),
            title=template.title,
            description=template.description,
            order=position,
            tool=template.tool,
            prompt=template.prompt,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "TaskStep":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            description=data.get("description", ""),
            order=int(data["order"]),
            tool=parse_tool(data.get("tool")),
            prompt=data.get("prompt"),
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "order": self.order,
        }
        if self.tool is not None:
            data["tool"] = self.tool.value
        if self.prompt is not None:
            data["prompt"] = self.prompt
        return data

    def copy(self) -> "TaskStep":
        return replace(self)


@dataclass
class Workflow:
    """Named quick or thorough path of task steps."""

    id: str
    name: str
    description: str
    steps: list[TaskStep] = field(default_factory=list)
    estimated_time: str | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "steps": [step.to_dict() for step in self.steps],
        }
        if self.estimated_time is not None:
            data["estimatedTime"] = self.estimated_time
        return data
