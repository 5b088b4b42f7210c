"""Project and step repository backed by a JSON key-value file.

Purpose of this abstraction:
    Hold the user's projects, their saved steps (prompts, decisions, outputs,
    links, notes) and planned `TaskStep` lists. Callers get an explicit
    `ProjectStore` instance; there is no module-level store.

Persisted shape (`switchboard_store.json`):
    {
      "projects": {<id>: {"id", "title", "created_at", "step_ids",
                          "planned_steps", "notes"}},
      "steps": {<id>: {"id", "project_id", "type", "created_at", "payload"}},
      "active_project_id": <id or null>
    }

Concurrency:
    Reads and mutations run under a `threading.Lock`. Reads return copies.
    Mutations rewrite the file atomically (`<path>.tmp` + `os.replace`).

Failure handling:
    - Unknown project/step ids are no-ops returning `False`/`None`.
    - An unreadable store file is logged and treated as empty.
    - Write failures propagate to the caller.
"""

import copy
import json
import logging
import os
import random
import string
import threading
import time
from typing import Iterable

from switchboard.core.workflow_types import TaskStep


logger = logging.getLogger(__name__)


STEP_TYPES = ("prompt", "decision", "output", "link", "note")
REORDER_DIRECTIONS = ("up", "down")
ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 8


def new_id() -> str:
    """Return a random 8-character base-36 identifier."""
    return "".join(random.choices(ID_ALPHABET, k=ID_LENGTH))


def now_ms() -> int:
    return int(time.time() * 1000)


def empty_state() -> dict:
    return {"projects": {}, "steps": {}, "active_project_id": None}


def atomic_json_save(path, data):
    """Persist JSON data atomically via temporary file replacement."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    os.replace(tmp, path)


def load_state(path) -> dict:
    """Load store state from disk, or an empty state when missing/unreadable."""
    if not os.path.exists(path):
        return empty_state()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception:
        logger.exception("Failed to load project store from %s", path)
        return empty_state()

    if not isinstance(data, dict):
        logger.warning("Ignoring malformed project store at %s", path)
        return empty_state()

    state = empty_state()
    state["projects"] = dict(data.get("projects") or {})
    state["steps"] = dict(data.get("steps") or {})
    state["active_project_id"] = data.get("active_project_id")
    return state


class ProjectStore:
    """Repository over projects, saved steps and planned steps."""

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()
        self._state = load_state(path)

    # -----------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------

    def _save(self):
        atomic_json_save(self.path, self._state)

    def _project(self, project_id):
        return self._state["projects"].get(project_id)

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------

    @property
    def active_project_id(self):
        return self._state["active_project_id"]

    def get_project(self, project_id) -> dict | None:
        with self._lock:
            project = self._project(project_id)
            return copy.deepcopy(project) if project is not None else None

    def list_projects(self) -> list[dict]:
        """Return projects newest first."""
        with self._lock:
            projects = sorted(
                self._state["projects"].values(),
                key=lambda p: p.get("created_at", 0),
                reverse=True,
            )
            return [copy.deepcopy(p) for p in projects]

    def get_steps(self, project_id) -> list[dict]:
        """Return a project's saved steps in their stored order."""
        with self._lock:
            project = self._project(project_id)
            if project is None:
                return []
            steps = self._state["steps"]
            return [copy.deepcopy(steps[sid]) for sid in project["step_ids"] if sid in steps]

    def get_planned_steps(self, project_id) -> list[TaskStep]:
        with self._lock:
            project = self._project(project_id)
            if project is None:
                return []
            planned = list(project.get("planned_steps") or [])
        return [TaskStep.from_dict(item) for item in planned]

    # -----------------------------------------------------
    # Project operations
    # -----------------------------------------------------

    def create_project(self, title: str) -> str:
        """Create a project, make it active and return its id."""
        with self._lock:
            project_id = new_id()
            self._state["projects"][project_id] = {
                "id": project_id,
                "title": title,
                "created_at": now_ms(),
                "step_ids": [],
                "planned_steps": [],
                "notes": "",
            }
            self._state["active_project_id"] = project_id
            self._save()
        logger.info("Created project %s", project_id)
        return project_id

    def rename_project(self, project_id, title: str) -> bool:
        with self._lock:
            project = self._project(project_id)
            if project is None:
                return False
            project["title"] = title
            project.setdefault("planned_steps", [])
            project.setdefault("notes", "")
            self._save()
        return True

    def delete_project(self, project_id) -> bool:
        """Delete a project and its steps; clears the active pointer if needed."""
        with self._lock:
            project = self._state["projects"].pop(project_id, None)
            if project is None:
                return False
            for step_id in project["step_ids"]:
                self._state["steps"].pop(step_id, None)
            if self._state["active_project_id"] == project_id:
                self._state["active_project_id"] = None
            self._save()
        logger.info("Deleted project %s", project_id)
        return True

    def set_active_project(self, project_id) -> None:
        with self._lock:
            self._state["active_project_id"] = project_id
            self._save()

    def update_project_notes(self, project_id, notes: str) -> bool:
        with self._lock:
            project = self._project(project_id)
            if project is None:
                return False
            project["notes"] = notes
            project.setdefault("planned_steps", [])
            self._save()
        return True

    def set_planned_steps(self, project_id, steps: Iterable[TaskStep]) -> bool:
        with self._lock:
            project = self._project(project_id)
            if project is None:
                return False
            project["planned_steps"] = [step.to_dict() for step in steps]
            project.setdefault("notes", "")
            self._save()
        return True

    # -----------------------------------------------------
    # Step operations
    # -----------------------------------------------------

    def add_step(self, project_id, step_type: str, payload: dict | None = None) -> str | None:
        """Append a saved step to a project and return its id.

        Raises:
            ValueError: `step_type` is not one of `STEP_TYPES`.
        """
        if step_type not in STEP_TYPES:
            raise ValueError(f"Unknown step type: {step_type}")

        with self._lock:
            project = self._project(project_id)
            if project is None:
                return None
            step_id = new_id()
            self._state["steps"][step_id] = {
                "id": step_id,
                "project_id": project_id,
                "type": step_type,
                "created_at": now_ms(),
                "payload": dict(payload or {}),
            }
            project["step_ids"].append(step_id)
            self._save()
        return step_id

    def delete_step(self, project_id, step_id) -> bool:
        with self._lock:
            project = self._project(project_id)
            if project is None or step_id not in self._state["steps"]:
                return False
            del self._state["steps"][step_id]
            project["step_ids"] = [sid for sid in project["step_ids"] if sid != step_id]
            self._save()
        return True

    def reorder_step(self, project_id, step_id, direction: str) -> bool:
        """Move a step one position `"up"` or `"down"`; no-op at the ends.

        Any other direction is rejected with `False`.
        """
        if direction not in REORDER_DIRECTIONS:
            return False

        with self._lock:
            project = self._project(project_id)
            if project is None or step_id not in project["step_ids"]:
                return False
            step_ids = project["step_ids"]
            index = step_ids.index(step_id)
            target = index - 1 if direction == "up" else index + 1
            if target < 0 or target >= len(step_ids):
                return False
            step_ids.insert(target, step_ids.pop(index))
            self._save()
        return True

    def clear_all(self) -> None:
        with self._lock:
            self._state = empty_state()
            self._save()
