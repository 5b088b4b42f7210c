"""
Interactive CLI adapter for Switchboard.

Interface responsibilities:
- Accept stdin prompts and render routed tool cards to stdout.
- Expose local commands for planning and project bookkeeping.
- Delegate routing/planning to the pure core modules.

Request lifecycle (per user turn):
1. Read a single line from stdin.
2. Handle control commands (`exit`/`quit`, `/plan`, `/save`, `/projects`, `/help`).
3. Route any other text with `switchboard.nlp.intent_router.route`.
4. Print the rendered result.

Input validation behavior:
- Empty input is ignored.
- `/plan` and `/save` without a title print usage.

Error handling strategy:
- EOF and keyboard interrupts terminate the loop without traceback output.

Side effects:
- `/save` writes to the JSON project store (`SWITCHBOARD_STORE_PATH`).
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import sys

from switchboard.core.workflow_types import Workflow
from switchboard.llm.provider_config import STORE_PATH
from switchboard.memory.project_store import ProjectStore
from switchboard.nlp.deep_links import build_deep_link
from switchboard.nlp.intent_router import route
from switchboard.planning.workflows import THOROUGH_PATH, get_workflow_link, suggest_workflows


logger = logging.getLogger(__name__)

SEPARATOR = "-" * 60

HELP_TEXT = (
    "Commands:\n"
    " <text>            route a request to the best tool\n"
    " /plan <title>     suggest quick and thorough workflows\n"
    " /save <title>     create a project with the thorough plan\n"
    " /projects         list saved projects\n"
    " exit | quit       leave"
)


# =========================================================
# RENDERING
# =========================================================

def render_route(text: str) -> str:
    """Render the tool card for a routed prompt."""
    decision = route(text)
    link = build_deep_link(decision.tool, text)
    alternatives = ", ".join(alt.value for alt in decision.alternatives) or "-"
    return (
        f"Tool:         {decision.tool.value}\n"
        f"Confidence:   {decision.confidence:.2f}\n"
        f"Alternatives: {alternatives}\n"
        f"{link.label}: {link.url}"
    )


def render_workflow(workflow: Workflow) -> str:
    header = f"{workflow.name} ({workflow.id})"
    if workflow.estimated_time:
        header += f" - {workflow.estimated_time}"
    lines = [header, f"  {workflow.description}"]
    for step in workflow.steps:
        tool = step.tool.value if step.tool else "-"
        lines.append(f"  {step.order}. {step.title} [{tool}]")
        link = get_workflow_link(step)
        if link:
            lines.append(f"     {link.label}: {link.url}")
    return "\n".join(lines)


def render_plan(title: str) -> str:
    return "\n\n".join(render_workflow(w) for w in suggest_workflows(title))


def render_projects(store: ProjectStore) -> str:
    projects = store.list_projects()
    if not projects:
        return "No projects saved."
    lines = []
    for project in projects:
        marker = " (active)" if project["id"] == store.active_project_id else ""
        planned = len(project.get("planned_steps") or [])
        lines.append(f"{project['id']}  {project['title']}  [{planned} planned steps]{marker}")
    return "\n".join(lines)


def save_project(store: ProjectStore, title: str) -> str:
    """Create a project whose planned steps are the first thorough plan."""
    project_id = store.create_project(title)
    thorough = next(w for w in suggest_workflows(title) if w.name == THOROUGH_PATH)
    store.set_planned_steps(project_id, thorough.steps)
    return f"Saved project {project_id} with {len(thorough.steps)} planned steps ({thorough.id})."


# =========================================================
# COMMAND DISPATCH
# =========================================================

def handle_input(line: str, store: ProjectStore) -> str | None:
    """
    Return the output for one line of user input.

    Returns `None` for empty input. Exit commands are handled by `main`.
    """
    text = line.strip()
    if not text:
        return None

    command, _, argument = text.partition(" ")
    command = command.lower()
    argument = argument.strip()

    if command == "/help":
        return HELP_TEXT

    if command == "/plan":
        return render_plan(argument) if argument else "Usage: /plan <title>"

    if command == "/save":
        return save_project(store, argument) if argument else "Usage: /save <title>"

    if command == "/projects":
        return render_projects(store)

    return render_route(text)


# =========================================================
# UTF-8 SAFE OUTPUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except Exception:
        pass


# =========================================================
# MAIN
# =========================================================

def main():
    """Run the interactive terminal session."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    store = ProjectStore(STORE_PATH)

    print("Switchboard started. (Type '/help' for commands, 'exit' to quit)")
    print(SEPARATOR)

    while True:

        try:
            line = input("Request: ")

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if line.strip().lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        output = handle_input(line, store)
        if output is None:
            continue

        print()
        print(output)
        print("\n" + SEPARATOR + "\n")


if __name__ == "__main__":
    main()
