"""Workflow synthesis from a project title.

Architectural role:
    Turns a project title into quick/thorough `Workflow` pairs that UI and API
    layers render as plan suggestions. Each step may carry a tool and prompt,
    which `get_workflow_link` turns into a deep link.

Category detection:
    Six independent keyword predicates over the lower-cased title (video,
    image, audio, presentation, web, writing). Every matching category
    appends its own pair, so the output has `2 * matched` workflows, or the
    default pair when nothing matches.

Plan construction:
    - Quick path: one step using the category's primary tool with the raw
      title as prompt.
    - Thorough path: the category's three templates go through
      `estimate_step_count` -> `select_templates` -> `diversify`. The thorough
      step count never drops below the template count.

Determinism:
    Pure and deterministic for a given title.
"""

from dataclasses import dataclass

from switchboard.core.tools import Tool
from switchboard.core.workflow_types import StepTemplate, TaskStep, Workflow
from switchboard.nlp.deep_links import DeepLink, build_deep_link
from switchboard.planning.diversity import diversify
from switchboard.planning.step_estimator import estimate_step_count
from switchboard.planning.template_selector import select_templates


QUICK_PATH = "Quick Path"
THOROUGH_PATH = "Thorough Path"


@dataclass(frozen=True)
class TemplateSpec:
    """Step template whose prompt is formatted with the project title."""

    title: str
    description: str
    tool: Tool
    prompt: str = "{title}"

    def render(self, project_title: str) -> StepTemplate:
        return StepTemplate(
            title=self.title,
            description=self.description,
            tool=self.tool,
            prompt=self.prompt.format(title=project_title),
        )


@dataclass(frozen=True)
class CategoryPlan:
    """Everything needed to build one category's quick/thorough pair."""

    name: str
    keywords: tuple[str, ...]
    quick_description: str
    quick_time: str
    quick_step: TemplateSpec
    thorough_description: str
    thorough_time: str
    templates: tuple[TemplateSpec, ...]

    def matches(self, lowered_title: str) -> bool:
        return any(keyword in lowered_title for keyword in self.keywords)


# =========================================================
# CATEGORY PLANS
# =========================================================

VIDEO_PLAN = CategoryPlan(
    name="video",
    keywords=("video", "film", "movie"),
    quick_description="Jump straight to the best video platform",
    quick_time="5-10 min",
    quick_step=TemplateSpec("Create Video", "Generate your video using AI video tools", Tool.RUNWAY),
    thorough_description="Research first, then script, then create video",
    thorough_time="30-60 min",
    templates=(
        TemplateSpec("Research", "Gather information and facts about your topic",
                     Tool.PERPLEXITY, "Research information about: {title}"),
        TemplateSpec("Write Script", "Create a script or outline for your video", Tool.CHATGPT,
                     "Write a script for a video about: {title}. "
                     "Include engaging content, clear structure, and key points."),
        TemplateSpec("Create Video", "Generate your video using the script",
                     Tool.RUNWAY, "Create a video about: {title}"),
    ),
)

IMAGE_PLAN = CategoryPlan(
    name="image",
    keywords=("image", "design", "graphic", "logo"),
    quick_description="Generate image directly",
    quick_time="2-5 min",
    quick_step=TemplateSpec("Generate Image", "Create your image using AI", Tool.DALLE),
    thorough_description="Research and refine before creating",
    thorough_time="15-30 min",
    templates=(
        TemplateSpec("Research Styles", "Find inspiration and style references",
                     Tool.PERPLEXITY, "Find design inspiration and styles for: {title}"),
        TemplateSpec("Generate Image", "Create your image with refined prompts", Tool.DALLE),
        TemplateSpec("Edit in Canva", "Polish and edit your design", Tool.CANVA),
    ),
)

AUDIO_PLAN = CategoryPlan(
    name="audio",
    keywords=("audio", "music", "song", "podcast"),
    quick_description="Generate audio directly",
    quick_time="3-5 min",
    quick_step=TemplateSpec("Generate Audio", "Create your audio content", Tool.SUNO),
    thorough_description="Plan and produce polished audio",
    thorough_time="20-40 min",
    templates=(
        TemplateSpec("Research", "Research your topic",
                     Tool.PERPLEXITY, "Research information about: {title}"),
        TemplateSpec("Write Script", "Create script or lyrics",
                     Tool.CHATGPT, "Write a script or lyrics for: {title}"),
        TemplateSpec("Generate Audio", "Produce your audio content", Tool.SUNO),
    ),
)

PRESENTATION_PLAN = CategoryPlan(
    name="presentation",
    keywords=("presentation", "slide", "deck"),
    quick_description="Generate presentation directly",
    quick_time="5-10 min",
    quick_step=TemplateSpec("Create Presentation", "Generate your presentation", Tool.GAMMA),
    thorough_description="Research and structure before creating",
    thorough_time="30-45 min",
    templates=(
        TemplateSpec("Research", "Gather information for your presentation",
                     Tool.PERPLEXITY, "Research information about: {title}"),
        TemplateSpec("Outline Content", "Structure your presentation content",
                     Tool.CHATGPT, "Create an outline for a presentation about: {title}"),
        TemplateSpec("Create Presentation", "Generate your polished presentation", Tool.GAMMA),
    ),
)

WEB_PLAN = CategoryPlan(
    name="web",
    keywords=("website", "web", "app", "page"),
    quick_description="Generate website directly",
    quick_time="5-10 min",
    quick_step=TemplateSpec("Create Website", "Generate your website", Tool.FRAMER_AI),
    thorough_description="Plan and design before building",
    thorough_time="45-90 min",
    templates=(
        TemplateSpec("Research & Plan", "Research similar websites and plan features",
                     Tool.PERPLEXITY, "Research best practices and features for: {title}"),
        TemplateSpec("Design Mockup", "Create design concepts",
                     Tool.CANVA, "Design mockup for: {title}"),
        TemplateSpec("Build Website", "Generate your website", Tool.FRAMER_AI),
    ),
)

WRITING_PLAN = CategoryPlan(
    name="writing",
    keywords=("write", "article", "blog", "content"),
    quick_description="Generate content directly",
    quick_time="3-5 min",
    quick_step=TemplateSpec("Write Content", "Generate your content", Tool.CHATGPT),
    thorough_description="Research and refine your content",
    thorough_time="20-30 min",
    templates=(
        TemplateSpec("Research", "Gather information and facts",
                     Tool.PERPLEXITY, "Research information about: {title}"),
        TemplateSpec("Draft Content", "Write your first draft",
                     Tool.CHATGPT, "Write content about: {title}"),
        TemplateSpec("Refine & Edit", "Improve and polish your content",
                     Tool.CHATGPT, "Improve and refine this content: {title}"),
    ),
)

DEFAULT_PLAN = CategoryPlan(
    name="default",
    keywords=(),
    quick_description="Get started immediately",
    quick_time="5-10 min",
    quick_step=TemplateSpec("Start Task", "Begin working on your project", Tool.CHATGPT),
    thorough_description="Plan and execute systematically",
    thorough_time="30-60 min",
    templates=(
        TemplateSpec("Research", "Research your topic",
                     Tool.PERPLEXITY, "Research information about: {title}"),
        TemplateSpec("Plan & Organize", "Create a plan for your project",
                     Tool.CHATGPT, "Create a detailed plan for: {title}"),
        TemplateSpec("Execute", "Work on your project", Tool.CHATGPT),
    ),
)

# Evaluation order is output order.
CATEGORY_PLANS = (
    VIDEO_PLAN,
    IMAGE_PLAN,
    AUDIO_PLAN,
    PRESENTATION_PLAN,
    WEB_PLAN,
    WRITING_PLAN,
)


# =========================================================
# BUILDERS
# =========================================================

def build_quick_workflow(plan: CategoryPlan, project_title: str) -> Workflow:
    """Build the single-step quick path; the prompt is the raw title."""
    step = TaskStep.from_template(plan.quick_step.render(project_title), 1)
    return Workflow(
        id=f"quick-{plan.name}",
        name=QUICK_PATH,
        description=plan.quick_description,
        estimated_time=plan.quick_time,
        steps=[step],
    )


def build_thorough_workflow(plan: CategoryPlan, project_title: str) -> Workflow:
    """Build the diversified multi-step thorough path."""
    templates = [spec.render(project_title) for spec in plan.templates]
    count = max(len(templates), estimate_step_count(project_title))
    steps = diversify(select_templates(templates, count))
    return Workflow(
        id=f"thorough-{plan.name}",
        name=THOROUGH_PATH,
        description=plan.thorough_description,
        estimated_time=plan.thorough_time,
        steps=steps,
    )


def matched_plans(project_title: str) -> list[CategoryPlan]:
    """Return every category plan whose keywords appear in the title."""
    lowered = (project_title or "").lower()
    return [plan for plan in CATEGORY_PLANS if plan.matches(lowered)]


def suggest_workflows(project_title: str) -> list[Workflow]:
    """Return quick/thorough workflow pairs for every matched category.

    Edge cases:
    - No category matches (including empty title) -> the default pair.
    """
    project_title = project_title or ""
    plans = matched_plans(project_title) or [DEFAULT_PLAN]

    workflows = []
    for plan in plans:
        workflows.append(build_quick_workflow(plan, project_title))
        workflows.append(build_thorough_workflow(plan, project_title))
    return workflows


def get_workflow_link(step: TaskStep) -> DeepLink | None:
    """Deep link for a step, or `None` when it lacks a tool or prompt."""
    if step.tool is None or not step.prompt:
        return None
    return build_deep_link(step.tool, step.prompt)
