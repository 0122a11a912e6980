"""Runtime models: an instructor, their steps, and the tasks inside each step.

These are the objects the aggregator and the planner mutate.  They are
plain pydantic models with no persistence behaviour; the caller maps them
to and from whatever storage it uses.

Derived fields (``OnboardingStep.total_tasks``, ``completed_tasks``,
``status`` and ``Instructor.overall_progress``, ``current_step``) are only
meaningful after ``progress.update_progress`` /
``progress.update_instructor_progress`` has run.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from onboarding_rules.models.catalog import (
    ChecklistItem,
    FileRequirement,
    QuizQuestion,
)
from onboarding_rules.models.enums import (
    ContentType,
    InstructorType,
    OnboardingModule,
    StepType,
    TaskStatus,
)


class Task(BaseModel):
    """A single unit of work within a step.

    Disabled tasks (``is_enabled=False``) are hidden from the instructor
    and excluded from every progress calculation.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Assigned by the caller's storage layer; None until persisted.
    id: Optional[int] = None
    title: str
    description: Optional[str] = None
    content_type: ContentType
    status: TaskStatus = TaskStatus.PENDING
    is_enabled: bool = True
    display_order: int = 0

    document_url: Optional[str] = None
    document_content: Optional[str] = None
    video_url: Optional[str] = None
    video_duration: Optional[int] = None
    required_files: List[FileRequirement] = []
    quiz_questions: List[QuizQuestion] = []
    checklist_items: List[ChecklistItem] = []

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED


class OnboardingStep(BaseModel):
    """One phase of an instructor's onboarding, owning an ordered task list."""

    model_config = ConfigDict(validate_assignment=True)

    step_number: int
    title: str
    emoji: Optional[str] = None
    d_day: int
    description: Optional[str] = None
    step_type: Optional[StepType] = None
    status: TaskStatus = TaskStatus.PENDING
    total_tasks: int = 0
    completed_tasks: int = 0
    tasks: List[Task] = []

    def add_task(self, task: Task) -> None:
        """Append a task and recompute the step's progress fields."""
        self.tasks.append(task)
        self._refresh_progress()

    def remove_task(self, task: Task) -> None:
        """Remove a task (by identity) and recompute the step's progress fields."""
        self.tasks = [t for t in self.tasks if t is not task]
        self._refresh_progress()

    def _refresh_progress(self) -> None:
        # Lazy import: progress imports this module
        from onboarding_rules.progress import update_progress

        update_progress(self)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @property
    def is_in_progress(self) -> bool:
        return self.status == TaskStatus.IN_PROGRESS


class Instructor(BaseModel):
    """An instructor being onboarded.

    ``onboarding_module`` is a snapshot taken at registration (or at the
    last explicit ``OnboardingPlanner.reresolve_module`` call); it is *not*
    recomputed as the start date approaches.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str
    track_code: str
    cohort: str
    access_code: Optional[str] = None
    start_date: date
    instructor_type: InstructorType
    onboarding_module: OnboardingModule
    current_step: int = 1
    overall_progress: int = 0
    steps: List[OnboardingStep] = []

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def has_completed_onboarding(self) -> bool:
        return self.overall_progress == 100

    def get_step(self, step_number: int) -> OnboardingStep:
        """Return the step with *step_number*.

        Raises:
            KeyError: if the instructor has no such step.
        """
        for step in self.steps:
            if step.step_number == step_number:
                return step
        raise KeyError(f"Step not found: step_number={step_number}")
