"""Summary models for the read-only view the portal renders.

Decoupled from the mutable runtime models so dashboard consumers never
depend on task internals.  ``timing_variable`` and ``d_day`` are computed
live at summary time, while ``onboarding_module`` is the stored snapshot;
the two can disagree once the start date crosses the 14-day threshold.
"""

from datetime import date

from pydantic import BaseModel

from onboarding_rules.models.enums import (
    InstructorType,
    OnboardingModule,
    StepType,
    TaskStatus,
    TimingVariable,
)


class StepSummary(BaseModel):
    """One step as shown on the instructor dashboard (enabled tasks only)."""

    step_number: int
    title: str
    emoji: str | None = None
    d_day: int
    step_type: StepType | None = None
    status: TaskStatus
    total_tasks: int
    completed_tasks: int
    progress_percentage: int
    task_titles: list[str]


class ModuleResolution(BaseModel):
    """Result of resolving an instructor's timing and module."""

    instructor_type: InstructorType
    timing_variable: TimingVariable
    onboarding_module: OnboardingModule
    days_until_start: int


class InstructorSummary(BaseModel):
    """Dashboard header plus per-step progress for one instructor."""

    name: str
    access_code: str | None = None
    track_code: str
    cohort: str
    start_date: date
    d_day: int
    instructor_type: InstructorType
    instructor_type_label: str
    onboarding_module: OnboardingModule
    onboarding_module_label: str
    timing_variable: TimingVariable
    timing_variable_label: str
    current_step: int
    overall_progress: int
    steps: list[StepSummary]
