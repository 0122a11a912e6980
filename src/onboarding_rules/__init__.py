"""onboarding_rules — Rule core for instructor onboarding.

Public API:
    OnboardingPlanner — registers instructors and keeps their plan's progress current
    ModuleResolver    — picks the onboarding module and per-step step type
    StepCatalog       — loads YAML step definitions into typed models
    generate_access_code — builds a unique ``{track}{cohort}-{name}{n}`` code

Progress functions:
    update_progress            — recompute one step from its enabled tasks
    get_progress_percentage    — floor percentage of completed tasks
    update_instructor_progress — roll steps up into overall progress / current step

Models:
    Instructor, OnboardingStep, Task                  — runtime state
    StepDefinition, TaskTemplate, ...                 — catalog templates
    RegistrationRequest                               — registration input
    InstructorSummary, StepSummary, ModuleResolution  — read views
    QuizResult, ChecklistItemResult                   — submission outcomes
"""

from onboarding_rules.access_code import generate_access_code
from onboarding_rules.catalog import StepCatalog
from onboarding_rules.config import OnboardingSettings, load_settings
from onboarding_rules.models import (
    ChecklistItemResult,
    ContentType,
    Instructor,
    InstructorSummary,
    InstructorType,
    ModuleResolution,
    OnboardingModule,
    OnboardingStep,
    QuizResult,
    RegistrationRequest,
    StepDefinition,
    StepSummary,
    StepType,
    Task,
    TaskStatus,
    TaskTemplate,
    TimingVariable,
)
from onboarding_rules.planner import OnboardingPlanner
from onboarding_rules.progress import (
    get_progress_percentage,
    update_instructor_progress,
    update_progress,
)
from onboarding_rules.resolver import ModuleResolver

__all__ = [
    # Services
    "ModuleResolver",
    "OnboardingPlanner",
    "StepCatalog",
    "generate_access_code",
    # Config
    "OnboardingSettings",
    "load_settings",
    # Progress
    "get_progress_percentage",
    "update_instructor_progress",
    "update_progress",
    # Enums
    "ContentType",
    "InstructorType",
    "OnboardingModule",
    "StepType",
    "TaskStatus",
    "TimingVariable",
    # Models
    "ChecklistItemResult",
    "Instructor",
    "InstructorSummary",
    "ModuleResolution",
    "OnboardingStep",
    "QuizResult",
    "RegistrationRequest",
    "StepDefinition",
    "StepSummary",
    "Task",
    "TaskTemplate",
]
