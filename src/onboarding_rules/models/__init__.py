"""Public model re-exports for onboarding_rules.

Consumers should import from ``onboarding_rules.models`` rather than
reaching into sub-modules directly.
"""

# --- Enumerations ---
from onboarding_rules.models.enums import (
    ContentType,
    InstructorType,
    OnboardingModule,
    QuestionType,
    StepType,
    TaskStatus,
    TimingVariable,
)

# --- Catalog ---
from onboarding_rules.models.catalog import (
    ChecklistItem,
    FileRequirement,
    QuizQuestion,
    StepDefinition,
    TaskTemplate,
)

# --- Registration ---
from onboarding_rules.models.registration import RegistrationRequest

# --- Runtime ---
from onboarding_rules.models.step import Instructor, OnboardingStep, Task

# --- Submissions ---
from onboarding_rules.models.submission import ChecklistItemResult, QuizResult

# --- Summaries ---
from onboarding_rules.models.summary import (
    InstructorSummary,
    ModuleResolution,
    StepSummary,
)

__all__ = [
    # Enums
    "ContentType",
    "InstructorType",
    "OnboardingModule",
    "QuestionType",
    "StepType",
    "TaskStatus",
    "TimingVariable",
    # Catalog
    "ChecklistItem",
    "FileRequirement",
    "QuizQuestion",
    "StepDefinition",
    "TaskTemplate",
    # Registration
    "RegistrationRequest",
    # Runtime
    "Instructor",
    "OnboardingStep",
    "Task",
    # Submissions
    "ChecklistItemResult",
    "QuizResult",
    # Summaries
    "InstructorSummary",
    "ModuleResolution",
    "StepSummary",
]
