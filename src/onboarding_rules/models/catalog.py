"""Pydantic models for the step catalog (``v1/steps.yaml``).

A catalog entry is a *template*: the planner copies it into a fresh
``OnboardingStep`` with its own ``Task`` instances for every instructor, so
progress on one instructor never leaks into the template or another
instructor.

  - StepDefinition: one onboarding step (number, title, emoji, D-Day, tasks)
  - TaskTemplate: one task inside a step, typed by ``content_type``
  - QuizQuestion / ChecklistItem / FileRequirement: task content payloads
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from onboarding_rules.models.enums import ContentType, QuestionType


class FileRequirement(BaseModel):
    """One file an instructor must submit for a file-upload (C) task."""

    placeholder: str
    file_name_hint: Optional[str] = None
    allowed_extensions: List[str] = []
    required: bool = True


class QuizQuestion(BaseModel):
    """Quiz question attached to a document (A) or video (B) task.

    Objective questions carry ``options`` and ``correct_answer_index``;
    subjective ones carry an optional ``correct_answer_text`` and an
    ``answer_guide`` for the PM who grades them.
    """

    question: str
    question_type: QuestionType = QuestionType.OBJECTIVE
    options: List[str] = []
    correct_answer_index: Optional[int] = None
    correct_answer_text: Optional[str] = None
    answer_guide: Optional[str] = None

    @model_validator(mode="after")
    def _check_answer_index(self) -> "QuizQuestion":
        if self.correct_answer_index is not None and not (
            0 <= self.correct_answer_index < len(self.options)
        ):
            raise ValueError(
                f"correct_answer_index {self.correct_answer_index} out of range "
                f"for {len(self.options)} options"
            )
        return self


class ChecklistItem(BaseModel):
    """One box on a checklist (D) task.

    ``is_checked`` is per-instructor state; catalog templates leave it False.
    """

    label: str
    is_checked: bool = False


class TaskTemplate(BaseModel):
    """Task blueprint inside a step definition."""

    title: str
    description: Optional[str] = None
    content_type: ContentType
    # Type A
    document_url: Optional[str] = None
    document_content: Optional[str] = None
    # Type B
    video_url: Optional[str] = None
    video_duration: Optional[int] = None
    # Type C
    required_files: List[FileRequirement] = []
    # Types A/B
    quiz_questions: List[QuizQuestion] = []
    # Type D
    checklist_items: List[ChecklistItem] = []


class StepDefinition(BaseModel):
    """One onboarding step as authored in the catalog.

    ``default_d_day`` may be omitted; the planner then falls back to the
    per-step-number default in ``constants.DEFAULT_D_DAYS``.
    """

    step_number: int = Field(ge=1)
    title: str
    emoji: Optional[str] = None
    default_d_day: Optional[int] = None
    description: Optional[str] = None
    tasks: List[TaskTemplate] = []
