"""Results returned when an instructor submits a quiz or ticks a checklist item.

Questions and checklist items are addressed by their index within the
task, the same way tasks are addressed by their index within a step.
"""

from typing import Dict

from pydantic import BaseModel

from onboarding_rules.models.enums import TaskStatus


class QuizResult(BaseModel):
    """Grading outcome for one quiz submission.

    ``results`` maps each graded question index to whether it was correct.
    The task is marked COMPLETED only when ``all_correct`` is True.
    """

    all_correct: bool
    correct_count: int
    total_questions: int
    results: Dict[int, bool]
    task_status: TaskStatus


class ChecklistItemResult(BaseModel):
    """State of a checklist item after an update, plus its task's status."""

    item_index: int
    label: str
    checked: bool
    task_status: TaskStatus
