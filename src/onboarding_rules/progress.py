"""Progress aggregation: derive step and instructor progress from task state.

Both functions are pure recomputations over the current task list: they
remember nothing from earlier calls, so running them twice in a row with no
task change in between yields identical results.  Callers must run
``update_progress`` on the owning step after *every* task status or
enablement change, then ``update_instructor_progress``, before persisting.

Step rules (enabled tasks only):

  - ``total_tasks``      = number of enabled tasks
  - ``completed_tasks``  = enabled tasks with status COMPLETED
  - status COMPLETED     iff every enabled task is COMPLETED or SKIPPED
  - status IN_PROGRESS   iff at least one is COMPLETED or SKIPPED
  - otherwise PENDING

SKIPPED counts as done for the status but not for ``completed_tasks``, so a
step can be COMPLETED while its percentage is below 100 (skip is not
credit).
"""

from __future__ import annotations

from onboarding_rules.models.enums import TaskStatus
from onboarding_rules.models.step import Instructor, OnboardingStep

_DONE_STATUSES = frozenset({TaskStatus.COMPLETED, TaskStatus.SKIPPED})


def update_progress(step: OnboardingStep) -> None:
    """Recompute ``completed_tasks``, ``total_tasks`` and ``status`` for *step*.

    Mutates *step* in place; does not persist.
    """
    if not step.tasks:
        step.completed_tasks = 0
        step.total_tasks = 0
        step.status = TaskStatus.PENDING
        return

    enabled = [task for task in step.tasks if task.is_enabled]
    step.total_tasks = len(enabled)

    if not enabled:
        step.completed_tasks = 0
        step.status = TaskStatus.PENDING
        return

    step.completed_tasks = sum(
        1 for task in enabled if task.status == TaskStatus.COMPLETED
    )
    done = sum(1 for task in enabled if task.status in _DONE_STATUSES)

    if done == step.total_tasks:
        step.status = TaskStatus.COMPLETED
    elif done > 0:
        step.status = TaskStatus.IN_PROGRESS
    else:
        step.status = TaskStatus.PENDING


def get_progress_percentage(step: OnboardingStep) -> int:
    """Return ``floor(completed_tasks * 100 / total_tasks)``, or 0 for an empty step."""
    if step.total_tasks == 0:
        return 0
    return step.completed_tasks * 100 // step.total_tasks


def update_instructor_progress(instructor: Instructor) -> None:
    """Roll task completion up into ``overall_progress`` and ``current_step``.

    ``overall_progress`` is the share of enabled tasks across all steps that
    are COMPLETED, as a percentage rounded half up.  ``current_step`` is the
    first step (by number) that is not COMPLETED; once every step is
    complete it is the highest step number.  Step statuses are read as
    stored, so ``update_progress`` must have run on changed steps first.
    """
    if not instructor.steps:
        instructor.overall_progress = 0
        instructor.current_step = 1
        return

    total = 0
    completed = 0
    current_step: int | None = None

    for step in sorted(instructor.steps, key=lambda s: s.step_number):
        enabled = [task for task in step.tasks if task.is_enabled]
        total += len(enabled)
        completed += sum(1 for task in enabled if task.status == TaskStatus.COMPLETED)
        if current_step is None and step.status != TaskStatus.COMPLETED:
            current_step = step.step_number

    if current_step is None:
        current_step = max(step.step_number for step in instructor.steps)

    # Integer round-half-up: 50.5 -> 51
    instructor.overall_progress = (
        (completed * 200 + total) // (total * 2) if total else 0
    )
    instructor.current_step = current_step
