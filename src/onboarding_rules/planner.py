"""OnboardingPlanner — turns a registration into a per-instructor step plan.

The planner is the in-process service layer a portal backend calls.  It
combines the three rule components:

    ModuleResolver  — which module, and how each step is run under it
    StepCatalog     — the step/task templates to copy from
    progress        — recompute step and instructor progress after changes

No persistence happens here.  Every method mutates or returns in-memory
models; the caller saves them inside its own transaction.

Task-change flow (every mutation goes through the same two recomputes):

    set_task_status / set_task_enabled / submit_quiz / set_checklist_item
        -> update_progress(step)
        -> update_instructor_progress(instructor)
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, Mapping

from onboarding_rules.access_code import generate_access_code
from onboarding_rules.catalog import StepCatalog, default_d_day
from onboarding_rules.constants import MODULE_MISSING_MESSAGE
from onboarding_rules.models.catalog import QuizQuestion, StepDefinition
from onboarding_rules.models.enums import (
    InstructorType,
    OnboardingModule,
    QuestionType,
    StepType,
    TaskStatus,
    TimingVariable,
)
from onboarding_rules.models.registration import RegistrationRequest
from onboarding_rules.models.step import Instructor, OnboardingStep, Task
from onboarding_rules.models.submission import ChecklistItemResult, QuizResult
from onboarding_rules.models.summary import InstructorSummary, StepSummary
from onboarding_rules.progress import (
    get_progress_percentage,
    update_instructor_progress,
    update_progress,
)
from onboarding_rules.resolver import ModuleResolver

logger = logging.getLogger(__name__)

DEFAULT_INSTRUCTOR_TYPE = InstructorType.NEWBIE


def parse_instructor_type(value: InstructorType | str | None) -> InstructorType:
    """Accept an enum member, its name, or its Korean label.

    Missing or unrecognised values fall back to NEWBIE with a warning, the
    same default the registration form applies.
    """
    if isinstance(value, InstructorType):
        return value
    if value is None or not str(value).strip():
        logger.warning(
            "Instructor type missing, defaulting to %s", DEFAULT_INSTRUCTOR_TYPE.value,
        )
        return DEFAULT_INSTRUCTOR_TYPE

    text = str(value).strip()
    try:
        return InstructorType[text.upper()]
    except KeyError:
        pass
    parsed = InstructorType.from_korean(text)
    if parsed is None:
        logger.warning(
            "Unknown instructor type %r, defaulting to %s",
            text, DEFAULT_INSTRUCTOR_TYPE.value,
        )
        return DEFAULT_INSTRUCTOR_TYPE
    return parsed


class OnboardingPlanner:
    """Builds and maintains instructor onboarding plans.

    Args:
        catalog: a loaded :class:`StepCatalog`
        resolver: module resolver; defaults to one over the built-in table
        access_code_exists: callback telling whether an access code is
            already taken in the caller's store.  Defaults to "never taken".
    """

    def __init__(
        self,
        catalog: StepCatalog,
        resolver: ModuleResolver | None = None,
        access_code_exists: Callable[[str], bool] | None = None,
    ) -> None:
        self._catalog = catalog
        self._resolver = resolver or ModuleResolver()
        self._access_code_exists = access_code_exists or (lambda code: False)

    @property
    def resolver(self) -> ModuleResolver:
        return self._resolver

    # ==================================================================
    # Registration
    # ==================================================================

    def register_instructor(
        self, request: RegistrationRequest, today: date | None = None
    ) -> Instructor:
        """Create an instructor with a fully materialised step plan.

        Raises:
            ValueError: if the name yields no usable access code characters.
            KeyError: if ``selected_step_numbers`` names an unknown catalog step.
        """
        instructor_type = parse_instructor_type(request.instructor_type)
        resolution = self._resolver.resolve(instructor_type, request.start_date, today)
        module = resolution.onboarding_module

        access_code = generate_access_code(
            request.track_code, request.cohort, request.name, self._access_code_exists,
        )
        steps = self.materialize_steps(module, request.selected_step_numbers)

        instructor = Instructor(
            name=request.name,
            track_code=request.track_code,
            cohort=request.cohort,
            access_code=access_code,
            start_date=request.start_date,
            instructor_type=instructor_type,
            onboarding_module=module,
            steps=steps,
        )
        update_instructor_progress(instructor)

        logger.info(
            "Instructor registered: access_code=%s, type=%s, timing=%s, module=%s, steps=%d",
            access_code,
            instructor_type.value,
            resolution.timing_variable.value,
            module.value,
            len(steps),
        )
        return instructor

    # ==================================================================
    # Step materialisation
    # ==================================================================

    def materialize_steps(
        self,
        module: OnboardingModule,
        selected_step_numbers: Iterable[int] | None = None,
    ) -> list[OnboardingStep]:
        """Build fresh steps for *module* from the catalog.

        Without a selection, one step is created per non-SKIP entry in the
        module table, keeping the catalog's step numbers.  Steps the module
        includes but the catalog lacks are skipped with a warning.

        With a selection, the chosen definitions are renumbered 1..n in the
        order given and each position takes its step type from the module
        table.  A position whose type is SKIP is dropped but still consumes
        its number, so the remaining steps keep gaps where it would sit.

        Raises:
            ValueError: if ``module`` is ``None``.
            KeyError: if a selected step number is not in the catalog.
        """
        if selected_step_numbers is not None:
            return self._materialize_selected(module, list(selected_step_numbers))

        steps: list[OnboardingStep] = []
        for step_number in self._resolver.get_included_steps(module):
            if not self._catalog.has_step(step_number):
                logger.warning(
                    "Step %d included by module %s but missing from catalog, skipping",
                    step_number, module.value,
                )
                continue
            steps.append(
                self._build_step(
                    self._catalog.get_definition(step_number),
                    step_number=step_number,
                    step_type=self._resolver.get_step_type(module, step_number),
                    d_day=self._catalog.resolve_d_day(step_number),
                )
            )
        return steps

    def _materialize_selected(
        self, module: OnboardingModule, selected: list[int]
    ) -> list[OnboardingStep]:
        if module is None:
            raise ValueError(MODULE_MISSING_MESSAGE)

        # Resolve every definition first so an unknown number fails before
        # anything is built.
        definitions = [self._catalog.get_definition(n) for n in selected]

        steps: list[OnboardingStep] = []
        for position, definition in enumerate(definitions, start=1):
            step_type = self._resolver.get_step_type(module, position)
            if step_type is StepType.SKIP:
                logger.debug(
                    "Dropping %r at position %d: SKIP under module %s",
                    definition.title, position, module.value,
                )
                continue
            d_day = (
                definition.default_d_day
                if definition.default_d_day is not None
                else default_d_day(position)
            )
            steps.append(
                self._build_step(
                    definition, step_number=position, step_type=step_type, d_day=d_day,
                )
            )
        return steps

    @staticmethod
    def _build_step(
        definition: StepDefinition,
        *,
        step_number: int,
        step_type: StepType,
        d_day: int,
    ) -> OnboardingStep:
        # model_dump + re-validation gives each instructor independent copies
        # of the nested quiz/file/checklist models.
        tasks = [
            Task(**template.model_dump(), display_order=order)
            for order, template in enumerate(definition.tasks)
        ]
        step = OnboardingStep(
            step_number=step_number,
            title=definition.title,
            emoji=definition.emoji,
            d_day=d_day,
            description=definition.description,
            step_type=step_type,
            tasks=tasks,
        )
        update_progress(step)
        return step

    # ==================================================================
    # Task changes
    # ==================================================================

    def set_task_status(
        self,
        instructor: Instructor,
        step_number: int,
        task_index: int,
        status: TaskStatus | str,
    ) -> Task:
        """Set one task's status and recompute step and instructor progress.

        Raises:
            KeyError: unknown step number or task index.
            ValueError: unknown status value.
        """
        step = instructor.get_step(step_number)
        task = _task_at(step, task_index)
        task.status = TaskStatus(status)
        self._recompute(instructor, step)
        logger.debug(
            "Task status set: access_code=%s, step=%d, task=%d, status=%s",
            instructor.access_code, step_number, task_index, task.status.value,
        )
        return task

    def set_task_enabled(
        self,
        instructor: Instructor,
        step_number: int,
        task_index: int,
        enabled: bool,
    ) -> Task:
        """PM toggle: show or hide a task, then recompute progress.

        Raises:
            KeyError: unknown step number or task index.
        """
        step = instructor.get_step(step_number)
        task = _task_at(step, task_index)
        task.is_enabled = enabled
        self._recompute(instructor, step)
        return task

    @staticmethod
    def _recompute(instructor: Instructor, step: OnboardingStep) -> None:
        update_progress(step)
        update_instructor_progress(instructor)

    # ==================================================================
    # Quiz and checklist submissions
    # ==================================================================

    def submit_quiz(
        self,
        instructor: Instructor,
        step_number: int,
        task_index: int,
        objective_answers: Mapping[int, int] | None = None,
        subjective_answers: Mapping[int, str] | None = None,
    ) -> QuizResult:
        """Grade a quiz submission and complete the task if every answer is right.

        Answers are keyed by question index within the task.  Objective
        answers match on the option index; subjective answers are graded
        with :func:`grade_subjective_answer`.  A submission with at least
        one wrong answer leaves the task status unchanged.

        Raises:
            KeyError: unknown step number, task index or question index.
            ValueError: an answer was given for a question of the other type.
        """
        step = instructor.get_step(step_number)
        task = _task_at(step, task_index)

        results: dict[int, bool] = {}
        for index, selected in (objective_answers or {}).items():
            question = _question_at(task, index, QuestionType.OBJECTIVE)
            results[index] = (
                question.correct_answer_index is not None
                and question.correct_answer_index == selected
            )
        for index, text in (subjective_answers or {}).items():
            question = _question_at(task, index, QuestionType.SUBJECTIVE)
            results[index] = grade_subjective_answer(text, question.correct_answer_text)

        correct_count = sum(1 for ok in results.values() if ok)
        all_correct = bool(results) and correct_count == len(results)
        if all_correct:
            task.status = TaskStatus.COMPLETED
            self._recompute(instructor, step)

        logger.debug(
            "Quiz graded: access_code=%s, step=%d, task=%d, correct=%d/%d",
            instructor.access_code, step_number, task_index, correct_count, len(results),
        )
        return QuizResult(
            all_correct=all_correct,
            correct_count=correct_count,
            total_questions=len(results),
            results=results,
            task_status=task.status,
        )

    def set_checklist_item(
        self,
        instructor: Instructor,
        step_number: int,
        task_index: int,
        item_index: int,
        checked: bool,
    ) -> ChecklistItemResult:
        """Tick or untick one checklist item.

        When every item of the task is checked the task becomes COMPLETED.
        Unticking an item afterwards does not reopen the task.

        Raises:
            KeyError: unknown step number, task index or item index.
        """
        step = instructor.get_step(step_number)
        task = _task_at(step, task_index)
        if not 0 <= item_index < len(task.checklist_items):
            raise KeyError(
                f"Checklist item not found: step_number={step_number}, "
                f"task_index={task_index}, item_index={item_index}"
            )
        item = task.checklist_items[item_index]
        item.is_checked = checked

        if task.checklist_items and all(i.is_checked for i in task.checklist_items):
            task.status = TaskStatus.COMPLETED
            self._recompute(instructor, step)

        return ChecklistItemResult(
            item_index=item_index,
            label=item.label,
            checked=item.is_checked,
            task_status=task.status,
        )

    # ==================================================================
    # Module maintenance
    # ==================================================================

    def reresolve_module(
        self,
        instructor: Instructor,
        today: date | None = None,
        instructor_type: InstructorType | str | None = None,
    ) -> bool:
        """Recompute the stored module from today's timing.

        ``onboarding_module`` is a registration-time snapshot; this is the
        only call that refreshes it.  Passing ``instructor_type`` changes
        the type first.  Existing steps are left untouched, rebuilding them
        is the caller's decision.

        Returns:
            True if the module changed.
        """
        if instructor_type is not None:
            instructor.instructor_type = parse_instructor_type(instructor_type)

        resolution = self._resolver.resolve(
            instructor.instructor_type, instructor.start_date, today,
        )
        previous = instructor.onboarding_module
        if resolution.onboarding_module == previous:
            return False

        instructor.onboarding_module = resolution.onboarding_module
        logger.info(
            "Module re-resolved: access_code=%s, %s -> %s (days_until_start=%d)",
            instructor.access_code,
            previous.value,
            resolution.onboarding_module.value,
            resolution.days_until_start,
        )
        return True

    # ==================================================================
    # Read views
    # ==================================================================

    def summarize(
        self, instructor: Instructor, today: date | None = None
    ) -> InstructorSummary:
        """Dashboard view: live timing and D-Day next to the stored module."""
        if today is None:
            today = date.today()
        timing = TimingVariable.calculate(instructor.start_date, today)

        return InstructorSummary(
            name=instructor.name,
            access_code=instructor.access_code,
            track_code=instructor.track_code,
            cohort=instructor.cohort,
            start_date=instructor.start_date,
            d_day=(instructor.start_date - today).days,
            instructor_type=instructor.instructor_type,
            instructor_type_label=instructor.instructor_type.korean_name,
            onboarding_module=instructor.onboarding_module,
            onboarding_module_label=instructor.onboarding_module.korean_name,
            timing_variable=timing,
            timing_variable_label=timing.korean_name,
            current_step=instructor.current_step,
            overall_progress=instructor.overall_progress,
            steps=[
                _summarize_step(step)
                for step in sorted(instructor.steps, key=lambda s: s.step_number)
            ],
        )


def _summarize_step(step: OnboardingStep) -> StepSummary:
    return StepSummary(
        step_number=step.step_number,
        title=step.title,
        emoji=step.emoji,
        d_day=step.d_day,
        step_type=step.step_type,
        status=step.status,
        total_tasks=step.total_tasks,
        completed_tasks=step.completed_tasks,
        progress_percentage=get_progress_percentage(step),
        task_titles=[
            task.title
            for task in sorted(step.tasks, key=lambda t: t.display_order)
            if task.is_enabled
        ],
    )


def _task_at(step: OnboardingStep, task_index: int) -> Task:
    if not 0 <= task_index < len(step.tasks):
        raise KeyError(
            f"Task not found: step_number={step.step_number}, task_index={task_index}"
        )
    return step.tasks[task_index]


def _question_at(task: Task, index: int, expected: QuestionType) -> QuizQuestion:
    if not 0 <= index < len(task.quiz_questions):
        raise KeyError(f"Question not found: task={task.title!r}, question_index={index}")
    question = task.quiz_questions[index]
    if question.question_type != expected:
        raise ValueError(
            f"Question {index} is {question.question_type.value}, expected {expected.value}"
        )
    return question


def grade_subjective_answer(answer: str | None, keywords: str | None) -> bool:
    """Return True if *answer* contains any of the comma-separated *keywords*.

    Matching is case-insensitive.  A question with no keywords cannot be
    auto-graded and an empty answer is never correct; both return False.
    """
    if not keywords or not keywords.strip():
        return False
    if not answer or not answer.strip():
        return False
    normalized = answer.strip().lower()
    return any(
        keyword and keyword in normalized
        for keyword in (k.strip().lower() for k in keywords.split(","))
    )
