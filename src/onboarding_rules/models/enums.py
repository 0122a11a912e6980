"""Enumerations shared by the resolver, the progress aggregator and the planner.

Every enum is ``str``-valued with the member name as its value, so
instances serialise as ``"NEWBIE"``, ``"PM_LED"`` etc. in JSON and YAML.

Korean labels are what the portal shows to PMs and what registration forms
submit; ``from_korean()`` maps a label back to its member and returns
``None`` for unknown labels (callers pick their own default).
"""

from __future__ import annotations

import enum
import os
from datetime import date


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# Days before the start date at or above which onboarding is "comfortable".
# Overridable via ONBOARDING_COMFORTABLE_DAYS so ops can tune the cut-off.
COMFORTABLE_DAYS_THRESHOLD = _env_int("ONBOARDING_COMFORTABLE_DAYS", "14")


class InstructorType(str, enum.Enum):
    """Variable A: the instructor's prior experience.

    Assigned once at registration.
    """

    NEWBIE = "NEWBIE"
    EXPERIENCED = "EXPERIENCED"
    RE_CONTRACT = "RE_CONTRACT"

    @property
    def korean_name(self) -> str:
        return _INSTRUCTOR_TYPE_LABELS[self][0]

    @property
    def description(self) -> str:
        return _INSTRUCTOR_TYPE_LABELS[self][1]

    @classmethod
    def from_korean(cls, label: str | None) -> InstructorType | None:
        return _lookup_korean(cls, _INSTRUCTOR_TYPE_LABELS, label)


class TimingVariable(str, enum.Enum):
    """Variable B: how much time is left before the instructor starts.

    Derived from the start date, never stored as an independent fact:
    the same start date yields a different value as "today" moves.
    """

    COMFORTABLE = "COMFORTABLE"
    URGENT = "URGENT"

    @property
    def korean_name(self) -> str:
        return _TIMING_LABELS[self][0]

    @property
    def description(self) -> str:
        return _TIMING_LABELS[self][1]

    @property
    def min_days_threshold(self) -> int:
        return COMFORTABLE_DAYS_THRESHOLD if self is TimingVariable.COMFORTABLE else 0

    @classmethod
    def calculate(
        cls, start_date: date, today: date | None = None
    ) -> TimingVariable:
        """Return COMFORTABLE if the start date is 14+ days away, else URGENT.

        Args:
            start_date: the instructor's first class day
            today: reference date; defaults to ``date.today()``
        """
        if today is None:
            today = date.today()
        days_until_start = (start_date - today).days
        if days_until_start >= COMFORTABLE_DAYS_THRESHOLD:
            return cls.COMFORTABLE
        return cls.URGENT

    @classmethod
    def from_korean(cls, label: str | None) -> TimingVariable | None:
        return _lookup_korean(cls, _TIMING_LABELS, label)


class OnboardingModule(str, enum.Enum):
    """One of six onboarding profiles, one per (InstructorType, TimingVariable).

    A  육성형      NEWBIE      + COMFORTABLE
    B  생존형      NEWBIE      + URGENT
    C  얼라인형    EXPERIENCED + COMFORTABLE
    D  속성 적응형 EXPERIENCED + URGENT
    E  업데이트형  RE_CONTRACT + COMFORTABLE
    F  최소 확인형 RE_CONTRACT + URGENT
    """

    A_NURTURING = "A_NURTURING"
    B_SURVIVAL = "B_SURVIVAL"
    C_ALIGNMENT = "C_ALIGNMENT"
    D_QUICK_ADAPTATION = "D_QUICK_ADAPTATION"
    E_UPDATE = "E_UPDATE"
    F_MINIMAL_CHECK = "F_MINIMAL_CHECK"

    @property
    def korean_name(self) -> str:
        return _MODULE_INFO[self][0]

    @property
    def description(self) -> str:
        return _MODULE_INFO[self][1]

    @property
    def instructor_type(self) -> InstructorType:
        return _MODULE_INFO[self][2]

    @property
    def timing_variable(self) -> TimingVariable:
        return _MODULE_INFO[self][3]

    @classmethod
    def from_korean(cls, label: str | None) -> OnboardingModule | None:
        return _lookup_korean(cls, _MODULE_INFO, label)


class StepType(str, enum.Enum):
    """How a step is operated under a given module."""

    PM_LED = "PM_LED"
    SELF_CHECK = "SELF_CHECK"
    SKIP = "SKIP"
    DELAY = "DELAY"

    @property
    def korean_name(self) -> str:
        return _STEP_TYPE_LABELS[self][0]

    @property
    def description(self) -> str:
        return _STEP_TYPE_LABELS[self][1]

    @classmethod
    def from_korean(cls, label: str | None) -> StepType | None:
        return _lookup_korean(cls, _STEP_TYPE_LABELS, label)


class TaskStatus(str, enum.Enum):
    """Status of a task, and (PENDING/IN_PROGRESS/COMPLETED only) of a step.

    Step status is never set directly; it is recomputed from the tasks by
    ``progress.update_progress``.
    """

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"


class ContentType(str, enum.Enum):
    """Kind of content a task delivers."""

    A = "A"  # document + quiz
    B = "B"  # video + quiz
    C = "C"  # file upload
    D = "D"  # checklist


class QuestionType(str, enum.Enum):
    """Quiz question kind."""

    OBJECTIVE = "OBJECTIVE"
    SUBJECTIVE = "SUBJECTIVE"


# ---------------------------------------------------------------------------
# Labels: (korean_name, description[, ...])
# ---------------------------------------------------------------------------

_INSTRUCTOR_TYPE_LABELS: dict[InstructorType, tuple[str, str]] = {
    InstructorType.NEWBIE: ("신입", "강의 경력 없음"),
    InstructorType.EXPERIENCED: ("경력", "타 기관 경험 있음"),
    InstructorType.RE_CONTRACT: ("재계약", "코드잇 경험 있음"),
}

_TIMING_LABELS: dict[TimingVariable, tuple[str, str]] = {
    TimingVariable.COMFORTABLE: ("여유", "온보딩 완료일 2주 전 이상"),
    TimingVariable.URGENT: ("긴급", "온보딩 완료일 2주 미만"),
}

_MODULE_INFO: dict[
    OnboardingModule, tuple[str, str, InstructorType, TimingVariable]
] = {
    OnboardingModule.A_NURTURING: (
        "육성형", "신입 + 여유", InstructorType.NEWBIE, TimingVariable.COMFORTABLE,
    ),
    OnboardingModule.B_SURVIVAL: (
        "생존형", "신입 + 긴급", InstructorType.NEWBIE, TimingVariable.URGENT,
    ),
    OnboardingModule.C_ALIGNMENT: (
        "얼라인형", "경력 + 여유", InstructorType.EXPERIENCED, TimingVariable.COMFORTABLE,
    ),
    OnboardingModule.D_QUICK_ADAPTATION: (
        "속성 적응형", "경력 + 긴급", InstructorType.EXPERIENCED, TimingVariable.URGENT,
    ),
    OnboardingModule.E_UPDATE: (
        "업데이트형", "재계약 + 여유", InstructorType.RE_CONTRACT, TimingVariable.COMFORTABLE,
    ),
    OnboardingModule.F_MINIMAL_CHECK: (
        "최소 확인형", "재계약 + 긴급", InstructorType.RE_CONTRACT, TimingVariable.URGENT,
    ),
}

_STEP_TYPE_LABELS: dict[StepType, tuple[str, str]] = {
    StepType.PM_LED: ("PM 주도", "PM이 직접 관리하고 피드백"),
    StepType.SELF_CHECK: ("자가 점검", "강사가 스스로 수행, 산출물만 제출"),
    StepType.SKIP: ("생략", "생략 가능한 항목"),
    StepType.DELAY: ("지연", "수업 이후로 연기"),
}


def _lookup_korean(enum_cls, labels: dict, label: str | None):
    """Return the member of *enum_cls* whose Korean label equals *label*."""
    if label is None:
        return None
    for member in enum_cls:
        if labels[member][0] == label:
            return member
    return None
