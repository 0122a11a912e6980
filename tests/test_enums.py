"""Enumeration tests for labels, Korean lookups and the timing calculation.

Timing is COMFORTABLE when the start date is 14 or more days after
"today", URGENT otherwise (including start dates already in the past).
"""

from datetime import date, timedelta

import pytest

from onboarding_rules.models.enums import (
    InstructorType,
    OnboardingModule,
    StepType,
    TimingVariable,
)

TODAY = date(2026, 3, 2)


# =====================================================================
# TimingVariable.calculate: the 14-day boundary
# =====================================================================


class TestTimingCalculation:

    @pytest.mark.parametrize(
        "days, expected",
        [
            (30, TimingVariable.COMFORTABLE),
            (14, TimingVariable.COMFORTABLE),
            (13, TimingVariable.URGENT),
            (0, TimingVariable.URGENT),
            (-5, TimingVariable.URGENT),
        ],
    )
    def test_boundary(self, days, expected):
        start = TODAY + timedelta(days=days)
        assert TimingVariable.calculate(start, TODAY) == expected, (
            f"{days} days until start should be {expected.value}"
        )

    def test_defaults_to_system_today(self):
        far_future = date.today() + timedelta(days=365)
        assert TimingVariable.calculate(far_future) == TimingVariable.COMFORTABLE

    def test_min_days_threshold(self):
        assert TimingVariable.COMFORTABLE.min_days_threshold == 14
        assert TimingVariable.URGENT.min_days_threshold == 0


# =====================================================================
# Korean labels
# =====================================================================


class TestKoreanLabels:

    def test_instructor_type_labels(self):
        assert InstructorType.NEWBIE.korean_name == "신입"
        assert InstructorType.EXPERIENCED.korean_name == "경력"
        assert InstructorType.RE_CONTRACT.korean_name == "재계약"

    def test_from_korean_roundtrip_for_every_enum(self):
        for enum_cls in (InstructorType, TimingVariable, OnboardingModule, StepType):
            for member in enum_cls:
                assert enum_cls.from_korean(member.korean_name) is member, (
                    f"{enum_cls.__name__}.{member.name} did not map back from its label"
                )

    def test_from_korean_unknown_returns_none(self):
        assert InstructorType.from_korean("인턴") is None
        assert InstructorType.from_korean(None) is None
        assert StepType.from_korean("") is None

    def test_module_labels(self):
        assert OnboardingModule.A_NURTURING.korean_name == "육성형"
        assert OnboardingModule.F_MINIMAL_CHECK.korean_name == "최소 확인형"
        assert StepType.PM_LED.korean_name == "PM 주도"


# =====================================================================
# Module pairing
# =====================================================================


def test_each_module_covers_a_distinct_pair():
    """The six modules cover the 3 x 2 input space exactly once."""
    pairs = {(m.instructor_type, m.timing_variable) for m in OnboardingModule}
    assert len(pairs) == 6
    assert pairs == {
        (t, v) for t in InstructorType for v in TimingVariable
    }


def test_enums_serialise_as_names():
    assert StepType.SELF_CHECK.value == "SELF_CHECK"
    assert OnboardingModule("D_QUICK_ADAPTATION") is OnboardingModule.D_QUICK_ADAPTATION
