"""Onboarding constants shared across the SDK.

The module configuration table is the heart of the resolver: for each of
the six onboarding modules it says how steps 1-6 are operated.  It is
built once at import time and exposed read-only; nothing in the SDK (or
its callers) can mutate it afterwards.
"""

from types import MappingProxyType
from typing import Mapping

from onboarding_rules.models.enums import (
    COMFORTABLE_DAYS_THRESHOLD,
    OnboardingModule,
    StepType,
)

_M = OnboardingModule
_PM = StepType.PM_LED
_SELF = StepType.SELF_CHECK
_SKIP = StepType.SKIP
_DELAY = StepType.DELAY

# (module) -> (step number -> step type).  All 36 entries are explicit.
MODULE_STEP_TYPES: Mapping[OnboardingModule, Mapping[int, StepType]] = MappingProxyType({
    # A 육성형 (신입 + 여유): content and capability steps are PM-led
    _M.A_NURTURING: MappingProxyType({
        1: _SELF,   # 규정
        2: _SELF,   # 조직
        3: _PM,     # 콘텐츠
        4: _SELF,   # 환경
        5: _SELF,   # 도구
        6: _PM,     # 역량
    }),
    # B 생존형 (신입 + 긴급): prohibited actions + week-1 content only
    _M.B_SURVIVAL: MappingProxyType({
        1: _PM,     # 규정 - 금지사항
        2: _DELAY,  # 조직
        3: _PM,     # 1주차 콘텐츠
        4: _SELF,   # 환경 - 필수 항목만
        5: _SELF,   # 도구 - 필수 항목만
        6: _SKIP,   # 역량
    }),
    # C 얼라인형 (경력 + 여유): unlearn other institutions' habits
    _M.C_ALIGNMENT: MappingProxyType({
        1: _PM,     # 규정 - 차이점
        2: _PM,     # 조직 - 문화
        3: _SELF,
        4: _SELF,
        5: _SELF,
        6: _SKIP,
    }),
    # D 속성 적응형 (경력 + 긴급): block regulatory risk, trust teaching skill
    _M.D_QUICK_ADAPTATION: MappingProxyType({
        1: _PM,     # 행정 패턴 - 필수
        2: _DELAY,  # 조직 융화 전반
        3: _SELF,
        4: _SKIP,
        5: _SELF,   # LMS/ZEP
        6: _SKIP,
    }),
    # E 업데이트형 (재계약 + 여유): changes only, re-share the vision
    _M.E_UPDATE: MappingProxyType({
        1: _SELF,   # 규정 - 변경점만
        2: _PM,     # 조직 - 리텐션
        3: _PM,     # 변경된 콘텐츠
        4: _SELF,   # 기기 변경 시
        5: _SKIP,
        6: _SKIP,
    }),
    # F 최소 확인형 (재계약 + 긴급): contract and mandatory admin only
    _M.F_MINIMAL_CHECK: MappingProxyType({
        1: _PM,     # 계약/필수 행정
        2: _SKIP,
        3: _SELF,   # 서명만
        4: _SKIP,
        5: _SELF,   # 서명만
        6: _SKIP,
    }),
})

# Returned for any step the table does not cover (None, < 1, or unknown).
FALLBACK_STEP_TYPE = StepType.SELF_CHECK

# Raised when a step/config lookup is made without a module.
MODULE_MISSING_MESSAGE = "모듈 정보가 없습니다. 모듈을 먼저 선택해주세요."

# Default D-Day offset (days relative to start) per step number when a step
# definition does not carry its own.
DEFAULT_D_DAYS: Mapping[int, int] = MappingProxyType({
    1: -14,
    2: -12,
    3: -9,
    4: -7,
    5: -5,
    6: -3,
    7: -1,
})
FALLBACK_D_DAY = -14

# Human-readable step names for logging and CLI output.
STEP_NAMES: Mapping[int, str] = MappingProxyType({
    1: "Regulations",
    2: "Organization",
    3: "Content",
    4: "Environment",
    5: "Tools",
    6: "Capability",
    7: "Final Review",
})

__all__ = [
    "COMFORTABLE_DAYS_THRESHOLD",
    "DEFAULT_D_DAYS",
    "FALLBACK_D_DAY",
    "FALLBACK_STEP_TYPE",
    "MODULE_MISSING_MESSAGE",
    "MODULE_STEP_TYPES",
    "STEP_NAMES",
]
