"""ModuleResolver — picks an onboarding module and answers per-step questions.

Two questions drive everything the planner materialises:

  1. *Which module?*  ``determine_module(instructor_type, timing_variable)``
     is a total lookup over the 3 x 2 input space.
  2. *How is step N run under module M?*  ``get_step_type(module, n)`` reads
     the static table in ``constants.MODULE_STEP_TYPES``.

Lookups that fall outside the table never raise; they fail open to
``SELF_CHECK`` (the instructor handles the step themselves) and log a
warning.  Only a missing module is treated as caller misuse.

Usage::

    resolver = ModuleResolver()
    module = resolver.determine_module(InstructorType.NEWBIE, TimingVariable.URGENT)
    resolver.get_step_type(module, 1)       # StepType.PM_LED
    resolver.get_included_steps(module)     # [1, 2, 3, 4, 5]
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Mapping

from onboarding_rules.constants import (
    FALLBACK_STEP_TYPE,
    MODULE_MISSING_MESSAGE,
    MODULE_STEP_TYPES,
)
from onboarding_rules.models.enums import (
    InstructorType,
    OnboardingModule,
    StepType,
    TimingVariable,
)
from onboarding_rules.models.summary import ModuleResolution

logger = logging.getLogger(__name__)

# (instructor type, timing) -> module, derived from the enum's own pairing
# so the two can never drift apart.
_MODULE_BY_PAIR: dict[tuple[InstructorType, TimingVariable], OnboardingModule] = {
    (m.instructor_type, m.timing_variable): m for m in OnboardingModule
}


class ModuleResolver:
    """Stateless resolver over a module -> step-type table.

    Args:
        table: module configuration table; defaults to the built-in
            ``MODULE_STEP_TYPES``.  Exposed for tests that need a table with
            gaps.
    """

    def __init__(
        self,
        table: Mapping[OnboardingModule, Mapping[int, StepType]] | None = None,
    ) -> None:
        self._table = MODULE_STEP_TYPES if table is None else table

    # ------------------------------------------------------------------
    # Module determination
    # ------------------------------------------------------------------

    def determine_module(
        self,
        instructor_type: InstructorType,
        timing_variable: TimingVariable,
    ) -> OnboardingModule:
        """Return the module covering (instructor_type, timing_variable).

        Raises:
            ValueError: if either argument is ``None``.
            LookupError: if the pair is not covered (cannot happen with the
                current enums; guards against a future enum member being
                added without a module).
        """
        if instructor_type is None or timing_variable is None:
            raise ValueError(
                "instructor_type and timing_variable are both required"
            )
        try:
            return _MODULE_BY_PAIR[(instructor_type, timing_variable)]
        except KeyError:
            raise LookupError(
                f"No onboarding module for {instructor_type.value} + {timing_variable.value}"
            ) from None

    def resolve(
        self,
        instructor_type: InstructorType,
        start_date: date,
        today: date | None = None,
    ) -> ModuleResolution:
        """Derive the timing variable from *start_date* and pick the module."""
        if today is None:
            today = date.today()
        timing = TimingVariable.calculate(start_date, today)
        module = self.determine_module(instructor_type, timing)
        return ModuleResolution(
            instructor_type=instructor_type,
            timing_variable=timing,
            onboarding_module=module,
            days_until_start=(start_date - today).days,
        )

    # ------------------------------------------------------------------
    # Step-type lookups
    # ------------------------------------------------------------------

    def get_step_type(
        self, module: OnboardingModule | None, step_number: int | None
    ) -> StepType:
        """Return how *step_number* is operated under *module*.

        Falls back to ``SELF_CHECK`` (with a warning) when ``step_number`` is
        ``None``, below 1, or has no entry in the module's table.

        Raises:
            ValueError: if ``module`` is ``None``.
        """
        if module is None:
            raise ValueError(MODULE_MISSING_MESSAGE)

        if step_number is None or step_number < 1:
            logger.warning(
                "Invalid step number: %s for module: %s, defaulting to %s",
                step_number, module.value, FALLBACK_STEP_TYPE.value,
            )
            return FALLBACK_STEP_TYPE

        step_type = self._config_for(module).get(step_number)
        if step_type is None:
            logger.warning(
                "Step type not found for module: %s, step: %d, defaulting to %s",
                module.value, step_number, FALLBACK_STEP_TYPE.value,
            )
            return FALLBACK_STEP_TYPE
        return step_type

    def get_included_steps(self, module: OnboardingModule | None) -> list[int]:
        """Return the step numbers to materialise for *module* (non-SKIP, ascending).

        Raises:
            ValueError: if ``module`` is ``None``.
        """
        if module is None:
            raise ValueError(MODULE_MISSING_MESSAGE)
        return sorted(
            number
            for number, step_type in self._config_for(module).items()
            if step_type is not StepType.SKIP
        )

    def get_module_configuration(
        self, module: OnboardingModule | None
    ) -> dict[int, StepType]:
        """Return a mutable copy of *module*'s step-number -> step-type table.

        Raises:
            ValueError: if ``module`` is ``None``.
        """
        if module is None:
            raise ValueError(MODULE_MISSING_MESSAGE)
        return dict(self._config_for(module))

    def _config_for(self, module: OnboardingModule) -> Mapping[int, StepType]:
        config = self._table.get(module)
        if config is None:
            logger.warning(
                "Module configuration not found for: %s, returning empty configuration",
                module.value,
            )
            return {}
        return config


# ---------------------------------------------------------------------------
# Module-level shortcuts bound to the built-in table
# ---------------------------------------------------------------------------

_default_resolver = ModuleResolver()

determine_module = _default_resolver.determine_module
get_step_type = _default_resolver.get_step_type
get_included_steps = _default_resolver.get_included_steps
get_module_configuration = _default_resolver.get_module_configuration
