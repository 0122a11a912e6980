import pytest

from onboarding_rules.catalog import StepCatalog
from onboarding_rules.models.enums import ContentType, StepType
from onboarding_rules.models.step import OnboardingStep, Task
from onboarding_rules.planner import OnboardingPlanner


@pytest.fixture(scope="session")
def catalog():
    """Load the bundled step catalog once for the entire test session."""
    c = StepCatalog()
    c.load()
    return c


@pytest.fixture
def planner(catalog):
    return OnboardingPlanner(catalog)


@pytest.fixture
def make_step():
    """Build an OnboardingStep from (status, is_enabled) pairs."""

    def _make(*task_specs, step_number=1):
        tasks = [
            Task(
                title=f"task {i}",
                content_type=ContentType.D,
                status=status,
                is_enabled=enabled,
                display_order=i,
            )
            for i, (status, enabled) in enumerate(task_specs)
        ]
        return OnboardingStep(
            step_number=step_number,
            title=f"step {step_number}",
            d_day=-14,
            step_type=StepType.SELF_CHECK,
            tasks=tasks,
        )

    return _make

