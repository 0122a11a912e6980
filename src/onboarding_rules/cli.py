"""Plan preview CLI — ``onboarding-plan``.

Resolves the onboarding module for an instructor profile and prints the
step plan the planner would materialise, as JSON.  Handy for checking the
module table and a catalog edit without running the portal.

Examples::

    # Newbie starting on 2026-03-02, resolved against today
    onboarding-plan --type NEWBIE --start-date 2026-03-02

    # Korean label, fixed reference date
    onboarding-plan --type 경력 --start-date 2026-03-02 --today 2026-02-25

    # Explicit step selection (renumbered 1..n, SKIP positions dropped)
    onboarding-plan --type RE_CONTRACT --start-date 2026-03-02 --steps 1 3 5 7

    # Use a catalog other than the bundled one
    ONBOARDING_CATALOG_DIR=./my_catalog onboarding-plan --start-date 2026-03-02
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import Any, Sequence

from onboarding_rules.catalog import StepCatalog
from onboarding_rules.config import load_settings
from onboarding_rules.constants import STEP_NAMES
from onboarding_rules.planner import OnboardingPlanner, parse_instructor_type

logger = logging.getLogger(__name__)


def build_plan(
    planner: OnboardingPlanner,
    instructor_type: str | None,
    start_date: date,
    today: date | None = None,
    steps: Sequence[int] | None = None,
) -> dict[str, Any]:
    """Resolve the module and materialise steps into a JSON-ready dict."""
    if today is None:
        today = date.today()
    resolved_type = parse_instructor_type(instructor_type)
    resolution = planner.resolver.resolve(resolved_type, start_date, today)
    module = resolution.onboarding_module

    materialized = planner.materialize_steps(module, steps)
    return {
        "instructor_type": resolved_type.value,
        "instructor_type_label": resolved_type.korean_name,
        "timing_variable": resolution.timing_variable.value,
        "timing_variable_label": resolution.timing_variable.korean_name,
        "onboarding_module": module.value,
        "onboarding_module_label": module.korean_name,
        "d_day": resolution.days_until_start,
        "module_configuration": {
            f"{number} ({STEP_NAMES.get(number, '?')})": step_type.value
            for number, step_type in sorted(
                planner.resolver.get_module_configuration(module).items()
            )
        },
        "steps": [
            {
                "step_number": step.step_number,
                "title": step.title,
                "step_type": step.step_type.value if step.step_type else None,
                "d_day": step.d_day,
                "tasks": [task.title for task in step.tasks],
            }
            for step in materialized
        ],
    }


def cli(argv: Sequence[str] | None = None) -> None:
    """Console-script entry point: ``onboarding-plan``."""
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="onboarding-plan",
        description="Preview the onboarding module and step plan for an instructor.",
    )
    parser.add_argument(
        "--type",
        dest="instructor_type",
        default=None,
        help="Instructor type: NEWBIE / EXPERIENCED / RE_CONTRACT or 신입 / 경력 / 재계약 "
             "(default: NEWBIE)",
    )
    parser.add_argument(
        "--start-date",
        type=date.fromisoformat,
        required=True,
        help="First class day, ISO format (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date for the timing calculation (default: today)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        nargs="+",
        default=None,
        help="Explicit catalog step numbers, in order (default: the module's steps)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: $ONBOARDING_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        catalog = StepCatalog(settings.catalog_dir)
        catalog.load()
        plan = build_plan(
            OnboardingPlanner(catalog),
            args.instructor_type,
            args.start_date,
            today=args.today,
            steps=args.steps,
        )
    except (FileNotFoundError, KeyError, ValueError) as exc:
        logger.error("Plan preview failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(plan, ensure_ascii=False, indent=2))
