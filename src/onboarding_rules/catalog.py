"""StepCatalog — loads step definitions from ``v1/steps.yaml`` into typed models.

The catalog is the template library the planner copies from when it
materialises an instructor's steps.  It is loaded once at startup and is
read-only afterwards.

Usage::

    catalog = StepCatalog()         # defaults to the bundled v1/ directory
    catalog.load()                  # parse steps.yaml

    definition = catalog.get_definition(3)
    catalog.step_numbers            # [1, 2, 3, 4, 5, 6, 7]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from onboarding_rules.config import DEFAULT_CATALOG_DIR
from onboarding_rules.constants import DEFAULT_D_DAYS, FALLBACK_D_DAY
from onboarding_rules.models.catalog import StepDefinition

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "steps.yaml"


def load_yaml(path: Path | str) -> Any:
    """Load a single YAML file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing YAML file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def default_d_day(step_number: int) -> int:
    """D-Day offset used when a step definition does not set one."""
    return DEFAULT_D_DAYS.get(step_number, FALLBACK_D_DAY)


class StepCatalog:
    """Loads ``steps.yaml`` and provides lookup by step number.

    Attributes populated after :meth:`load`:

        definitions — dict[step_number, StepDefinition], ascending order
    """

    def __init__(self, catalog_dir: str | Path | None = None) -> None:
        if catalog_dir is None:
            catalog_dir = DEFAULT_CATALOG_DIR
        self._base = Path(catalog_dir)
        self.definitions: dict[int, StepDefinition] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Parse the catalog file into ``StepDefinition`` models.

        Raises:
            FileNotFoundError: if ``steps.yaml`` is missing.
            ValueError: if the file is not a list, an entry fails validation
                (e.g. unknown ``content_type``), or a step number repeats.
        """
        raw_list = load_yaml(self._base / CATALOG_FILENAME)
        if not isinstance(raw_list, list):
            raise ValueError(
                f"{CATALOG_FILENAME} must contain a list of step definitions"
            )

        parsed: dict[int, StepDefinition] = {}
        for raw in raw_list:
            if not isinstance(raw, dict):
                raise ValueError(f"Step definition must be a mapping, got {raw!r}")
            try:
                definition = StepDefinition(**raw)
            except ValidationError as exc:
                # ValidationError is a ValueError subclass; re-raise with the
                # offending entry so catalog authors can find it.
                raise ValueError(
                    f"Invalid step definition {raw.get('step_number')!r}: {exc}"
                ) from exc
            if definition.step_number in parsed:
                raise ValueError(
                    f"Duplicate step_number {definition.step_number} in {CATALOG_FILENAME}"
                )
            parsed[definition.step_number] = definition

        self.definitions = dict(sorted(parsed.items()))
        logger.info(
            "StepCatalog loaded: %d steps, %d tasks from %s",
            len(self.definitions),
            sum(len(d.tasks) for d in self.definitions.values()),
            self._base,
        )

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------

    @property
    def step_numbers(self) -> list[int]:
        """All catalogued step numbers, ascending."""
        return list(self.definitions)

    def has_step(self, step_number: int) -> bool:
        return step_number in self.definitions

    def get_definition(self, step_number: int) -> StepDefinition:
        """Look up a step definition by number.

        Raises:
            KeyError: if the catalog has no such step.
        """
        try:
            return self.definitions[step_number]
        except KeyError:
            raise KeyError(f"Step definition not found: step_number={step_number}") from None

    def resolve_d_day(self, step_number: int) -> int:
        """Return the D-Day for a catalogued step, falling back to the default table."""
        definition = self.definitions.get(step_number)
        if definition is not None and definition.default_d_day is not None:
            return definition.default_d_day
        return default_d_day(step_number)
