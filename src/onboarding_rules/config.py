"""SDK configuration — reads settings from environment variables.

All settings have defaults suitable for local use.  The 14-day timing
threshold (``ONBOARDING_COMFORTABLE_DAYS``) is needed at import time and is
read in ``models.enums``; everything else is collected here by
``load_settings()``.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Bundled catalog shipped inside the package.
DEFAULT_CATALOG_DIR = Path(__file__).resolve().parent / "v1"


@dataclass(frozen=True)
class OnboardingSettings:
    """Immutable SDK configuration read from environment at startup."""

    # Directory containing steps.yaml
    catalog_dir: Path = DEFAULT_CATALOG_DIR

    # Logging
    log_level: str = "INFO"


def load_settings() -> OnboardingSettings:
    """Build settings from ``ONBOARDING_*`` environment variables."""
    raw_dir = os.getenv("ONBOARDING_CATALOG_DIR")
    return OnboardingSettings(
        catalog_dir=Path(raw_dir) if raw_dir else DEFAULT_CATALOG_DIR,
        log_level=os.getenv("ONBOARDING_LOG_LEVEL", "INFO").upper(),
    )
