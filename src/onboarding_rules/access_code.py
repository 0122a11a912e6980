"""Instructor access codes — ``{track}{cohort}-{name}{n}``, e.g. ``FE4-홍길동1``.

The code is what an instructor types to open their portal, so it is built
from things they already know.  Uniqueness is checked against the caller's
store through the ``exists`` callback; this module never touches storage.
"""

from __future__ import annotations

import re
from typing import Callable

MAX_ATTEMPTS = 10_000

_NON_DIGIT = re.compile(r"[^0-9]")
# Hangul syllables and ASCII letters only
_NON_NAME_CHAR = re.compile(r"[^가-힣a-zA-Z]")


def clean_name(name: str) -> str:
    """Strip everything but Hangul syllables and ASCII letters from *name*."""
    return _NON_NAME_CHAR.sub("", name.strip())


def generate_access_code(
    track_code: str,
    cohort: str,
    name: str,
    exists: Callable[[str], bool],
) -> str:
    """Return the first free access code for this instructor.

    The trailing number starts at 1 and increments until ``exists(code)``
    returns False.

    Raises:
        ValueError: if *name* has no Hangul or ASCII letters.
        RuntimeError: if no free code is found within ``MAX_ATTEMPTS``.
    """
    cohort_digits = _NON_DIGIT.sub("", cohort)
    full_name = clean_name(name)
    if not full_name:
        raise ValueError(
            f"유효하지 않은 이름입니다: '{name}'. 한글 또는 영문만 입력 가능합니다."
        )

    for number in range(1, MAX_ATTEMPTS + 1):
        code = f"{track_code}{cohort_digits}-{full_name}{number}"
        if not exists(code):
            return code

    raise RuntimeError(
        f"Failed to generate unique access code after {MAX_ATTEMPTS} attempts"
    )
