"""Registration input submitted by a PM to create an instructor."""

from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel

from onboarding_rules.models.enums import InstructorType


class RegistrationRequest(BaseModel):
    """New-instructor form.

    ``instructor_type`` accepts an ``InstructorType``, its name
    (``"EXPERIENCED"``) or its Korean label (``"경력"``); anything else,
    including ``None``, registers the instructor as NEWBIE.

    ``selected_step_numbers`` switches the planner to the explicit-selection
    path: the listed catalog steps are renumbered 1..n in the given order.
    """

    name: str
    track_code: str
    cohort: str
    start_date: date
    instructor_type: Union[InstructorType, str, None] = None
    selected_step_numbers: Optional[List[int]] = None
