from __future__ import annotations

from typing import Optional

from pipelines.runner import Pipeline, RunContext
from pipelines.steps.assign_field import AssignField
from models.person_record import PersonRecord
from ports.clock import ClockPort


DEMO_NAME = "TranBaoNgoc"
DEMO_EMAIL = "ngoc@ngoc.ngoc"
DEMO_BIRTHDAY_YEAR = 1900
DEMO_PHONE = "+44444444444"


def build_demo_pipeline() -> Pipeline:
    return Pipeline([
        AssignField("setName", "set_name", DEMO_NAME),
        AssignField("setEmail", "set_email", DEMO_EMAIL),
        AssignField("setBirthdayYear", "set_birthday_year", DEMO_BIRTHDAY_YEAR),
        AssignField("setPhone", "set_phone", DEMO_PHONE),
    ])


def new_context(clock: Optional[ClockPort] = None) -> RunContext:
    """Fresh context holding an empty record bound to the given clock."""
    return RunContext(record=PersonRecord(clock=clock))
