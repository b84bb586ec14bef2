from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from config.settings import get_settings

if TYPE_CHECKING:
    from ports.clock import ClockPort


class SystemClock:
    """Reads the current calendar year from the local wall clock."""

    def current_year(self) -> int:
        return datetime.now().year


class FixedClock:
    def __init__(self, year: int) -> None:
        self.year = year

    def current_year(self) -> int:
        return self.year

    def __repr__(self) -> str:
        return f"FixedClock({self.year})"


def clock_from_settings() -> ClockPort:
    """Return a pinned clock when CLOCK_YEAR is configured, else the wall clock."""
    settings = get_settings()
    if settings.clock_year is not None:
        return FixedClock(settings.clock_year)
    return SystemClock()
