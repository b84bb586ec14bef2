from __future__ import annotations

from typing import Protocol


class ClockPort(Protocol):
    def current_year(self) -> int:
        ...
