from __future__ import annotations

from typing import Any

from pipelines.runner import RunContext


class AssignField:
    """Calls one setter of the context's record with a fixed value."""

    def __init__(self, name: str, setter: str, value: Any) -> None:
        self.name = name
        self.setter = setter
        self.value = value

    def run(self, ctx: RunContext) -> RunContext:
        getattr(ctx.record, self.setter)(self.value)
        return ctx

    def __repr__(self) -> str:
        return f"AssignField({self.name!r}, {self.value!r})"
