from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, List, Optional

from models.errors import PersonValidationError
from models.person_record import PersonRecord
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    record: PersonRecord = field(default_factory=PersonRecord)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    name: str

    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    """Runs steps in order and stops at the first validation failure.

    The failing step's name is stored in ``ctx.meta["failed_step"]`` and the
    error is re-raised to the caller; steps after it never run.
    """

    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: Optional[RunContext] = None) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        ctx = ctx if ctx is not None else RunContext()
        completed = ctx.meta.setdefault("completed_steps", [])
        for step in self.steps:
            try:
                ctx = step.run(ctx)
            except PersonValidationError as err:
                ctx.meta["failed_step"] = step.name
                logging.debug(
                    "Step failed",
                    extra={"step": step.name, "status": "failed", "error": str(err)},
                )
                raise
            completed.append(step.name)
            logging.debug("Step done", extra={"step": step.name, "status": "ok"})
        return ctx
