from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _parse_year(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise RuntimeError(f"CLOCK_YEAR must be an integer year, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    log_level: str
    run_env: str

    # Pins the clock used for age derivation; None means wall clock
    clock_year: int | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        clock_year=_parse_year(os.getenv("CLOCK_YEAR")),
    )
