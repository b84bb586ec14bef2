from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'models.person_record'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Settings are cached; each test sees its own environment
    from config.settings import get_settings

    monkeypatch.delenv("CLOCK_YEAR", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock():
    from services.clock import FixedClock

    return FixedClock(2026)


@pytest.fixture
def record(clock):
    from models.person_record import PersonRecord

    return PersonRecord(clock=clock)
