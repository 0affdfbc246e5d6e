"""Shared fixtures for email-event tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime

import pytest

from email_event.extractor import EventExtractor

FIXED_NOW = datetime(2025, 3, 10, 9, 30, 45, 123456)


@pytest.fixture()
def now() -> datetime:
    """A fixed "current time": Monday 2025-03-10 09:30:45.123456."""
    return FIXED_NOW


@pytest.fixture()
def extractor(now: datetime) -> EventExtractor:
    """An :class:`EventExtractor` whose clock always returns :func:`now`."""
    return EventExtractor(clock=lambda: now)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all email-event environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("email_event.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("LOG_LEVEL", "DEFAULT_EVENT_TIME", "JSON_INDENT"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
