"""Orchestrator that turns email text into an :class:`ExtractedEvent`.

Runs the date, time, title and location stages independently, fills in
defaults for whatever is missing, resolves the start time and sums the
confidence weights of the stages that fired.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from email_event.exceptions import EmptyInputError
from email_event.models.event import ExtractedEvent
from email_event.models.stage import StageMatch
from email_event.normalizer import DEFAULT_TIME, normalize_datetime
from email_event.stages import (
    DEFAULT_TITLE,
    extract_date,
    extract_location,
    extract_time,
    extract_title,
    fallback_title,
)

logger = logging.getLogger(__name__)

MAX_CONFIDENCE = 100

Clock = Callable[[], datetime]


class EventExtractor:
    """Extract a single calendar event from free-form email text.

    The extractor holds no per-call state; one instance can be reused for
    any number of emails.

    Args:
        clock: Source of the current time, read once per extraction.  It
            supplies the default date and year.  Defaults to
            :meth:`datetime.now`.
        default_time: Time of day used when the text mentions none.
    """

    def __init__(self, clock: Clock | None = None, default_time: str = DEFAULT_TIME) -> None:
        self._clock: Clock = clock if clock is not None else datetime.now
        self._default_time = default_time

    def extract(self, text: str) -> ExtractedEvent:
        """Extract an event from *text*.

        Args:
            text: Raw email body, headers included or not.

        Returns:
            A new :class:`ExtractedEvent`.  Missing fields fall back to
            today, :data:`~email_event.normalizer.DEFAULT_TIME` and
            :data:`~email_event.stages.DEFAULT_TITLE`.

        Raises:
            EmptyInputError: If *text* is empty or whitespace-only.
        """
        if not text or not text.strip():
            raise EmptyInputError()

        now = self._clock()

        date = extract_date(text)
        time = extract_time(text)
        title = extract_title(text) or fallback_title(text)
        location = extract_location(text)

        start = normalize_datetime(
            date.text if date else "",
            time.text if time else "",
            now,
            default_time=self._default_time,
        )

        event = ExtractedEvent(
            title=title.text if title else DEFAULT_TITLE,
            start=start.value,
            location=location.text if location else None,
            confidence=score(date, time, title, location),
        )
        logger.info(
            "Extracted %r at %s (confidence %d%%, start via %s)",
            event.title,
            event.start.isoformat(),
            event.confidence,
            type(start).__name__,
        )
        return event


def score(*matches: StageMatch | None) -> int:
    """Sum the weights of the stages that matched, capped at 100."""
    total = sum(match.weight for match in matches if match is not None)
    return min(total, MAX_CONFIDENCE)


def extract(text: str, now: datetime | None = None) -> ExtractedEvent:
    """Extract an event from *text* with a one-off :class:`EventExtractor`.

    Args:
        text: Raw email body.
        now: Fixed current time; the wall clock is used when ``None``.

    Raises:
        EmptyInputError: If *text* is empty or whitespace-only.
    """
    clock = (lambda: now) if now is not None else None
    return EventExtractor(clock=clock).extract(text)
