"""Turn raw date and time mentions into a start timestamp.

:func:`normalize_datetime` walks an ordered attempt chain and reports which
step produced the value:

- :class:`Parsed` -- :func:`dateutil.parser.parse` understood
  ``"<date> <time>"``.
- :class:`ManualFallback` -- hour and minute were read directly from the
  time string and applied to the current date.
- :class:`HardDefault` -- the current date at 14:00.

The last step cannot fail, so callers always get a value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from dateutil import parser as dateutil_parser

from email_event.models.event import EVENT_DURATION

logger = logging.getLogger(__name__)

DEFAULT_TIME = "2:00 PM"
HARD_DEFAULT_HOUR = 14

_DIGITS_RE = re.compile(r"\d{1,2}")

# Latest start whose end (start + EVENT_DURATION) is still a valid datetime.
_LATEST_START = datetime.max - EVENT_DURATION


@dataclass(frozen=True)
class Parsed:
    """Both date and time were understood by the generic parser."""

    value: datetime


@dataclass(frozen=True)
class ManualFallback:
    """Time-of-day recovered from the time string, on the current date."""

    value: datetime


@dataclass(frozen=True)
class HardDefault:
    """Nothing usable; the current date at :data:`HARD_DEFAULT_HOUR`."""

    value: datetime


NormalizedStart = Parsed | ManualFallback | HardDefault


def _midnight(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)


def _parse_natural(date: str, time: str, now: datetime) -> Parsed | None:
    try:
        value = dateutil_parser.parse(f"{date} {time}", default=_midnight(now))
    except (ValueError, OverflowError) as exc:
        logger.debug("Could not parse %r %r as a date: %s", date, time, exc)
        return None
    value = value.replace(second=0, microsecond=0, tzinfo=None)
    if value > _LATEST_START:
        logger.debug("Start %s leaves no room for the event to end", value.isoformat())
        return None
    return Parsed(value)


def to_24_hour(hour: int, is_pm: bool) -> int:
    """Convert a 12-hour clock reading to 24-hour.

    12 AM becomes 0, 12 PM stays 12 and PM adds 12 to hours 1-11.  Hours
    already past 12 are returned unchanged.
    """
    if is_pm and 1 <= hour <= 11:
        return hour + 12
    if not is_pm and hour == 12:
        return 0
    return hour


def _parse_manual(date: str, time: str, now: datetime) -> ManualFallback | None:  # noqa: ARG001
    digits = _DIGITS_RE.findall(time)
    hour = int(digits[0]) if digits else HARD_DEFAULT_HOUR
    minute = int(digits[1]) if len(digits) > 1 else 0
    hour = to_24_hour(hour, "pm" in time.lower())
    try:
        value = _midnight(now).replace(hour=hour, minute=minute)
    except ValueError as exc:
        logger.debug("Time %r is out of range: %s", time, exc)
        return None
    if value > _LATEST_START:
        return None
    return ManualFallback(value)


_ATTEMPTS: tuple[Callable[[str, str, datetime], NormalizedStart | None], ...] = (
    _parse_natural,
    _parse_manual,
)


def normalize_datetime(
    date: str,
    time: str,
    now: datetime,
    default_time: str = DEFAULT_TIME,
) -> NormalizedStart:
    """Resolve raw date/time mentions into a naive start datetime.

    Args:
        date: Raw date text from the date stage, or ``""`` for today.
        time: Raw time text from the time stage, or ``""`` for
            *default_time*.
        now: Current time; supplies today's date and the default year.
        default_time: Time used when *time* is empty.

    Returns:
        The first successful attempt: :class:`Parsed`,
        :class:`ManualFallback`, or :class:`HardDefault`.
    """
    date = date.strip() or now.date().isoformat()
    time = time.strip() or default_time

    for attempt in _ATTEMPTS:
        result = attempt(date, time, now)
        if result is not None:
            logger.debug("Start resolved by %s: %s", type(result).__name__, result.value.isoformat())
            return result

    logger.debug("Falling back to %02d:00 today", HARD_DEFAULT_HOUR)
    return HardDefault(_midnight(now).replace(hour=HARD_DEFAULT_HOUR))
