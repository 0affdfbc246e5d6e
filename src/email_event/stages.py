"""Independent extraction stages for date, time, title and location.

A :class:`Stage` is an ordered tuple of :class:`Family` matchers.  The
first family that matches anywhere in the text wins; only its first match
is kept and later families are never consulted.  Stages do not look at
each other's output, so they can run in any order.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from email_event import patterns
from email_event.models.stage import StageMatch

logger = logging.getLogger(__name__)

DATE_WEIGHT = 30
TIME_WEIGHT = 25
TITLE_WEIGHT = 25
FALLBACK_TITLE_WEIGHT = 10
LOCATION_WEIGHT = 20

DEFAULT_TITLE = "Extracted Event"

# First-line titles must be longer than five characters once trimmed.
_MIN_FALLBACK_LINE = 6


@dataclass(frozen=True)
class Family:
    """One alternative pattern within a stage.

    Attributes:
        name: Short identifier reported in :attr:`StageMatch.family`.
        pattern: Compiled expression.  When it has a capture group, group 1
            is the value; otherwise the whole match is.
    """

    name: str
    pattern: re.Pattern[str]

    def search(self, text: str) -> str | None:
        """Return the trimmed value of the first match, or ``None``."""
        match = self.pattern.search(text)
        if match is None:
            return None
        value = match.group(1) if self.pattern.groups else None
        if value is None:
            value = match.group(0)
        return value.strip() or None


@dataclass(frozen=True)
class Stage:
    """An ordered list of families sharing one confidence weight."""

    name: str
    families: tuple[Family, ...]
    weight: int

    def run(self, text: str) -> StageMatch | None:
        """Try each family in order and return the first hit."""
        for family in self.families:
            value = family.search(text)
            if value is not None:
                logger.debug("%s stage: family %r matched %r", self.name, family.name, value)
                return StageMatch(text=value, family=family.name, weight=self.weight)
        logger.debug("%s stage: no family matched", self.name)
        return None


DATE_STAGE = Stage(
    name="date",
    families=(
        Family("long_form", patterns.LONG_FORM_DATE_RE),
        Family("slash", patterns.SLASH_DATE_RE),
        Family("iso", patterns.ISO_DATE_RE),
        Family("weekday", patterns.WEEKDAY_DATE_RE),
    ),
    weight=DATE_WEIGHT,
)

TIME_STAGE = Stage(
    name="time",
    families=(
        Family("clock", patterns.CLOCK_TIME_RE),
        Family("at_hour", patterns.AT_HOUR_TIME_RE),
    ),
    weight=TIME_WEIGHT,
)

TITLE_STAGE = Stage(
    name="title",
    families=(
        Family("keyword", patterns.KEYWORD_TITLE_RE),
        Family("compound", patterns.COMPOUND_TITLE_RE),
        Family("subject", patterns.SUBJECT_TITLE_RE),
        Family("quoted", patterns.QUOTED_TITLE_RE),
    ),
    weight=TITLE_WEIGHT,
)

LOCATION_STAGE = Stage(
    name="location",
    families=(
        Family("venue", patterns.VENUE_LOCATION_RE),
        Family("online", patterns.ONLINE_LOCATION_RE),
    ),
    weight=LOCATION_WEIGHT,
)


def extract_date(text: str) -> StageMatch | None:
    """Return the first date mention, e.g. ``"March 15th, 2025"``."""
    return DATE_STAGE.run(text)


def extract_time(text: str) -> StageMatch | None:
    """Return the first time mention, e.g. ``"2:00 PM"`` or ``"at 3pm"``."""
    return TIME_STAGE.run(text)


def extract_title(text: str) -> StageMatch | None:
    """Return a title from keyword, compound, subject or quoted families."""
    return TITLE_STAGE.run(text)


def extract_location(text: str) -> StageMatch | None:
    """Return a venue or online-meeting location."""
    return LOCATION_STAGE.run(text)


def fallback_title(text: str) -> StageMatch | None:
    """Use the first meaningful line as the title.

    Only consulted when :func:`extract_title` found nothing.  The first line
    longer than five characters once trimmed is taken, with a leading
    ``subject:``, ``re:`` or ``fwd:`` removed.

    A first line that is nothing but a prefix (``"Subject:"``) deliberately
    yields ``None`` instead of an empty title worth the fallback weight, so
    confidence only counts text that was actually recovered.

    Returns:
        A match worth :data:`FALLBACK_TITLE_WEIGHT`, or ``None`` when no
        line qualifies or the chosen line is nothing but a prefix.
    """
    for line in text.splitlines():
        stripped = line.strip()
        if len(stripped) < _MIN_FALLBACK_LINE:
            continue
        title = patterns.TITLE_PREFIX_RE.sub("", stripped, count=1).strip()
        if not title:
            logger.debug("title fallback: first line %r is only a prefix", stripped)
            return None
        logger.debug("title fallback: using first line %r", title)
        return StageMatch(text=title, family="first_line", weight=FALLBACK_TITLE_WEIGHT)
    return None
