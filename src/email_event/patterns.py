"""Compiled regular expressions for every extraction family.

Each stage tries its patterns in the order they are listed in
:mod:`email_event.stages`.  Patterns whose value is a sub-part of the match
expose it as capture group 1; all other groups are non-capturing so the
whole match is used.
"""

from __future__ import annotations

import re

_MONTHS = (
    r"(?:January|February|March|April|May|June|July|August|September|October|November|December)"
)
_WEEKDAYS = r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"
_ORDINAL = r"(?:st|nd|rd|th)?"
# 1-31; a longer run of digits is not a day.
_DAY = r"(?:3[01]|[12]\d|0?[1-9])(?!\d)"
_MERIDIEM = r"(?:\s*(?:AM|PM)\b)"

# ---------------------------------------------------------------------------
# Date
# ---------------------------------------------------------------------------

# "March 15, 2025", "March 15th, 2025"
LONG_FORM_DATE_RE = re.compile(rf"\b{_MONTHS}\s+{_DAY}{_ORDINAL},?\s+\d{{4}}", re.IGNORECASE)

# "15/03/2025" or "03/15/2025"; the order is left to the normaliser.
SLASH_DATE_RE = re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}")

# "2025-03-15"
ISO_DATE_RE = re.compile(r"\b\d{4}-\d{1,2}-\d{1,2}")

# "Monday, March 15", "Tuesday March 15th"
WEEKDAY_DATE_RE = re.compile(
    rf"\b{_WEEKDAYS},?\s+{_MONTHS}\s+{_DAY}{_ORDINAL}", re.IGNORECASE
)

# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

# "3:00 PM", "15:00"
CLOCK_TIME_RE = re.compile(rf"\b\d{{1,2}}:\d{{2}}{_MERIDIEM}?", re.IGNORECASE)

# "at 3pm", "at 15:00"; the hour must not run on into a longer number.
AT_HOUR_TIME_RE = re.compile(
    rf"\bat\s+\d{{1,2}}(?::\d{{2}})?(?:{_MERIDIEM}|(?![\d:]))", re.IGNORECASE
)

# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

# "Meeting with ...", "Call with ..."; group 1 is the keyword as written.
KEYWORD_TITLE_RE = re.compile(
    r"\b(meeting|call|conference|appointment|interview|lunch|dinner|presentation|demo|review)"
    r"\s+(?:with\s+)?[^.\n]+",
    re.IGNORECASE,
)

# "Team standup", "Project review"
COMPOUND_TITLE_RE = re.compile(r"\b((?:team|project|weekly|daily)\s+\w+)", re.IGNORECASE)

# "Subject: ..." up to the end of the line
SUBJECT_TITLE_RE = re.compile(r"subject:\s*([^\n]+)", re.IGNORECASE)

# Any double-quoted phrase
QUOTED_TITLE_RE = re.compile(r'"([^"]+)"')

# Reply/forward prefixes stripped from the first-line fallback title.
TITLE_PREFIX_RE = re.compile(r"^(?:subject:|re:|fwd:)", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

# "at 123 Main St", "in Conference Room A", "Location: Building 4"
VENUE_LOCATION_RE = re.compile(
    r"(?:\bat|\bin|\blocation:)\s+"
    r"([^.\n,]+(?:room|street|st|avenue|ave|building|floor|office)[^.\n,]*)",
    re.IGNORECASE,
)

# "Zoom meeting", "Teams call"
ONLINE_LOCATION_RE = re.compile(r"\b(?:zoom|teams|skype|google meet|webex)[^.\n,]*", re.IGNORECASE)
