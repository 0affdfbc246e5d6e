"""email-event: Email-to-Calendar event extraction.

Pulls a single calendar event (title, start, end, location, confidence)
out of free-form email text using ordered pattern matching.
"""

from __future__ import annotations

from email_event.exceptions import EmptyInputError, ExtractionError
from email_event.extractor import EventExtractor, extract
from email_event.models.event import ExtractedEvent
from email_event.models.stage import StageMatch
from email_event.normalizer import HardDefault, ManualFallback, Parsed, normalize_datetime

__version__ = "0.1.0"

__all__ = [
    "EmptyInputError",
    "EventExtractor",
    "ExtractedEvent",
    "ExtractionError",
    "HardDefault",
    "ManualFallback",
    "Parsed",
    "StageMatch",
    "extract",
    "normalize_datetime",
]
