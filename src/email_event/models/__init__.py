"""Data models for email-event."""

from __future__ import annotations

from email_event.models.event import EVENT_DURATION, ExtractedEvent
from email_event.models.stage import StageMatch

__all__ = [
    "EVENT_DURATION",
    "ExtractedEvent",
    "StageMatch",
]
