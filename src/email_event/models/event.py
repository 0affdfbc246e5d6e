"""Pydantic model for an event extracted from email text.

:class:`ExtractedEvent` is the single value produced by the extractor.  It
is frozen, and ``end`` is computed from ``start`` rather than stored.
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

EVENT_DURATION = timedelta(hours=1)


class ExtractedEvent(BaseModel):
    """A calendar event recovered from free-form email text.

    Attributes:
        title: Trimmed, non-empty event title.
        start: Naive local start time.
        end: ``start`` plus one hour (computed).
        location: Trimmed location text, or ``None`` when absent.
        confidence: Sum of the stage weights that fired, capped at 100.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    start: datetime
    location: str | None = None
    confidence: int = Field(ge=0, le=100)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("title must not be blank")
        return stripped

    @field_validator("location")
    @classmethod
    def _blank_location_is_none(cls, value: str | None) -> str | None:
        """Collapse empty or whitespace-only locations to ``None``."""
        if value is None:
            return None
        return value.strip() or None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def end(self) -> datetime:
        return self.start + EVENT_DURATION

    def to_json(self, indent: int | None = 2) -> str:
        """Serialise to JSON with ISO 8601 timestamps.

        ``location`` is omitted when absent.  Keys appear in the order
        ``title``, ``start``, ``end``, ``location``, ``confidence``.
        """
        data = self.model_dump(mode="json", exclude_none=True)
        ordered = {key: data[key] for key in ("title", "start", "end", "location", "confidence") if key in data}
        return json.dumps(ordered, indent=indent)

    def notification(self) -> str:
        """Return the one-line success message shown after extraction."""
        return f'Found "{self.title}" with {self.confidence}% confidence.'

