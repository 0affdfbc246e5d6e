"""Custom exceptions for the email-event extractor.

Extraction itself degrades to defaults instead of failing, so the only
condition the core reports is a precondition violation on its input.
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for errors raised by :mod:`email_event`."""


class EmptyInputError(ExtractionError):
    """Raised when the email text is empty or whitespace-only.

    Callers are expected to check for blank input before extracting; this
    error surfaces the mistake instead of inventing an event from nothing.
    """

    def __init__(self, message: str = "No email content to extract an event from") -> None:
        super().__init__(message)
