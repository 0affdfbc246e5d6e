"""Console rendering for an :class:`~email_event.models.event.ExtractedEvent`.

:func:`format_event` returns a short event card followed by the
notification line; :func:`print_event` writes it to stdout.
"""

from __future__ import annotations

import sys
from datetime import datetime

from email_event.examples import ExampleEmail
from email_event.models.event import ExtractedEvent

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_CARD_WIDTH = 60
_SEPARATOR = "=" * _CARD_WIDTH


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_event(event: ExtractedEvent) -> str:
    """Render *event* as a card.

    The card shows the title with a confidence badge, the start date and
    time, the location when known, and the notification message.

    Args:
        event: The event to format.

    Returns:
        A multi-line string ready for console display.
    """
    lines: list[str] = [_SEPARATOR]
    lines.append(_title_line(event))
    lines.append(_SEPARATOR)
    lines.append(f"  When:  {_format_start(event.start)}")
    if event.location:
        lines.append(f"  Where: {event.location}")
    lines.append("")
    lines.append(event.notification())
    return "\n".join(lines)


def print_event(event: ExtractedEvent) -> None:
    """Format and print *event* to stdout."""
    sys.stdout.write(format_event(event) + "\n")


def format_example_list(examples: dict[str, ExampleEmail]) -> str:
    """Render one line per example: name, label and first line."""
    width = max((len(name) for name in examples), default=0)
    return "\n".join(
        f"{name:<{width}}  {example.title}: {example.preview}" for name, example in examples.items()
    )


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _title_line(event: ExtractedEvent) -> str:
    badge = f"[{event.confidence}% confidence]"
    padding = max(_CARD_WIDTH - len(event.title) - len(badge) - 2, 1)
    return f"  {event.title}{' ' * padding}{badge}"


def _format_start(start: datetime) -> str:
    """Format as ``"Tue Mar 15, 2025 at 02:00 PM"``."""
    return f"{start:%a %b %d, %Y} at {start:%I:%M %p}"
