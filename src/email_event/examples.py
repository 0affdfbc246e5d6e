"""Sample emails bundled with the CLI (``--example`` / ``--list-examples``)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExampleEmail:
    """A named sample email.

    Attributes:
        title: Human-readable label.
        content: Raw email text.
    """

    title: str
    content: str

    @property
    def preview(self) -> str:
        """First line of the email."""
        return self.content.split("\n", 1)[0]


EXAMPLE_EMAILS: dict[str, ExampleEmail] = {
    "team-meeting": ExampleEmail(
        title="Team Meeting",
        content="""Subject: Weekly Team Standup

Hi everyone,

We have our weekly team standup scheduled for Tuesday, March 15th at 2:00 PM in Conference Room A. We'll be discussing the quarterly goals and project updates.

Looking forward to seeing everyone there!

Best regards,
Sarah""",
    ),
    "client-call": ExampleEmail(
        title="Client Call",
        content="""From: john@company.com
Subject: Call with ABC Corp

Hi team,

I've scheduled a call with ABC Corp for Friday, March 18th, 2025 at 10:30 AM. This will be a Zoom meeting to discuss the new partnership opportunities.

Zoom link: https://zoom.us/j/123456789

Thanks,
John""",
    ),
    "lunch-meeting": ExampleEmail(
        title="Lunch Meeting",
        content="""Hey Sarah,

Would you like to grab lunch tomorrow (March 16th) at 12:30 PM? I was thinking we could meet at the new Italian restaurant on Main Street to discuss the marketing campaign.

Let me know if that works for you!

Mike""",
    ),
}


def get_example(name: str) -> ExampleEmail:
    """Look up a bundled example by name.

    Raises:
        KeyError: If *name* is not a known example.  The message lists the
            available names.
    """
    try:
        return EXAMPLE_EMAILS[name]
    except KeyError:
        available = ", ".join(sorted(EXAMPLE_EMAILS))
        raise KeyError(f"Unknown example {name!r} (available: {available})") from None
