"""Configuration loading for email-event.

Reads optional settings from environment variables (with .env support via
python-dotenv).  Every setting has a default, so an empty environment is
valid; values that are present must be well formed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from email_event.normalizer import DEFAULT_TIME

DEFAULT_JSON_INDENT = 2


class ConfigError(Exception):
    """Raised when configuration is present but invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level name (default ``"INFO"``).
        default_event_time: Time of day used when the email mentions none
            (default ``"2:00 PM"``).
        json_indent: Indentation for ``--json`` output (default ``2``).
    """

    log_level: str = "INFO"
    default_event_time: str = DEFAULT_TIME
    json_indent: int = DEFAULT_JSON_INDENT


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If any variable is set to an invalid value.  The
            message names **all** offending variables.
    """
    load_dotenv()

    values: dict[str, str | int] = {}
    invalid: list[str] = []

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if isinstance(logging.getLevelName(log_level.upper()), int):
            values["log_level"] = log_level.upper()
        else:
            invalid.append(f"LOG_LEVEL={log_level!r}")

    default_time = os.environ.get("DEFAULT_EVENT_TIME", "").strip()
    if default_time:
        values["default_event_time"] = default_time

    indent = os.environ.get("JSON_INDENT", "").strip()
    if indent:
        if indent.isdigit():
            values["json_indent"] = int(indent)
        else:
            invalid.append(f"JSON_INDENT={indent!r}")

    if invalid:
        raise ConfigError(f"Invalid environment variables: {', '.join(invalid)}")

    return Settings(**values)
