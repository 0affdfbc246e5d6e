"""Result type shared by the extraction stages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StageMatch:
    """The winning match of one extraction stage.

    Attributes:
        text: The matched substring, trimmed.
        family: Name of the pattern family that produced the match.
        weight: Confidence points this match contributes.
    """

    text: str
    family: str
    weight: int
