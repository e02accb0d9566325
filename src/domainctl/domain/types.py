"""Copy outcome and copy state enums."""

from __future__ import annotations

from enum import StrEnum


class CopyOutcome(StrEnum):
    """Result of a single copy request."""

    CONFIRMED = "confirmed"
    FAILED = "failed"


class CopyPhase(StrEnum):
    """The two states of the copy confirmation machine."""

    IDLE = "idle"
    CONFIRMED = "confirmed"
