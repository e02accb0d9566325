"""Feedback signal adapters — duration-only pulses, fire and forget.

A pulse stands in for a short vibration: 30 ms after a confirmed copy,
50 ms after a failed one. Adapters must tolerate a missing capability
silently.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import structlog

log = structlog.get_logger(__name__)


class FeedbackSignal(Protocol):
    """Receiver of duration-only pulse requests."""

    def pulse(self, duration_ms: int) -> None: ...


class NullFeedback:
    """Feedback sink for environments with no feedback capability."""

    def pulse(self, duration_ms: int) -> None:
        return None


class TerminalFeedback:
    """Logs every pulse and optionally rings the terminal bell.

    The bell is only written when *bell* is enabled and *stream* is a TTY,
    so piped and captured output stay clean.
    """

    def __init__(self, *, bell: bool = False, stream: TextIO | None = None) -> None:
        self._bell = bell
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def pulse(self, duration_ms: int) -> None:
        log.debug("feedback.pulse", duration_ms=duration_ms)
        if self._bell and self.stream.isatty():
            self.stream.write("\a")
            self.stream.flush()
