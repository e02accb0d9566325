"""CopySession — the copy confirmation state machine.

Two states: ``idle`` and ``confirmed(domain)``. A confirmed copy arms a
single expiry timer on the running event loop; any later confirmed copy
(same domain or not) cancels that timer and arms a fresh one. Failed copies
never touch state.

INVARIANT: At most one domain is confirmed and at most one timer is live.
INVARIANT: A timer that was cancelled or superseded never mutates state.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import structlog

from domainctl.domain.types import CopyOutcome, CopyPhase
from domainctl.infrastructure.clipboard import ClipboardWriteResult
from domainctl.infrastructure.feedback import NullFeedback

if TYPE_CHECKING:
    from domainctl.infrastructure.clipboard import Clipboard
    from domainctl.infrastructure.feedback import FeedbackSignal

log = structlog.get_logger(__name__)

DEFAULT_CONFIRM_MS = 1500
DEFAULT_SUCCESS_PULSE_MS = 30
DEFAULT_FAILURE_PULSE_MS = 50


class CopySessionClosedError(RuntimeError):
    """Raised when a copy is requested on a closed session."""


class CopySession:
    """Tracks the single recently-copied domain and its expiry.

    Must be used from within a running event loop. Close the session (or
    use it as an async context manager) to cancel any live timer.

    Parameters:
        clipboard: Result-bearing clipboard writer.
        feedback: Pulse receiver; defaults to a no-op sink.
        confirm_ms: Length of the confirmation window.
        success_pulse_ms: Pulse emitted after a confirmed copy.
        failure_pulse_ms: Pulse emitted after a failed copy.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        feedback: FeedbackSignal | None = None,
        *,
        confirm_ms: int = DEFAULT_CONFIRM_MS,
        success_pulse_ms: int = DEFAULT_SUCCESS_PULSE_MS,
        failure_pulse_ms: int = DEFAULT_FAILURE_PULSE_MS,
    ) -> None:
        if confirm_ms <= 0:
            raise ValueError("confirm_ms must be positive")
        self._clipboard = clipboard
        self._feedback: FeedbackSignal = feedback if feedback is not None else NullFeedback()
        self._confirm_ms = confirm_ms
        self._success_pulse_ms = success_pulse_ms
        self._failure_pulse_ms = failure_pulse_ms

        self._confirmed: str | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._generation = 0
        self._closed = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def confirmed(self) -> str | None:
        """The currently confirmed domain, or None."""
        return self._confirmed

    @property
    def phase(self) -> CopyPhase:
        return CopyPhase.IDLE if self._confirmed is None else CopyPhase.CONFIRMED

    @property
    def confirm_ms(self) -> int:
        return self._confirm_ms

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def timer_active(self) -> bool:
        return self._timer is not None

    @property
    def expires_at(self) -> float | None:
        """Event-loop time at which the confirmation lapses, if any."""
        return self._timer.when() if self._timer is not None else None

    def is_confirmed(self, domain: str) -> bool:
        return self._confirmed is not None and self._confirmed == domain

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def request_copy(self, domain: str) -> CopyOutcome:
        """Write *domain* to the clipboard and update the confirmation state.

        Returns ``CONFIRMED`` or ``FAILED``; clipboard problems never raise.

        Raises:
            CopySessionClosedError: If the session was already closed.
        """
        if self._closed:
            raise CopySessionClosedError("copy session is closed")

        result = await self._write(domain)
        if not result.ok:
            log.info("copy.failed", domain=domain, error=result.error)
            self._signal(self._failure_pulse_ms)
            return CopyOutcome.FAILED

        if self._closed:
            # Session torn down while the write was in flight: no new timer.
            log.debug("copy.completed_after_close", domain=domain)
            return CopyOutcome.CONFIRMED

        self._confirm(domain)
        self._signal(self._success_pulse_ms)
        return CopyOutcome.CONFIRMED

    def close(self) -> None:
        """Cancel any live timer and return to idle. Idempotent."""
        if self._closed:
            return
        if self._timer is not None:
            log.debug("copy.timer_cancelled_on_close", domain=self._confirmed)
        self._cancel_timer()
        self._generation += 1
        self._confirmed = None
        self._closed = True

    async def __aenter__(self) -> CopySession:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _write(self, domain: str) -> ClipboardWriteResult:
        try:
            return await self._clipboard.write(domain)
        except Exception as exc:
            log.warning("copy.clipboard_error", domain=domain, exc_info=True)
            return ClipboardWriteResult.failure(str(exc) or type(exc).__name__)

    def _confirm(self, domain: str) -> None:
        loop = asyncio.get_running_loop()
        previous = self._confirmed

        self._cancel_timer()
        self._generation += 1
        self._confirmed = domain
        self._timer = loop.call_later(self._confirm_ms / 1000, self._expire, self._generation)

        if previous is None:
            log.debug("copy.confirmed", domain=domain, confirm_ms=self._confirm_ms)
        elif previous == domain:
            log.debug("copy.rearmed", domain=domain, confirm_ms=self._confirm_ms)
        else:
            log.debug("copy.superseded", previous=previous, domain=domain)

    def _expire(self, generation: int) -> None:
        if generation != self._generation:
            log.debug("copy.stale_expiry_ignored", generation=generation)
            return
        log.debug("copy.expired", domain=self._confirmed)
        self._confirmed = None
        self._timer = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _signal(self, duration_ms: int) -> None:
        """Emit a feedback pulse. Feedback failures never affect the copy."""
        try:
            self._feedback.pulse(duration_ms)
        except Exception:
            log.debug("feedback.pulse_failed", duration_ms=duration_ms, exc_info=True)
