"""Clipboard adapter — result-bearing writes to the system clipboard.

Writes never raise for backend problems: they resolve to a
:class:`ClipboardWriteResult` so the copy state machine can branch on
success or failure explicitly. Uses pyperclip for cross-platform access;
the blocking call runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import pyperclip
from pydantic import BaseModel

logger = logging.getLogger(__name__)

CLIPBOARD_WRITE_FAILED = "CLIPBOARD_WRITE_FAILED"


class ClipboardWriteResult(BaseModel):
    """Outcome of a clipboard write. ``error`` is opaque to callers."""

    model_config = {"frozen": True}

    ok: bool
    error: str | None = None

    @classmethod
    def success(cls) -> ClipboardWriteResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> ClipboardWriteResult:
        return cls(ok=False, error=error)


class Clipboard(Protocol):
    """Anything that can asynchronously place text on a clipboard."""

    async def write(self, text: str) -> ClipboardWriteResult: ...


class SystemClipboard:
    """Clipboard backed by :mod:`pyperclip`."""

    async def write(self, text: str) -> ClipboardWriteResult:
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as exc:
            logger.debug("Clipboard write rejected: %s", exc)
            return ClipboardWriteResult.failure(str(exc) or type(exc).__name__)
        return ClipboardWriteResult.success()
