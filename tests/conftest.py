"""Shared pytest fixtures and test doubles for domainctl tests."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from click.testing import CliRunner

from domainctl.domain.catalog import Catalog
from domainctl.infrastructure.clipboard import ClipboardWriteResult

SAMPLE_DOMAINS = ("aaa.com", "bbb.com", "mail.aaa.com")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(domains=SAMPLE_DOMAINS, source="test")


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Catalog text file with the sample domains and some noise."""
    path = tmp_path / "domains.txt"
    path.write_text("# sample\naaa.com\n\nbbb.com\nmail.aaa.com\n")
    return path


@pytest.fixture
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no DOMAINCTL_* overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_env")`` on command test
    classes so no stray ``domainctl.toml`` is discovered.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("DOMAINCTL_CONFIG", "DOMAINCTL_CATALOG__PATH", "DOMAINCTL_CATALOG_OVERRIDE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def clipboard_writes(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace pyperclip.copy with a recorder; returns the recorded texts."""
    writes: list[str] = []
    monkeypatch.setattr("domainctl.infrastructure.clipboard.pyperclip.copy", writes.append)
    return writes


# ---------------------------------------------------------------------------
# Test doubles for the copy session collaborators
# ---------------------------------------------------------------------------


class FakeClipboard:
    """In-memory clipboard with scriptable failures and held writes."""

    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.failing: set[str] = set()
        self.writes: list[str] = []
        self._gates: dict[str, asyncio.Event] = {}

    def hold(self, text: str) -> asyncio.Event:
        """Block the next write of *text* until the returned event is set."""
        gate = asyncio.Event()
        self._gates[text] = gate
        return gate

    async def write(self, text: str) -> ClipboardWriteResult:
        gate = self._gates.pop(text, None)
        if gate is not None:
            await gate.wait()
        if self.fail or text in self.failing:
            return ClipboardWriteResult.failure("rejected")
        self.writes.append(text)
        return ClipboardWriteResult.success()


class RecordingFeedback:
    """Feedback sink that records pulse durations."""

    def __init__(self) -> None:
        self.pulses: list[int] = []

    def pulse(self, duration_ms: int) -> None:
        self.pulses.append(duration_ms)


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def feedback() -> RecordingFeedback:
    return RecordingFeedback()
