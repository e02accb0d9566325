"""Tests for CopyService — one-shot copy reported as ServiceResult."""

from __future__ import annotations

import pytest

from domainctl.domain.catalog import Catalog
from domainctl.services.copy import CopyService
from domainctl.services.copy_session import CopySession
from tests.conftest import FakeClipboard, RecordingFeedback


class TestCopyService:
    @pytest.mark.asyncio
    async def test_copy_known_domain(
        self, catalog: Catalog, fake_clipboard: FakeClipboard, feedback: RecordingFeedback
    ) -> None:
        async with CopySession(fake_clipboard, feedback) as copier:
            result = await CopyService(catalog, copier).copy("bbb.com")
            assert copier.is_confirmed("bbb.com")
        assert result.ok
        assert result.op == "copy"
        assert result.data == {"domain": "bbb.com", "outcome": "confirmed", "confirm_ms": 1500}
        assert fake_clipboard.writes == ["bbb.com"]
        assert feedback.pulses == [30]

    @pytest.mark.asyncio
    async def test_unknown_domain_is_rejected_before_writing(
        self, catalog: Catalog, fake_clipboard: FakeClipboard
    ) -> None:
        async with CopySession(fake_clipboard) as copier:
            result = await CopyService(catalog, copier).copy("nope.example")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_DOMAIN"
        assert fake_clipboard.writes == []

    @pytest.mark.asyncio
    async def test_clipboard_failure(self, catalog: Catalog, feedback: RecordingFeedback) -> None:
        async with CopySession(FakeClipboard(fail=True), feedback) as copier:
            result = await CopyService(catalog, copier).copy("bbb.com")
            assert not copier.is_confirmed("bbb.com")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CLIPBOARD_WRITE_FAILED"
        assert result.error.detail == {"domain": "bbb.com"}
        assert feedback.pulses == [50]
