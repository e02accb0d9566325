"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, domainctl.toml only contains
overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, PositiveInt


class CatalogConfig(BaseModel):
    """[catalog] section. ``path=None`` selects the bundled catalog."""

    model_config = {"frozen": True}

    path: Path | None = None


class ClipboardConfig(BaseModel):
    """[clipboard] section."""

    model_config = {"frozen": True}

    confirm_ms: PositiveInt = 1500
    success_pulse_ms: PositiveInt = 30
    failure_pulse_ms: PositiveInt = 50


class FeedbackConfig(BaseModel):
    """[feedback] section."""

    model_config = {"frozen": True}

    bell: bool = False


class BrowseConfig(BaseModel):
    """[browse] section. ``page_size=0`` draws every visible row."""

    model_config = {"frozen": True}

    page_size: int = Field(default=50, ge=0)
