"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, melclock.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    refresh_seconds: float = Field(default=60.0, gt=0)


class DeadlinesConfig(BaseModel):
    """[deadlines] section.

    ``category_a_days`` pre-fills the Category A interval; unset means the
    board shows the needs-input state until one is supplied.
    ``max_custom_days`` is the upper bound the CLI accepts for it.
    """

    model_config = {"frozen": True}

    category_a_days: int | None = None
    max_custom_days: int = Field(default=365, ge=0)
