"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, agecalc.toml only contains
overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from agecalc.domain.validation import MIN_YEAR


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    min_year: int = MIN_YEAR


class WatchConfig(BaseModel):
    """[watch] section."""

    model_config = {"frozen": True}

    debounce_ms: int = Field(default=500, ge=0)

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    thousands_separator: bool = True

