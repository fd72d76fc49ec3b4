"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, intervalds.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from intervalds.domain.interval import DEFAULT_PRECISION


class DisplayConfig(BaseModel):
    """[display] section: precisions used when a command is given none."""

    model_config = {"frozen": True}

    leading_field_precision: int = Field(default=DEFAULT_PRECISION, ge=0, le=9)
    fractional_second_precision: int = Field(default=DEFAULT_PRECISION, ge=0, le=9)

