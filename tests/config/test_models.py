"""Tests for the pydantic config models."""

import pytest
from pydantic import ValidationError

from intervalds.config.models import DisplayConfig


class TestDisplayConfig:
    def test_defaults(self) -> None:
        cfg = DisplayConfig()
        assert cfg.leading_field_precision == 9
        assert cfg.fractional_second_precision == 9

    @pytest.mark.parametrize("value", [-1, 10])
    def test_bounds(self, value: int) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(leading_field_precision=value)
        with pytest.raises(ValidationError):
            DisplayConfig(fractional_second_precision=value)

    def test_frozen(self) -> None:
        cfg = DisplayConfig()
        with pytest.raises(ValidationError):
            cfg.leading_field_precision = 2  # type: ignore[misc]

