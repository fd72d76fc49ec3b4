"""intervalds — Oracle INTERVAL DAY TO SECOND values and their text codec."""

from __future__ import annotations

from intervalds.domain.errors import MalformedLiteralError
from intervalds.domain.interval import IntervalDS
from intervalds.domain.types import OracleType, OracleTypeTag

__version__ = "0.3.0"

__all__ = [
    "IntervalDS",
    "MalformedLiteralError",
    "OracleType",
    "OracleTypeTag",
    "__version__",
]
