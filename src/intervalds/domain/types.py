"""Oracle column type descriptors.

A database client hands every fetched value over together with an
:class:`OracleType`.  Only ``INTERVAL DAY TO SECOND`` descriptors carry
anything this package reads: the leading field and fractional second
precisions declared on the column.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class OracleTypeTag(StrEnum):
    """SQL type families a descriptor can tag."""

    VARCHAR2 = "VARCHAR2"
    NVARCHAR2 = "NVARCHAR2"
    CHAR = "CHAR"
    NUMBER = "NUMBER"
    BINARY_FLOAT = "BINARY_FLOAT"
    BINARY_DOUBLE = "BINARY_DOUBLE"
    DATE = "DATE"
    TIMESTAMP = "TIMESTAMP"
    TIMESTAMP_TZ = "TIMESTAMP WITH TIME ZONE"
    TIMESTAMP_LTZ = "TIMESTAMP WITH LOCAL TIME ZONE"
    INTERVAL_DS = "INTERVAL DAY TO SECOND"
    INTERVAL_YM = "INTERVAL YEAR TO MONTH"
    RAW = "RAW"
    CLOB = "CLOB"
    BLOB = "BLOB"


_TIMESTAMP_TAGS = frozenset(
    {OracleTypeTag.TIMESTAMP, OracleTypeTag.TIMESTAMP_TZ, OracleTypeTag.TIMESTAMP_LTZ}
)


@dataclass(frozen=True)
class OracleType:
    """A column type: a tag plus its numeric parameters.

    ``params`` is ``(lfprec, fsprec)`` for ``INTERVAL_DS``, ``(fsprec,)``
    for the timestamp family, and empty otherwise.
    """

    tag: OracleTypeTag
    params: tuple[int, ...] = ()

    @classmethod
    def interval_ds(cls, lfprec: int, fsprec: int) -> OracleType:
        return cls(OracleTypeTag.INTERVAL_DS, (lfprec, fsprec))

    @classmethod
    def timestamp(cls, fsprec: int, tag: OracleTypeTag = OracleTypeTag.TIMESTAMP) -> OracleType:
        if tag not in _TIMESTAMP_TAGS:
            msg = f"{tag} is not a timestamp type"
            raise ValueError(msg)
        return cls(tag, (fsprec,))

    def interval_ds_precision(self) -> tuple[int, int] | None:
        """Return ``(lfprec, fsprec)`` for interval-DS descriptors, else None."""
        if self.tag is OracleTypeTag.INTERVAL_DS and len(self.params) == 2:
            return self.params[0], self.params[1]
        return None

    def __str__(self) -> str:
        precision = self.interval_ds_precision()
        if precision is not None:
            return f"INTERVAL DAY({precision[0]}) TO SECOND({precision[1]})"
        if self.tag in _TIMESTAMP_TAGS and self.params:
            head, _, tail = str(self.tag).partition(" ")
            suffix = f" {tail}" if tail else ""
            return f"{head}({self.params[0]}){suffix}"
        return str(self.tag)
