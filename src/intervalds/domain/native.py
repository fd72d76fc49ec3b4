"""Build :class:`IntervalDS` values from client-runtime records.

The database client decodes the wire format into a small struct of five
integers (ODPI-C's ``dpiIntervalDS``).  This module only needs to read
those fields and ask the column descriptor for its precisions, so both
are modelled as narrow protocols; any object with the right attributes
works, including test fakes.
"""

from __future__ import annotations

from typing import Protocol

from intervalds.domain.interval import IntervalDS


class NativeIntervalRecord(Protocol):
    """Read-only view of a decoded ``dpiIntervalDS`` struct."""

    @property
    def days(self) -> int: ...

    @property
    def hours(self) -> int: ...

    @property
    def minutes(self) -> int: ...

    @property
    def seconds(self) -> int: ...

    @property
    def fseconds(self) -> int:
        """Fractional seconds, in nanoseconds."""
        ...


class IntervalTypeDescriptor(Protocol):
    """Anything that can report interval-DS precisions (see OracleType)."""

    def interval_ds_precision(self) -> tuple[int, int] | None: ...


def from_native_record(record: NativeIntervalRecord, oratype: IntervalTypeDescriptor) -> IntervalDS:
    """Copy *record* into an IntervalDS tagged with *oratype*'s precisions.

    Descriptors that are not ``INTERVAL DAY TO SECOND`` yield 0/0.
    """
    lfprec, fsprec = oratype.interval_ds_precision() or (0, 0)
    return IntervalDS(
        record.days,
        record.hours,
        record.minutes,
        record.seconds,
        record.fseconds,
        leading_field_precision=lfprec,
        fractional_second_precision=fsprec,
    )
