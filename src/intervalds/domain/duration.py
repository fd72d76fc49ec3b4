"""Conversions between IntervalDS and :class:`datetime.timedelta`.

IntervalDS has no arithmetic of its own; convert to ``timedelta``,
compute, and convert back.
"""

from __future__ import annotations

from datetime import timedelta

from intervalds.domain.interval import IntervalDS

_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE
_US_PER_DAY = 24 * _US_PER_HOUR


def _truncate_to_microseconds(nanoseconds: int) -> int:
    if nanoseconds < 0:
        return -(-nanoseconds // 1000)
    return nanoseconds // 1000


def to_timedelta(interval: IntervalDS) -> timedelta:
    """Convert *interval* to a timedelta.

    ``timedelta`` resolves microseconds, so the last three nanosecond
    digits are truncated toward zero.
    """
    return timedelta(
        days=interval.days,
        hours=interval.hours,
        minutes=interval.minutes,
        seconds=interval.seconds,
        microseconds=_truncate_to_microseconds(interval.nanoseconds),
    )


def from_timedelta(delta: timedelta) -> IntervalDS:
    """Split *delta* into sign-consistent IntervalDS components.

    ``timedelta`` normalizes negative values to negative days plus
    positive seconds; the result here has every component ≤ 0 instead.
    """
    total = delta // timedelta(microseconds=1)
    negative = total < 0
    days, rest = divmod(abs(total), _US_PER_DAY)
    hours, rest = divmod(rest, _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    seconds, micros = divmod(rest, _US_PER_SECOND)
    parts = (days, hours, minutes, seconds, micros * 1000)
    if negative:
        parts = tuple(-p for p in parts)  # type: ignore[assignment]
    return IntervalDS(*parts)
