"""Text encoder and decoder for :class:`IntervalDS`.

Canonical form::

    [+-]D SP HH:MM:SS[.F]

* ``D`` is the absolute day count, zero-padded to the leading field
  precision when that is 2..9, natural width otherwise.
* ``HH``, ``MM`` and ``SS`` are always two digits.
* ``F`` holds the first *fsprec* digits of the nine-digit nanosecond
  field, truncated (never rounded).  It is omitted when *fsprec* is 0 or
  outside 1..9.

The decoder accepts exactly this grammar, derives both precisions from the
digit counts it reads, and rejects anything it cannot consume completely.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from intervalds.domain.errors import MalformedLiteralError
from intervalds.domain.interval import IntervalDS
from intervalds.domain.scanner import Scanner

logger = logging.getLogger(__name__)

TYPE_NAME = "IntervalDS"
NANOSECOND_DIGITS = 9

# Leading field precisions that zero-pad the day count to that many
# digits.  0, 1 and anything outside this set render at natural width.
PADDED_DAY_PRECISIONS = frozenset(range(2, 10))

# Day, hour, minute and second fields are 32-bit signed in the native
# record; longer digit runs are rejected rather than decoded.
FIELD_MAX = 2**31 - 1

# Fractional second precision -> divisor applied to the nanosecond
# magnitude.  Precisions missing here (0 included) omit the fraction.
FRACTION_DIVISORS: dict[int, int] = {
    p: 10 ** (NANOSECOND_DIGITS - p) for p in range(1, NANOSECOND_DIGITS + 1)
}


def format_interval(interval: IntervalDS) -> str:
    """Render *interval* using its own precision fields."""
    sign = "-" if interval.is_negative else "+"

    days = abs(interval.days)
    lfprec = interval.leading_field_precision
    day_text = f"{days:0{lfprec}d}" if lfprec in PADDED_DAY_PRECISIONS else str(days)

    clock = (
        f"{abs(interval.hours):02d}:{abs(interval.minutes):02d}:{abs(interval.seconds):02d}"
    )

    fsprec = interval.fractional_second_precision
    divisor = FRACTION_DIVISORS.get(fsprec)
    fraction = ""
    if divisor is not None:
        fraction = f".{abs(interval.nanoseconds) // divisor:0{fsprec}d}"

    return f"{sign}{day_text} {clock}{fraction}"


def _expect(scanner: Scanner, char: str, text: str) -> None:
    if scanner.peek() != char:
        _reject(text, f"expected {char!r}")
    scanner.advance()


def _digits(scanner: Scanner, text: str, field_name: str, limit: int | None = None) -> int:
    value = scanner.read_digits(limit)
    if value is None:
        _reject(text, f"missing {field_name} digits")
    if value > FIELD_MAX:
        _reject(text, f"{field_name} out of range")
    return value


def _reject(text: str, reason: str) -> NoReturn:
    logger.debug("Rejected %s literal %r: %s", TYPE_NAME, text, reason)
    raise MalformedLiteralError(TYPE_NAME)


def parse_interval(text: str) -> IntervalDS:
    """Parse *text* into an :class:`IntervalDS`.

    The leading field precision is the number of day digits read (no
    upper clamp).  The fractional second precision is the number of
    fraction digits read, clamped to 9; digits past the ninth are
    discarded (truncated).

    Raises:
        MalformedLiteralError: On a missing digit run, a missing
            delimiter, an empty fraction, trailing input, or an integer
            field too large for a 32-bit signed value.
    """
    scanner = Scanner(text)

    negative = False
    if scanner.peek() in ("+", "-"):
        negative = scanner.peek() == "-"
        scanner.advance()

    days = _digits(scanner, text, "day")
    lfprec = scanner.ndigits
    _expect(scanner, " ", text)
    hours = _digits(scanner, text, "hour")
    _expect(scanner, ":", text)
    minutes = _digits(scanner, text, "minute")
    _expect(scanner, ":", text)
    seconds = _digits(scanner, text, "second")

    nanoseconds = 0
    fsprec = 0
    if scanner.peek() == ".":
        scanner.advance()
        nanoseconds = _digits(scanner, text, "fraction", limit=NANOSECOND_DIGITS)
        ndigits = scanner.ndigits
        if ndigits < NANOSECOND_DIGITS:
            nanoseconds *= 10 ** (NANOSECOND_DIGITS - ndigits)
        fsprec = min(ndigits, NANOSECOND_DIGITS)

    if not scanner.at_end():
        _reject(text, f"unexpected trailing {scanner.peek()!r}")

    if negative:
        days, hours, minutes, seconds, nanoseconds = (
            -days,
            -hours,
            -minutes,
            -seconds,
            -nanoseconds,
        )

    return IntervalDS(
        days,
        hours,
        minutes,
        seconds,
        nanoseconds,
        leading_field_precision=lfprec,
        fractional_second_precision=fsprec,
    )
