"""The INTERVAL DAY TO SECOND value type.

An :class:`IntervalDS` is a signed duration stored as five separate
components.  Two precision fields travel with the value and control only
its text form; they never take part in equality or hashing.

Valid component ranges:

=============  ==========================
component      range
=============  ==========================
days           -999999999 to 999999999
hours          -23 to 23
minutes        -59 to 59
seconds        -59 to 59
nanoseconds    -999999999 to 999999999
=============  ==========================

All components must be zero or positive for a positive interval, and all
zero or negative for a negative one.  Neither rule is enforced here:
out-of-range values only show up as a malformed text rendering.

No arithmetic is provided.  Convert through
:mod:`intervalds.domain.duration` when a ``timedelta`` is needed.

Example::

    >>> intvl = IntervalDS(1, 2, 3, 4, 500000000)
    >>> str(intvl)
    '+000000001 02:03:04.500000000'
    >>> str(intvl.with_precision(2, 3))
    '+01 02:03:04.500'
    >>> intvl == intvl.with_precision(2, 3)
    True
    >>> parsed = IntervalDS.parse("+1 02:03:04.50")
    >>> parsed.leading_field_precision, parsed.fractional_second_precision
    (1, 2)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

DEFAULT_PRECISION = 9


@dataclass(frozen=True, slots=True)
class IntervalDS:
    """Oracle ``INTERVAL DAY TO SECOND`` value.

    Attributes:
        leading_field_precision: Width the day field is zero-padded to
            when rendered (0 renders the natural width).
        fractional_second_precision: Number of fractional-second digits
            rendered (0 omits the fraction).
    """

    days: int
    hours: int
    minutes: int
    seconds: int
    nanoseconds: int
    leading_field_precision: int = field(default=DEFAULT_PRECISION, compare=False)
    fractional_second_precision: int = field(default=DEFAULT_PRECISION, compare=False)

    def with_precision(self, lfprec: int, fsprec: int) -> IntervalDS:
        """Return a copy carrying new leading/fractional precisions.

        Values outside 0..9 are accepted; the encoder then falls back to
        natural-width days and no fraction.
        """
        return replace(
            self,
            leading_field_precision=lfprec,
            fractional_second_precision=fsprec,
        )

    @property
    def is_negative(self) -> bool:
        """True if any component is strictly negative."""
        return (
            self.days < 0
            or self.hours < 0
            or self.minutes < 0
            or self.seconds < 0
            or self.nanoseconds < 0
        )

    @property
    def is_sign_consistent(self) -> bool:
        """True unless positive and negative components are mixed."""
        parts = (self.days, self.hours, self.minutes, self.seconds, self.nanoseconds)
        return all(p >= 0 for p in parts) or all(p <= 0 for p in parts)

    def components(self) -> tuple[int, int, int, int, int]:
        """Return ``(days, hours, minutes, seconds, nanoseconds)``."""
        return (self.days, self.hours, self.minutes, self.seconds, self.nanoseconds)

    @classmethod
    def parse(cls, text: str) -> IntervalDS:
        """Parse a literal such as ``"-1 02:03:04.5"``.

        Raises:
            MalformedLiteralError: If *text* does not match the grammar.
        """
        from intervalds.domain.codec import parse_interval

        return parse_interval(text)

    def __str__(self) -> str:
        from intervalds.domain.codec import format_interval

        return format_interval(self)
