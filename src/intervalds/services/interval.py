"""IntervalService: parse, render, re-precision and compare intervals.

Each operation turns :class:`MalformedLiteralError` into a failed
ServiceResult with code ``MALFORMED_LITERAL``.
"""

from __future__ import annotations

import logging
from typing import Any

from intervalds.domain.duration import to_timedelta
from intervalds.domain.errors import MalformedLiteralError
from intervalds.domain.interval import IntervalDS
from intervalds.services.base import BaseService
from intervalds.services.result import ServiceResult

logger = logging.getLogger(__name__)

MALFORMED_LITERAL = "MALFORMED_LITERAL"
MIXED_SIGN_WARNING = "Mixed-sign components: rendering uses '-' if any component is negative"


def interval_payload(interval: IntervalDS) -> dict[str, Any]:
    """Serialize *interval* into the data dict shared by all operations."""
    return {
        "text": str(interval),
        "negative": interval.is_negative,
        "days": interval.days,
        "hours": interval.hours,
        "minutes": interval.minutes,
        "seconds": interval.seconds,
        "nanoseconds": interval.nanoseconds,
        "leading_field_precision": interval.leading_field_precision,
        "fractional_second_precision": interval.fractional_second_precision,
    }


class IntervalService(BaseService):
    """Interval operations used by the CLI."""

    def _malformed(self, op: str, exc: MalformedLiteralError, literal: str) -> ServiceResult:
        return self._fail(
            op,
            MALFORMED_LITERAL,
            f"Malformed {exc.type_name} literal: {literal!r}",
            type_name=exc.type_name,
            literal=literal,
        )

    def parse(self, literal: str) -> ServiceResult:
        """Parse *literal*; precisions come from its digit counts."""
        op = "parse_interval"
        try:
            interval = IntervalDS.parse(literal)
        except MalformedLiteralError as exc:
            return self._malformed(op, exc, literal)
        return ServiceResult(ok=True, op=op, data=interval_payload(interval))

    def format(
        self,
        days: int,
        hours: int,
        minutes: int,
        seconds: int,
        nanoseconds: int = 0,
        *,
        lfprec: int | None = None,
        fsprec: int | None = None,
    ) -> ServiceResult:
        """Render explicit components.

        Precisions left as None fall back to the ``[display]`` config.
        """
        display = self._settings.display
        interval = IntervalDS(days, hours, minutes, seconds, nanoseconds).with_precision(
            display.leading_field_precision if lfprec is None else lfprec,
            display.fractional_second_precision if fsprec is None else fsprec,
        )
        warnings: list[str] = []
        if not interval.is_sign_consistent:
            logger.info("Mixed-sign interval components: %s", interval.components())
            warnings.append(MIXED_SIGN_WARNING)
        return ServiceResult(
            ok=True,
            op="format_interval",
            data=interval_payload(interval),
            warnings=warnings,
        )

    def reformat(
        self,
        literal: str,
        *,
        lfprec: int | None = None,
        fsprec: int | None = None,
    ) -> ServiceResult:
        """Re-render *literal* with new precisions.

        An omitted precision keeps the one derived from the literal.
        """
        op = "reformat_interval"
        try:
            interval = IntervalDS.parse(literal)
        except MalformedLiteralError as exc:
            return self._malformed(op, exc, literal)
        interval = interval.with_precision(
            interval.leading_field_precision if lfprec is None else lfprec,
            interval.fractional_second_precision if fsprec is None else fsprec,
        )
        data = interval_payload(interval)
        data["source"] = literal
        return ServiceResult(ok=True, op=op, data=data)

    def compare(self, left: str, right: str) -> ServiceResult:
        """Compare two literals by value; precisions are ignored."""
        op = "compare_intervals"
        parsed: list[IntervalDS] = []
        for literal in (left, right):
            try:
                parsed.append(IntervalDS.parse(literal))
            except MalformedLiteralError as exc:
                return self._malformed(op, exc, literal)
        a, b = parsed
        return ServiceResult(
            ok=True,
            op=op,
            data={"equal": a == b, "left": str(a), "right": str(b)},
        )

    def to_timedelta(self, literal: str) -> ServiceResult:
        """Convert *literal* to a ``timedelta`` (microsecond resolution)."""
        op = "interval_to_timedelta"
        try:
            interval = IntervalDS.parse(literal)
        except MalformedLiteralError as exc:
            return self._malformed(op, exc, literal)
        delta = to_timedelta(interval)
        dropped = abs(interval.nanoseconds) % 1000
        warnings: list[str] = []
        if dropped:
            warnings.append(f"Truncated {dropped} ns below microsecond resolution")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": str(interval),
                "timedelta": str(delta),
                "total_seconds": delta.total_seconds(),
                "truncated_nanoseconds": dropped,
            },
            warnings=warnings,
        )
