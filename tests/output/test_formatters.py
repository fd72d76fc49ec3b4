"""Tests for the format_result dispatcher and OutputSettings."""

import json

from intervalds.output.formatters import OutputSettings, format_result
from intervalds.services.result import ServiceError, ServiceResult

_INTERVAL = {
    "text": "+01 02:03:04.500",
    "negative": False,
    "days": 1,
    "hours": 2,
    "minutes": 3,
    "seconds": 4,
    "nanoseconds": 500000000,
    "leading_field_precision": 2,
    "fractional_second_precision": 3,
}


def _ok(op: str = "parse_interval", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data) or dict(_INTERVAL))


def _err(op: str = "parse_interval", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="MALFORMED_LITERAL", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "parse_interval"
        assert data["data"]["text"] == "+01 02:03:04.500"

    def test_json_mode_error(self) -> None:
        output = format_result(_err(msg="Bad"), json_output=True)
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK")


class TestFormatResultQuiet:
    def test_quiet_prints_literal(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "+01 02:03:04.500"

    def test_quiet_compare(self) -> None:
        result = _ok("compare_intervals", equal=False, left="+1 00:00:00", right="-1 00:00:00")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "different"

    def test_quiet_error(self) -> None:
        output = format_result(_err(msg="nope"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: parse_interval — nope"


class TestFormatResultHuman:
    def test_interval(self) -> None:
        output = format_result(_ok())
        assert output.startswith("OK  parse_interval")
        assert "+01 02:03:04.500" in output
        assert "LF prec" not in output

    def test_verbose_adds_component_table(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(verbose=True))
        assert "Nanoseconds" in output
        assert "500000000" in output
        assert "LF prec" in output

    def test_error(self) -> None:
        output = format_result(_err(msg="Malformed IntervalDS literal"))
        assert "ERROR" in output
        assert "Malformed IntervalDS literal" in output

    def test_generic_op(self) -> None:
        result = ServiceResult(ok=True, op="interval_to_timedelta", data={"timedelta": "0:00:01"})
        output = format_result(result)
        assert "interval_to_timedelta" in output
        assert "timedelta: 0:00:01" in output
