"""Tests for the digit scanner."""

from intervalds.domain.scanner import Scanner


class TestPeekAndAdvance:
    def test_peek_does_not_consume(self) -> None:
        s = Scanner("ab")
        assert s.peek() == "a"
        assert s.peek() == "a"

    def test_advance_moves_one_char(self) -> None:
        s = Scanner("ab")
        s.advance()
        assert s.peek() == "b"

    def test_peek_at_end_is_none(self) -> None:
        s = Scanner("a")
        s.advance()
        assert s.peek() is None
        assert s.at_end()

    def test_empty_input(self) -> None:
        s = Scanner("")
        assert s.peek() is None
        assert s.at_end()

    def test_advance_past_end_is_harmless(self) -> None:
        s = Scanner("")
        s.advance()
        assert s.peek() is None


class TestReadDigits:
    def test_reads_maximal_run(self) -> None:
        s = Scanner("0042:")
        assert s.read_digits() == 42
        assert s.ndigits == 4
        assert s.peek() == ":"

    def test_no_digits_returns_none(self) -> None:
        s = Scanner(":12")
        assert s.read_digits() is None
        assert s.ndigits == 0
        assert s.peek() == ":"

    def test_zero_is_distinct_from_no_digits(self) -> None:
        s = Scanner("0")
        assert s.read_digits() == 0
        assert s.ndigits == 1

    def test_count_resets_per_call(self) -> None:
        s = Scanner("123 4")
        s.read_digits()
        s.advance()
        s.read_digits()
        assert s.ndigits == 1

    def test_non_ascii_digits_are_not_digits(self) -> None:
        s = Scanner("١٢")  # Arabic-Indic one, two
        assert s.read_digits() is None

    def test_long_run(self) -> None:
        s = Scanner("12345678901")
        assert s.read_digits() == 12345678901
        assert s.ndigits == 11
        assert s.at_end()

    def test_run_past_int_conversion_limit(self) -> None:
        s = Scanner("1" * 5000)
        value = s.read_digits()
        assert value is not None
        assert value % 1000 == 111
        assert s.ndigits == 5000
        assert s.at_end()

    def test_limit_keeps_leading_digits_and_consumes_run(self) -> None:
        s = Scanner("1234567899:")
        assert s.read_digits(limit=9) == 123456789
        assert s.ndigits == 10
        assert s.peek() == ":"

    def test_limit_longer_than_run(self) -> None:
        s = Scanner("12")
        assert s.read_digits(limit=9) == 12
        assert s.ndigits == 2
