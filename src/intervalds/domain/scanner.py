"""Forward-only cursor over a literal, used by the textual decoders.

The grammars it serves are greedy and deterministic, so there is no
backtracking: a caller peeks one character, consumes it, or reads a
maximal run of ASCII digits.
"""

from __future__ import annotations

_ASCII_DIGITS = frozenset("0123456789")


class Scanner:
    """Cursor over *text* with one character of lookahead.

    ``ndigits`` holds the length of the run consumed by the most recent
    :meth:`read_digits` call.
    """

    __slots__ = ("_pos", "_text", "ndigits")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.ndigits = 0

    def peek(self) -> str | None:
        """Return the current character, or None at end of input."""
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def advance(self) -> None:
        """Move past the current character."""
        if self._pos < len(self._text):
            self._pos += 1

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def read_digits(self, limit: int | None = None) -> int | None:
        """Consume a maximal run of ASCII digits and return its value.

        Returns None (not 0) when the cursor is not on a digit; in that
        case ``ndigits`` is 0 and nothing is consumed.  With *limit*, the
        whole run is still consumed and counted but only its first *limit*
        digits make up the value.
        """
        value = 0
        end = self._pos
        while end < len(self._text) and self._text[end] in _ASCII_DIGITS:
            if limit is None or end - self._pos < limit:
                value = value * 10 + (ord(self._text[end]) - 48)
            end += 1
        self.ndigits = end - self._pos
        if self.ndigits == 0:
            return None
        self._pos = end
        return value
