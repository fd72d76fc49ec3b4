"""Parse errors raised by the textual decoders."""

from __future__ import annotations


class MalformedLiteralError(ValueError):
    """A literal did not match the grammar of its target type.

    Attributes:
        type_name: Name of the type the literal was parsed into
            (e.g. ``"IntervalDS"``).
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"{type_name} parse error")
        self.type_name = type_name
