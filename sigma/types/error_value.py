"""The ``Error`` datum.

An ``Error`` is an ordinary value: it self-evaluates and can sit inside lists.
Failures during reading or evaluation are raised as ``SigmaError`` exceptions
instead; ``SigmaError.as_value()`` converts one into this datum for display.
"""

from __future__ import annotations


class Error:
    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash((Error, self.message))

    def __repr__(self) -> str:
        return f"Error({self.message!r})"

    def __str__(self) -> str:
        return f"Error({self.message})"
