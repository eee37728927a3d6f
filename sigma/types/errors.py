from __future__ import annotations

from sigma.types.error_value import Error


class SigmaError(Exception):
    """ Base class for all sigma errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def as_value(self) -> Error:
        """Return the failure as an ``Error`` datum, e.g. for printing."""
        return Error(self.message)


class SigmaInvalidSymbol(SigmaError):
    """ Raised when a non-symbol is used as a binding name"""


class SigmaSyntaxError(SigmaError):
    """ Raised when the reader meets malformed input"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class SigmaArityError(SigmaError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class SigmaTypeError(SigmaError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class SigmaCallError(SigmaError):
    """ Raised when a value that is not a procedure is applied"""


class SigmaRecursionError(SigmaError):
    """ Raised when evaluation nests deeper than the interpreter stack allows"""


class SigmaValueError(SigmaError):
    """ Raised when an argument has the right type but an unusable value"""
