"""Canonical display form of sigma values.

    Nil        -> <nil>
    integer    -> decimal digits
    Symbol     -> its name
    list       -> (item item ...)
    procedure  -> <callable>
    Error(m)   -> Error(m)
"""

from __future__ import annotations

from io import StringIO

from sigma import LispValue
from sigma.types.error_value import Error
from sigma.types.integer import is_integer
from sigma.types.nil import NilType
from sigma.types.symbol import Symbol


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, NilType):
        buffer.write("<nil>")
    elif is_integer(value):
        buffer.write(str(value))
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(value, Error):
        buffer.write(str(value))
    elif _is_procedure(value):
        buffer.write("<callable>")
    else:
        # Host values that leaked in through a native procedure
        buffer.write(repr(value))


def _is_procedure(value: LispValue) -> bool:
    from sigma.types.lambda_fn import Lambda
    return isinstance(value, Lambda) or callable(value)


def to_lisp_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
