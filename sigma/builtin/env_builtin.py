"""Native procedures.

Every native takes (env, args) where `args` is the list of already-evaluated
arguments, and returns a value or raises a SigmaError. Integer results are
kept in the signed 64-bit range.
"""

from __future__ import annotations

from typing import Any

from sigma.types.environment import Environment
from sigma.types.errors import SigmaArityError, SigmaTypeError, SigmaValueError
from sigma.types.integer import is_integer, wrap_i64
from sigma.types.symbol import Symbol


def _check_integers(args: list[Any]) -> None:
    for arg in args:
        if not is_integer(arg):
            raise SigmaTypeError("argument has wrong type")

# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Any]) -> int:
    _check_integers(args)
    total = 0
    for x in args:
        total = wrap_i64(total + x)
    return total

def sub(env: Environment, args: list[Any]) -> int:
    if len(args) < 2:
        raise SigmaArityError("not enough arguments")
    _check_integers(args)
    result = args[0]
    for x in args[1:]:
        result = wrap_i64(result - x)
    return result

def mul(env: Environment, args: list[Any]) -> int:
    _check_integers(args)
    result = 1
    for x in args:
        result = wrap_i64(result * x)
    return result

# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[Any]) -> list[Any]:
    return list(args)

def cons(env: Environment, args: list[Any]) -> list[Any]:
    # Not a pair: (cons a b) is the two-element list (a b)
    if len(args) != 2:
        raise SigmaArityError("wrong number of arguments")
    return list(args)

def car(env: Environment, args: list[Any]) -> Any:
    if len(args) != 1:
        raise SigmaArityError("wrong number of arguments")
    items = args[0]
    if not isinstance(items, list):
        raise SigmaTypeError("argument has wrong type")
    if not items:
        raise SigmaValueError("empty list")
    return items[0]

# -------------------------------
# Registration
# -------------------------------
NATIVES = {
    Symbol('+'): add,
    Symbol('-'): sub,
    Symbol('*'): mul,
    Symbol('list'): list_builtin,
    Symbol('cons'): cons,
    Symbol('car'): car,
}


def register(env: Environment) -> None:
    env.update(NATIVES)


def standard_environment() -> Environment:
    """Create a root environment with the native procedures bound."""
    env = Environment()
    register(env)
    return env
