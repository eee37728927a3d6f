"""Core evaluator for the sigma interpreter.

A plain recursive tree-walker: self-evaluating atoms come back unchanged,
symbols resolve against the environment chain, and lists are either special
forms (dispatched through SPECIAL_FORMS) or procedure applications.
"""

from __future__ import annotations

from sigma import SExpression, LispValue
from sigma.types.environment import Environment
from sigma.types.errors import SigmaRecursionError
from sigma.types.symbol import Symbol
from sigma.evaluation.apply import apply
from sigma.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression in `env`.

    Raises a SigmaError subclass on failure; the first failing
    subexpression aborts the whole evaluation. Nesting deeper than the
    interpreter stack allows raises SigmaRecursionError.
    """
    try:
        return _evaluate(expr, env)
    except RecursionError:
        raise SigmaRecursionError("maximum recursion depth exceeded") from None


def _evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case []:
            return []

        case [Symbol() as head, *tail_args] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, _evaluate)

        case [head, *tail_args]:
            proc = _evaluate(head, env)
            # Strict, left to right; a failure stops the remaining arguments
            args = [_evaluate(arg, env) for arg in tail_args]
            return apply(proc, args, env, _evaluate)

        case Symbol():
            return env.lookup(expr)

    # Nil, integers, procedures and Error data evaluate to themselves
    return expr
