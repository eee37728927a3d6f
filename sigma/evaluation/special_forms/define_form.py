import logging

from sigma import EvaluatorFn
from sigma import SExpression, LispValue
from sigma.types.errors import SigmaArityError, SigmaTypeError
from sigma.types.nil import Nil
from sigma.types.environment import Environment
from sigma.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; evaluated for effect, returns nil.
    """
    if len(tail) != 2:
        raise SigmaArityError("wrong number of arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SigmaTypeError("argument has wrong type")

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("defined %s", name)
    return Nil
