"""Application engine for sigma.

Centralizes procedure application so the evaluator and any builtin that
calls back into user code share one set of semantics:
- Lambdas get a fresh child frame of their captured environment per call.
- Native procedures (Python callables) are invoked as fn(env, args).
- Anything else cannot be applied.
"""

from __future__ import annotations

import logging
from typing import Callable

from sigma import LispValue, EvaluatorFn
from sigma.types.environment import Environment
from sigma.types.errors import SigmaCallError
from sigma.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lambda value to already-evaluated arguments.

    The argument count must match the formals exactly (SigmaArityError
    otherwise). The body is evaluated in a new child of the environment the
    lambda captured when it was created, not the caller's environment.
    """
    call_env = fn.extend_env(args)
    logger.debug("applying %r to %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, call_env)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a native procedure.

    Native procedures receive the caller's environment so environment-aware
    builtins can be written the same way as pure ones.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise SigmaCallError("cannot call non-function")
