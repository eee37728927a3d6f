from sigma import EvaluatorFn
from sigma import SExpression, LispValue
from sigma.types.errors import SigmaArityError, SigmaTypeError
from sigma.types.lambda_fn import Lambda
from sigma.types.environment import Environment
from sigma.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression. The current
    # environment is captured, so free names in the body resolve where the
    # lambda was created rather than where it is called.
    if len(tail) != 2:
        raise SigmaArityError("wrong number of arguments")

    params, body = tail
    if not isinstance(params, list):
        raise SigmaTypeError("arguments are not a list")
    if not all(isinstance(p, Symbol) for p in params):
        raise SigmaTypeError("argument has wrong type")

    return Lambda(list(params), body, env)
