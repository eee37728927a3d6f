"""User-defined procedures (closures)."""

from __future__ import annotations

import logging
from io import StringIO

from sigma import SExpression, LispValue
from sigma.types.environment import Environment
from sigma.types.errors import SigmaArityError
from sigma.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Lambda:
    """A first-class lambda with formal parameters, a single body and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            from sigma.printer import to_lisp_string
            buffer.write(to_lisp_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda ({' '.join(str(f) for f in self.formals)})>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind argument values to the formal parameters, positionally, in a new
        child of the captured environment and return that child.

        A new frame is created for every application, so calls of the same
        lambda never see each other's bindings.
        """
        if len(args) != len(self.formals):
            raise SigmaArityError("wrong number of arguments")
        call_env = self.env.new_child()
        for param, arg in zip(self.formals, args):
            call_env.define(param, arg)
        logger.debug("bound %d argument(s) for %r", len(args), self)
        return call_env
