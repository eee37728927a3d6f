from __future__ import annotations

import logging
import sys
from typing import Callable, Literal

from sigma import SExpression, LispValue
from sigma import config
from sigma.reader.parser import read
from sigma.printer import to_lisp_string
from sigma.types.environment import Environment
from sigma.types.errors import SigmaError, SigmaRecursionError
from sigma.types.nil import Nil
from sigma.builtin.env_builtin import standard_environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating sigma code.
    Keeps one root Environment across calls so definitions persist.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
    ):
        if eval_fn is None:
            from sigma.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = standard_environment()

        limit = config.get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self._load_configured_prelude()
        elif prelude:
            self.eval_prelude(prelude)

    def _load_configured_prelude(self) -> None:
        path = config.get_prelude_path()
        if path is None:
            return
        try:
            code = path.read_text(encoding='utf-8')
        except FileNotFoundError:
            # Be permissive: a missing prelude leaves the session usable
            logger.warning("prelude file %s not found; continuing without it", path)
            return
        logger.debug("loading prelude from %s", path)
        self.eval_prelude(code)

    def _eval_one(self, expr: SExpression) -> LispValue:
        try:
            return self.eval_fn(expr, self.env)
        except RecursionError:
            raise SigmaRecursionError("maximum recursion depth exceeded") from None

    def eval_prelude(self, code: str) -> None:
        for expr in read(code):
            self._eval_one(expr)

    def eval_forms(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code`; one value per form."""
        return [self._eval_one(expr) for expr in read(code)]

    def eval(self, code: str) -> LispValue:
        results = self.eval_forms(code)
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def render(self, code: str) -> list[str]:
        """Evaluate `code` form by form and return display strings.

        A failure (while reading or evaluating) is rendered as its Error
        datum and ends the run; forms after it are not evaluated.
        """
        try:
            forms = read(code)
        except SigmaError as e:
            return [to_lisp_string(e.as_value())]

        rendered = []
        for expr in forms:
            try:
                value = self._eval_one(expr)
            except SigmaError as e:
                logger.debug("evaluation failed: %s", e.message)
                rendered.append(to_lisp_string(e.as_value()))
                break
            rendered.append(to_lisp_string(value))
        return rendered
