# Core type aliases for sigma's data model.
# Values are plain Python objects where one fits (int for integers, list for
# lists, Python callables for native procedures) and small classes otherwise
# (Symbol, Nil, Lambda, Error). Code and data share the same representation.
#
# Naming guidance:
# - SExpression: forms as produced by the reader (code-as-data).
# - LispValue:  evaluated runtime values.
# Both resolve to `Any` and are interchangeable.

import logging
from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., LispValue]

# Library is silent unless the host configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
