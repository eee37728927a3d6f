"""Runtime environment for sigma.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames are shared by reference: every
closure created in a frame, and every child frame built on top of it, keeps
it alive. Children point to their parent; a parent never points to its
children, so plain reference counting reclaims frames without cycles.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from sigma import LispValue
from sigma.types.errors import SigmaInvalidSymbol
from sigma.types.nil import Nil
from sigma.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def new_child(self) -> Environment:
        """Return a fresh, empty frame whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Overwrites an existing local binding. Outer frames are never touched,
        so a local definition shadows an outer one of the same name.

        Raises SigmaInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SigmaInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, or Nil if it is unbound anywhere."""
        env = self.find(name)
        if env is None:
            logger.debug("unbound symbol %s resolved to nil", name)
            return Nil
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
