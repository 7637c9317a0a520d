"""Runtime environment for slang.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. The root environment holds the built-ins
and program arguments; every closure application chains a fresh frame onto
the closure's captured environment.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterable, Optional

from slang import LispValue, NativeFunction
from slang.errors import SlangRedefinitionError, SlangTypeError, SlangUndefinedSymbol
from slang.types.procedure import Builtin
from slang.types.sequence import Vector
from slang.types.symbol import Symbol

logger = logging.getLogger(__name__)

ARGV = Symbol("*ARGV*")
NARG = Symbol("*NARG*")


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame and return `value`.

        Shadowing a binding of an outer frame is allowed; rebinding a name
        already bound in this frame raises SlangRedefinitionError.
        """
        if not isinstance(name, Symbol):
            raise SlangTypeError(f"Cannot define {name} as a symbol")
        if name in self.vars:
            raise SlangRedefinitionError(f"Symbol '{name}' is already defined")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def mutate(self, name: Symbol, value: LispValue) -> LispValue:
        """Update an existing binding for `name`.

        The chain is searched exactly as `lookup` searches it and the binding
        is replaced in the innermost frame that holds it.
        Raises SlangUndefinedSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise SlangUndefinedSymbol(f"Symbol '{name}' is undefined")
        env.vars[name] = value
        return value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first."""
        env = self.find(name)
        if env is None:
            raise SlangUndefinedSymbol(f"Symbol '{name}' is undefined")
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"


def make_root_environment() -> Environment:
    """Return an empty root frame."""
    return Environment()


def install(env: Environment, name: str, fn: NativeFunction) -> Builtin:
    """Bind `name` to a Builtin wrapping `fn` in `env`."""
    return env.define(Symbol(name), Builtin(name, fn))


def define_program_arguments(env: Environment, args: Iterable[str]) -> None:
    """Expose process arguments as *ARGV* (vector of strings) and *NARG*."""
    argv = Vector([str(a) for a in args])
    logger.debug("Binding %d program argument(s)", len(argv))
    env.define(ARGV, argv)
    env.define(NARG, float(len(argv)))
