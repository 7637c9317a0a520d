"""Procedure values for slang: native Builtins and user-defined Closures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from slang import LispValue, NativeFunction, SExpression
from slang.errors import SlangFormError, SlangTypeError
from slang.types.symbol import Symbol
from slang.types.sequence import Vector

if TYPE_CHECKING:
    from slang.types.environment import Environment


class Builtin:
    """A host-implemented procedure with a fixed name.

    `fn` is called as fn(env, args): the calling environment and the list of
    evaluated arguments. Arity is the builtin's own business.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFunction):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class Closure:
    """A first-class lambda with parameters, a non-empty body and its defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: list[SExpression], env: Environment):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        # Captured by reference; every call frame chains onto this one.
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return "<procedure>"


def make_closure(params: SExpression, body: list[SExpression], env: Environment) -> Closure:
    """Validate a parameter Vector and body, and build a Closure over `env`."""
    if not isinstance(params, Vector):
        raise SlangTypeError(f"Parameter list must be a vector, got {params}")
    if not body:
        raise SlangFormError("Lambda body expected")

    names: list[Symbol] = []
    for param in params:
        if not isinstance(param, Symbol):
            raise SlangTypeError(f"Parameter must be a symbol, got {param}")
        if param in names:
            raise SlangFormError(f"Duplicate parameter '{param}'")
        names.append(param)
    return Closure(names, list(body), env)
