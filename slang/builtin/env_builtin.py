"""Built-in procedures for the slang runtime environment.

This module defines predicates, the overloaded operators, equality, sequence
functions, application helpers and output, plus `register` which installs
them all into an environment. Every built-in takes (env, args): the calling
environment and the list of evaluated arguments.
"""
from __future__ import annotations

from slang import LispValue
from slang import operators
from slang.errors import SlangArityError, SlangBoundsError, SlangTypeError
from slang.evaluation.evaluator import call_procedure
from slang.types.environment import Environment, install
from slang.types.nil import Nil
from slang.types.sequence import List, Sequence, Vector
from slang.types.symbol import Symbol
from slang.types.values import (
    is_equal,
    is_nil_like,
    is_number,
    is_procedure,
    to_repr,
    to_text,
    type_of,
)


def _expect(args: list[LispValue], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise SlangArityError(f"Incorrect number of arguments - expected {n} {plural}")


def _sequence(x: LispValue) -> Sequence:
    if not isinstance(x, Sequence):
        raise SlangTypeError(f"{to_repr(x)} is not a sequence")
    return x


# -------------------------------
# Predicates
# -------------------------------
def _predicate(test):
    def predicate(env: Environment, args: list[LispValue]) -> bool:
        _expect(args, 1)
        return test(args[0])

    return predicate


is_list = _predicate(lambda x: isinstance(x, List))
is_nil = _predicate(is_nil_like)
is_number_p = _predicate(is_number)
is_procedure_p = _predicate(is_procedure)
is_seq = _predicate(lambda x: isinstance(x, Sequence))
is_string = _predicate(lambda x: isinstance(x, str))
is_symbol = _predicate(lambda x: isinstance(x, Symbol))
is_vec = _predicate(lambda x: isinstance(x, Vector))
is_boolean = _predicate(lambda x: isinstance(x, bool))


def type_of_builtin(env: Environment, args: list[LispValue]) -> Symbol:
    """(type-of x) -> the type name of x as a symbol."""
    _expect(args, 1)
    return Symbol(type_of(args[0]))


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    """Negate a boolean; anything else is a type error."""
    _expect(args, 1)
    pred = args[0]
    if not isinstance(pred, bool):
        raise SlangTypeError(f"Attempt to negate non-bool - {to_repr(pred)}")
    return not pred


# -------------------------------
# Operators
# -------------------------------
def _binary(name: str, capable, op):
    def binary(env: Environment, args: list[LispValue]) -> LispValue:
        _expect(args, 2)
        for arg in args:
            if not capable(arg):
                raise SlangTypeError(f"{name} operator is not defined on {type_of(arg)}")
        return op(*args)

    return binary


add = _binary("Addition", operators.is_algebraic, operators.add)
sub = _binary("Subtraction", operators.is_algebraic, operators.subtract)
mul = _binary("Multiplication", operators.is_algebraic, operators.multiply)
div = _binary("Division", operators.is_algebraic, operators.divide)
gt = _binary("Greater than", operators.is_comparable, operators.greater_than)
lt = _binary("Less than", operators.is_comparable, operators.less_than)
gte = _binary("Greater than or equal to", operators.is_comparable, operators.greater_or_equal)
lte = _binary("Less than or equal to", operators.is_comparable, operators.less_or_equal)
mod = _binary("Modulo", is_number, operators.modulo)


def equals(env: Environment, args: list[LispValue]) -> bool:
    """Return true if all arguments are structurally equal."""
    if len(args) < 2:
        raise SlangArityError("Incorrect number of arguments - expected at least 2 arguments")
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


# -------------------------------
# Sequence operations
# -------------------------------
def append(env: Environment, args: list[LispValue]) -> Sequence:
    """(append seq item) -> a new sequence; seq itself is unchanged."""
    _expect(args, 2)
    return _sequence(args[0]).append(args[1])


def first(env: Environment, args: list[LispValue]) -> LispValue:
    _expect(args, 1)
    seq = _sequence(args[0])
    if len(seq) == 0:
        raise SlangBoundsError("first of an empty sequence")
    return seq.first()


def rest(env: Environment, args: list[LispValue]) -> Sequence:
    _expect(args, 1)
    return _sequence(args[0]).rest()


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    """(nth seq n) -> zero-based item n; out of range is a bounds error."""
    _expect(args, 2)
    seq = _sequence(args[0])
    n = args[1]
    if not is_number(n):
        raise SlangTypeError(f"{to_repr(n)} is not a valid number")
    if not (0 <= n < len(seq)):
        raise SlangBoundsError("Number out of bounds")
    return seq.nth(n)


def length(env: Environment, args: list[LispValue]) -> float:
    _expect(args, 1)
    return _sequence(args[0]).length()


def list_builtin(env: Environment, args: list[LispValue]) -> List:
    return List.from_iterable(args)


def vec_builtin(env: Environment, args: list[LispValue]) -> Vector:
    return Vector.from_iterable(args)


# -------------------------------
# Bindings and application
# -------------------------------
def set_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(set 'name value) rebinds an existing variable visible from the caller."""
    _expect(args, 2)
    name, value = args
    if not isinstance(name, Symbol):
        raise SlangTypeError(f"set expects a symbol, got {to_repr(name)}")
    return env.mutate(name, value)


def apply_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f seq) calls f with the items of seq as its arguments."""
    _expect(args, 2)
    return call_procedure(args[0], list(_sequence(args[1])), env)


# -------------------------------
# Strings and output
# -------------------------------
def str_builtin(env: Environment, args: list[LispValue]) -> str:
    _expect(args, 1)
    return to_text(args[0])


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated text of args followed by newline; returns nil."""
    print(" ".join(to_text(a) for a in args))
    return Nil


BUILTINS = {
    "list?": is_list,
    "nil?": is_nil,
    "number?": is_number_p,
    "procedure?": is_procedure_p,
    "seq?": is_seq,
    "string?": is_string,
    "symbol?": is_symbol,
    "vec?": is_vec,
    "boolean?": is_boolean,
    "type-of": type_of_builtin,
    "not": logical_not,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    "=": equals,
    "append": append,
    "first": first,
    "rest": rest,
    "nth": nth,
    "len": length,
    "list": list_builtin,
    "vec": vec_builtin,
    "set": set_builtin,
    "apply": apply_builtin,
    "str": str_builtin,
    "print": print_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    for name, fn in BUILTINS.items():
        install(env, name, fn)
