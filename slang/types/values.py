"""Classification, equality and printing of slang values."""

from __future__ import annotations

import math
from decimal import Decimal

from slang import LispValue
from slang.types.nil import NilType
from slang.types.procedure import Builtin, Closure
from slang.types.sequence import List, Sequence, Vector
from slang.types.symbol import Symbol


def is_number(x: LispValue) -> bool:
    # bool is an int subclass in Python; booleans are never numbers here.
    return isinstance(x, (float, int)) and not isinstance(x, bool)


def is_procedure(x: LispValue) -> bool:
    return isinstance(x, (Builtin, Closure))


def is_nil_like(x: LispValue) -> bool:
    """Nil, the empty list and the empty vector all count as nil."""
    return isinstance(x, NilType) or (isinstance(x, Sequence) and len(x) == 0)


def type_of(x: LispValue) -> str:
    if isinstance(x, bool):
        return "boolean"
    if isinstance(x, (float, int)):
        return "number"
    if isinstance(x, str):
        return "string"
    if isinstance(x, Symbol):
        return "symbol"
    if isinstance(x, NilType):
        return "nil"
    if isinstance(x, List):
        return "list"
    if isinstance(x, Vector):
        return "vector"
    if isinstance(x, (Builtin, Closure)):
        return "procedure"
    return type(x).__name__


def format_number(n: float) -> str:
    """Shortest text that reads back as `n`, in %g layout.

    Exponent form is used when the decimal exponent is below -4 or at least
    6: `1e+06`, `1.5e-05`, `123456`, `0.001`.
    """
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "+Inf" if n > 0 else "-Inf"
    if n == 0:
        return "-0" if math.copysign(1.0, n) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(float(n))).as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent  # position of the decimal point
    digits = digits.rstrip("0")
    prefix = "-" if sign else ""

    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def to_repr(x: LispValue) -> str:
    """External representation, as printed by the REPL."""
    if isinstance(x, str):
        escaped = x.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return to_text(x)


def to_text(x: LispValue) -> str:
    """Like to_repr, but strings render as their raw text."""
    if isinstance(x, bool):
        return "true" if x else "false"
    if is_number(x):
        return format_number(x)
    if isinstance(x, str):
        return x
    return str(x)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for sequences, value equality for atoms."""
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, Sequence) and isinstance(b, Sequence):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    return a == b
