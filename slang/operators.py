"""Operator semantics for slang values.

Two capability groups are overloaded on the value variants:

- Algebraic (+ - * /): numbers with numbers; number + string concatenates the
  number's text; string + anything concatenates the other value's text;
  string * number repeats the string |n| times. Every other pairing fails.
- Comparable (> < >= <=): numbers only.

`modulo` is not overloadable and only takes numbers.

Each operator is a free function matching explicitly on the operand pair.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from slang import LispValue
from slang.errors import SlangTypeError, SlangZeroDivisionError
from slang.types.values import format_number, is_number, to_text, type_of


# Longest string a repeat may produce.
MAX_STRING_LENGTH = 1 << 28


def is_algebraic(x: LispValue) -> bool:
    return is_number(x) or isinstance(x, str)


def is_comparable(x: LispValue) -> bool:
    return is_number(x)


def _number(x: LispValue) -> float | None:
    return float(x) if is_number(x) else None


def add(x: LispValue, y: LispValue) -> LispValue:
    match x, y:
        case str(), _:
            return x + to_text(y)
        case _ if is_number(x) and is_number(y):
            return float(x) + float(y)
        case _, str() if is_number(x):
            return format_number(x) + y
        case _ if is_number(x):
            raise SlangTypeError(f"Cannot add number and {type_of(y)}")
    raise SlangTypeError(f"Addition operator is not defined on {type_of(x)}")


def subtract(x: LispValue, y: LispValue) -> LispValue:
    match x, y:
        case str(), _:
            raise SlangTypeError("Subtraction operator is not defined on string")
        case _ if is_number(x) and is_number(y):
            return float(x) - float(y)
        case _ if is_number(x):
            raise SlangTypeError(f"Cannot subtract number and {type_of(y)}")
    raise SlangTypeError(f"Subtraction operator is not defined on {type_of(x)}")


def multiply(x: LispValue, y: LispValue) -> LispValue:
    match x, y:
        case str(), _ if is_number(y):
            count = abs(float(y))
            if not math.isfinite(count):
                raise SlangTypeError("Repeat count must be finite")
            if len(x) * int(count) > MAX_STRING_LENGTH:
                raise SlangTypeError(f"Repeat would exceed {MAX_STRING_LENGTH} characters")
            return x * int(count)
        case str(), _:
            raise SlangTypeError("Repeat expects a number")
        case _ if is_number(x) and is_number(y):
            return float(x) * float(y)
        case _ if is_number(x):
            raise SlangTypeError(f"Cannot multiply number and {type_of(y)}")
    raise SlangTypeError(f"Multiplication operator is not defined on {type_of(x)}")


def divide(x: LispValue, y: LispValue) -> LispValue:
    match x, y:
        case str(), _:
            raise SlangTypeError("Division operator is not defined on string")
        case _ if is_number(x) and is_number(y):
            return _ieee_divide(float(x), float(y))
        case _ if is_number(x):
            raise SlangTypeError(f"Cannot divide number and {type_of(y)}")
    raise SlangTypeError(f"Division operator is not defined on {type_of(x)}")


def _ieee_divide(x: float, y: float) -> float:
    if y != 0.0:
        return x / y
    if x == 0.0 or math.isnan(x):
        return math.nan
    # Sign of a zero divisor matters: 1/-0 is -Inf.
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def _compare(name: str, op: Callable[[float, float], bool]) -> Callable[[LispValue, LispValue], bool]:
    def compare(x: LispValue, y: LispValue) -> bool:
        lhs, rhs = _number(x), _number(y)
        if lhs is None:
            raise SlangTypeError(f"{name} operator is not defined on {type_of(x)}")
        if rhs is None:
            raise SlangTypeError(f"Cannot compare number and {type_of(y)}")
        return op(lhs, rhs)

    compare.__name__ = name.lower().replace(" ", "_")
    return compare


greater_than = _compare("Greater than", operator.gt)
less_than = _compare("Less than", operator.lt)
greater_or_equal = _compare("Greater than or equal to", operator.ge)
less_or_equal = _compare("Less than or equal to", operator.le)


def modulo(x: LispValue, y: LispValue) -> float:
    """Remainder of truncated integer division; the sign follows the dividend."""
    lhs, rhs = _number(x), _number(y)
    if lhs is None:
        raise SlangTypeError(f"Modulo operator is not defined on {type_of(x)}")
    if rhs is None:
        raise SlangTypeError(f"Modulo operator is not defined on {type_of(y)}")
    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        raise SlangTypeError("Modulo operator is not defined on non-finite numbers")
    dividend, divisor = int(lhs), int(rhs)
    if divisor == 0:
        raise SlangZeroDivisionError("Integer divide by zero")
    remainder = abs(dividend) % abs(divisor)
    return float(remainder if dividend >= 0 else -remainder)
