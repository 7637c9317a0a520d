import math

import pytest
from hypothesis import given, strategies as st

from slang import errors
from slang.builtin.env_builtin import register
from slang.operators import MAX_STRING_LENGTH
from slang.evaluation.evaluator import evaluate
from slang.types.environment import Environment
from slang.types.sequence import List
from slang.types.symbol import Symbol
from slang.types.values import format_number

numbers = st.floats(allow_nan=False, allow_infinity=False)


def _fresh_env() -> Environment:
    e = Environment()
    register(e)
    return e


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(- 10 3)", 7),
        ("(* 2 3)", 6),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5)", 3.5),
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(/ 1 4)", 0.25),
        ("(% 7 3)", 1),
        ("(% -7 3)", -1),
        ("(% 7 -3)", 1),
        ("(% 7.9 3.2)", 1),
        ("(+ 1 (* 2 (+ 3 4)))", 15),
    ]
)
def test_numeric_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(+ "ab" "cd")', "abcd"),
        ('(+ 1 "a")', "1a"),
        ('(+ 1.5 "a")', "1.5a"),
        ('(+ "a" 1)', "a1"),
        ('(* "ab" 3)', "ababab"),
        ('(* "ab" -2)', "abab"),
        ('(* "ab" 0)', ""),
        ('(* "ab" 2.9)', "abab"),
        ('(* "" 1e18)', ""),
        ('(+ 1000000 "")', "1e+06"),
        ('(+ 1234567 "")', "1.234567e+06"),
        ('(+ 123456 "")', "123456"),
        ('(+ -2.5 "")', "-2.5"),
    ]
)
def test_string_operators(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(> 1 0)", True),
        ("(> 0 1)", False),
        ("(> 1 1)", False),
        ("(< 0 1)", True),
        ("(< 1 1)", False),
        ("(>= 1 1)", True),
        ("(>= 0 1)", False),
        ("(<= 1 1)", True),
        ("(<= 2 1)", False),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source",
    [
        '(- "ab" 1)',
        '(/ "ab" 1)',
        '(* 3 "ab")',
        '(* "ab" "cd")',
        '(- 1 "a")',
        "(+ 1 true)",
        '(+ "a" true)',
        '(+ "a" nil)',
        '(+ "a" (list 1 2))',
        "(+ (list 1) 2)",
        "(+ 'a 1)",
        '(< 1 "a")',
        '(> "a" 1)',
        "(<= (vec) 1)",
        '(% 5 "a")',
        "(% 5 true)",
    ]
)
def test_operator_type_mismatch(run, source):
    with pytest.raises(errors.SlangTypeError):
        run(source)


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "%", "<", ">", "<=", ">="])
def test_binary_operator_arity(run, op):
    with pytest.raises(errors.SlangArityError):
        run(f"({op} 1)")
    with pytest.raises(errors.SlangArityError):
        run(f"({op} 1 2 3)")


def test_division_by_zero_follows_ieee(run):
    assert run("(/ 1 0)") == math.inf
    assert run("(/ -1 0)") == -math.inf
    assert math.isnan(run("(/ 0 0)"))


def test_modulo_by_zero(run):
    with pytest.raises(errors.SlangZeroDivisionError):
        run("(% 5 0.5)")


def test_subtraction_error_message_names_string(run):
    with pytest.raises(errors.SlangTypeError, match="not defined on string"):
        run('(- "ab" "a")')


@given(numbers, numbers)
def test_addition_commutes(a, b):
    env = _fresh_env()
    lhs = evaluate(List.of(Symbol("+"), a, b), env)
    rhs = evaluate(List.of(Symbol("+"), b, a), env)
    assert lhs == rhs


@given(numbers)
def test_subtracting_self_is_zero(a):
    env = _fresh_env()
    assert evaluate(List.of(Symbol("-"), a, a), env) == 0


@pytest.mark.parametrize(
    "n,expected",
    [
        (0.0, "0"),
        (-0.0, "-0"),
        (3.0, "3"),
        (1.5, "1.5"),
        (100.0, "100"),
        (999999.0, "999999"),
        (1e6, "1e+06"),
        (-1.25e7, "-1.25e+07"),
        (1e21, "1e+21"),
        (1e100, "1e+100"),
        (0.0001, "0.0001"),
        (0.00001, "1e-05"),
        (1.5e-7, "1.5e-07"),
        (0.1 + 0.2, "0.30000000000000004"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
        (math.nan, "NaN"),
    ]
)
def test_number_text(n, expected):
    assert format_number(n) == expected


def test_huge_repeat_is_a_slang_error(run):
    with pytest.raises(errors.SlangTypeError, match="Repeat would exceed"):
        run('(* "ab" 1e18)')
    with pytest.raises(errors.SlangTypeError):
        run(f'(* "ab" {MAX_STRING_LENGTH})')
    assert len(run(f'(* "a" {MAX_STRING_LENGTH // 1024})')) == MAX_STRING_LENGTH // 1024
