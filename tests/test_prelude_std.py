import pytest

from slang import errors
from slang.interpreter import Interpreter
from slang.types.values import to_repr


@pytest.fixture(scope="module")
def interp():
    # Default prelude shipped with the package
    return Interpreter()


def eval_slang(interp: Interpreter, code: str) -> str:
    return to_repr(interp.eval(code))


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(inc 1)", "2"),
        ("(dec 1)", "0"),
        ("(zero? 0)", "true"),
        ("(zero? 1)", "false"),
        ("(empty? [])", "true"),
        ("(empty? (list 1))", "false"),
        ("(empty-like [1 2])", "[]"),
        ("(empty-like (list 1 2))", "()"),
    ]
)
def test_small_helpers(interp, code, expected):
    assert eval_slang(interp, code) == expected


def test_reduce(interp):
    assert eval_slang(interp, "(reduce + 0 (list 1 2 3 4))") == "10"
    assert eval_slang(interp, "(reduce + 0 [])") == "0"
    assert eval_slang(interp, '(reduce + "" ["a" "b" "c"])') == '"abc"'


def test_map_and_filter_keep_sequence_kind(interp):
    assert eval_slang(interp, "(map inc (list 1 2 3))") == "(2 3 4)"
    assert eval_slang(interp, "(map inc [1 2 3])") == "[2 3 4]"
    assert eval_slang(interp, "(filter (lambda [x] (> x 1)) [1 2 3])") == "[2 3]"
    assert eval_slang(interp, "(filter zero? (list 1 2))") == "()"


def test_map_leaves_input_untouched(interp):
    interp.eval("(define source-items (list 1 2 3))")
    assert eval_slang(interp, "(map (lambda [x] (* x x)) source-items)") == "(1 4 9)"
    assert eval_slang(interp, "source-items") == "(1 2 3)"


def test_reduce_over_long_vector(interp):
    interp.eval(
        """
        (define count-up [n acc]
          (if (= n 0) acc (count-up (- n 1) (append acc n))))
        """
    )
    assert eval_slang(interp, "(len (count-up 5000 []))") == "5000"
    assert interp.eval("(reduce + 0 (count-up 5000 []))") == 12502500


def test_prelude_names_cannot_be_redefined(interp):
    with pytest.raises(errors.SlangRedefinitionError):
        interp.eval("(define inc [n] n)")


def test_no_prelude():
    interp = Interpreter(prelude=None)
    with pytest.raises(errors.SlangUndefinedSymbol):
        interp.eval("(inc 1)")


def test_prelude_from_source_string():
    interp = Interpreter(prelude="(define two 2)")
    assert interp.eval("(+ two two)") == 4


def test_prelude_path_override(monkeypatch, tmp_path):
    (tmp_path / "core.slang").write_text("(define answer 42)", encoding="utf-8")
    monkeypatch.setenv("SLANG_PRELUDE_PATH", str(tmp_path))
    interp = Interpreter()
    assert interp.eval("answer") == 42
    with pytest.raises(errors.SlangUndefinedSymbol):
        interp.eval("inc")


def test_missing_prelude_file_is_skipped(monkeypatch, tmp_path):
    monkeypatch.setenv("SLANG_PRELUDE_PATH", str(tmp_path / "absent.slang"))
    interp = Interpreter()
    with pytest.raises(errors.SlangUndefinedSymbol):
        interp.eval("inc")


def test_eval_returns_last_value_or_nil():
    interp = Interpreter(prelude=None)
    assert interp.eval("1 2 3") == 3
    assert to_repr(interp.eval("")) == "nil"
    assert to_repr(interp.eval("; nothing here")) == "nil"


def test_program_arguments_visible_to_code():
    interp = Interpreter(prelude=None, argv=["one", "two"])
    assert interp.eval("*NARG*") == 2
    assert interp.eval("(nth *ARGV* 1)") == "two"


def test_eval_reads_everything_before_evaluating():
    interp = Interpreter(prelude=None)
    with pytest.raises(errors.SlangSyntaxError):
        interp.eval("(define a 1) (")
    with pytest.raises(errors.SlangUndefinedSymbol):
        interp.eval("a")
