import pytest

from mlsp.errors import MlspError, MlspParseError, MlspLexError, MlspUnboundSymbol
from mlsp.interpreter import Interpreter, run
from mlsp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ (- 10 5) (* 2 2))", 9),
        ("(+ (- 10 5) (* -2 10))", -15),
        ("(if (> 10 (* 3 3)) 1 2)", 1),
        ("(if (< 10 (* 3 3)) 1 2)", 2),
    ]
)
def test_round_trip(source, expected):
    assert run(source) == [expected]


def test_countdown_loop(capsys):
    program = """
        (do
            (set i 5)
            (while (> i 0) (do (print i) (set i (- i 1)))))
    """
    [result] = run(program)
    assert isinstance(result, list)
    assert result == [5, [1, 0]]
    assert capsys.readouterr().out == "Int(5)\nInt(4)\nInt(3)\nInt(2)\nInt(1)\n"


def test_empty_program():
    assert run("") == []
    assert run("  \n ") == []


def test_one_result_per_top_level_form():
    assert run("1 x (+ 1 1)") == [1, Symbol("x"), 2]


def test_bindings_are_shared_across_top_level_forms():
    assert run("(set a 2) (set b (* a a)) (+ a b)") == [2, 4, 6]


def test_each_run_starts_fresh():
    run("(set leaked 1)")
    assert run("leaked") == [Symbol("leaked")]


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+ 1 2", MlspParseError),
        ("(+ 1 2))", MlspParseError),
        ("(+ 1 2) @", MlspLexError),
    ]
)
def test_malformed_input_evaluates_nothing(source, error, capsys):
    with pytest.raises(error):
        run("(print 1) " + source)
    assert capsys.readouterr().out == ""


def test_runtime_error_discards_partial_results():
    with pytest.raises(MlspUnboundSymbol):
        run("(+ 1 2) (nope)")


def test_interpreter_keeps_environment_between_calls(interp):
    assert interp.eval("(set counter 1)") == [1]
    assert interp.eval("(set counter (+ counter 1))") == [2]
    assert interp.env.get(Symbol("counter")) == 2


def test_interpreter_recovers_after_an_error(interp):
    interp.eval("(set x 10)")
    with pytest.raises(MlspError):
        interp.eval("(set y 1) (missing)")
    # bindings made before the error survive
    assert interp.eval("(+ x y)") == [11]
