import io

import pytest

from mlsp.interpreter import run
from mlsp.runtime_context import set_output
from mlsp.types.symbol import Symbol
from mlsp.types.value import TRUE, FALSE, OPEN, CLOSE, debug_repr


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, "Int(5)"),
        (-15, "Int(-15)"),
        (Symbol("i"), 'Symbol("i")'),
        (TRUE, "True"),
        (FALSE, "False"),
        (OPEN, "Open"),
        (CLOSE, "Close"),
        ([], "List([])"),
        ([1, [TRUE, Symbol("x")]], 'List([Int(1), List([True, Symbol("x")])])'),
    ]
)
def test_debug_repr(value, expected):
    assert debug_repr(value) == expected


def test_debug_repr_rejects_foreign_objects():
    with pytest.raises(TypeError):
        debug_repr("text")
    with pytest.raises(TypeError):
        debug_repr(True)


def test_print_writes_one_line_per_call(capsys):
    run("(print 1) (print (> 2 1)) (print name)")
    assert capsys.readouterr().out == 'Int(1)\nTrue\nSymbol("name")\n'


def test_print_output_can_be_redirected(capsys):
    buf = io.StringIO()
    set_output(buf)
    assert run("(print (+ 2 3))") == [5]
    assert buf.getvalue() == "Int(5)\n"
    assert capsys.readouterr().out == ""
