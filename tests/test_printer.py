import pytest

from sigma.printer import to_lisp_string
from sigma.types.environment import Environment
from sigma.types.error_value import Error
from sigma.types.lambda_fn import Lambda
from sigma.types.nil import Nil
from sigma.types.symbol import Symbol
from sigma.builtin.env_builtin import add


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "<nil>"),
        (0, "0"),
        (123, "123"),
        (-7, "-7"),
        (Symbol("list-one"), "list-one"),
        ([], "()"),
        ([1, 2, 3], "(1 2 3)"),
        ([Symbol("+"), 1, [2, [3]]], "(+ 1 (2 (3)))"),
        ([Nil, Error("x")], "(<nil> Error(x))"),
        (Error("empty list"), "Error(empty list)"),
    ]
)
def test_to_lisp_string(value, expected):
    assert to_lisp_string(value) == expected


def test_procedures_print_as_callable():
    assert to_lisp_string(add) == "<callable>"
    assert to_lisp_string(Lambda([Symbol("x")], Symbol("x"), Environment())) == "<callable>"
    assert to_lisp_string([add]) == "(<callable>)"


def test_nil_and_error_dunder_forms():
    assert str(Nil) == "<nil>"
    assert not Nil
    assert str(Error("boom")) == "Error(boom)"
    assert Error("a") == Error("a")
    assert Error("a") != Error("b")
