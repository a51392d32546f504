import logging

import pytest

from clc.extra.context_type import Context
from clc.extra.exceptions import MalformedArgumentListError, MismatchedParenthesesError, UnknownOperatorError
from clc.rpn import ConverterRPN, shunting_yard
from clc.tokenizer import tokenize


def rpn(expression: str, ctx: Context | None = None) -> list[str]:
    return [t.text for t in shunting_yard(tokenize(expression), ctx or Context.default())]


@pytest.mark.parametrize("expression, expected",
    [
        ("2 + 3 * 4", ["2", "3", "4", "*", "+"]),
        ("25 - 3 - 2", ["25", "3", "-", "2", "-"]),
        ("2^3^2", ["2", "3", "2", "^", "^"]),
        ("(2 + 3) * 4", ["2", "3", "+", "4", "*"]),
        ("2 * x / y", ["2", "x", "*", "y", "/"]),
        ("max(2 * 4, 3 + 5)", ["2", "4", "*", "3", "5", "+", "max"]),
        ("min(1, max(2, 3)) + x", ["1", "2", "3", "max", "min", "x", "+"]),
        ("", []),
    ]
)
def test_rpn_order(expression, expected):
    assert rpn(expression) == expected


def test_unregistered_function_is_plain_identifier():
    assert rpn("foo(1)") == ["foo", "1"]


@pytest.mark.parametrize("expression, exc_type",
    [
        ("1 + 2)", "unopened"),
        (")", "unopened"),
        ("(1 + 2", "unclosed"),
        ("max(1, 2", "unclosed"),
    ]
)
def test_mismatched_parentheses(expression, exc_type):
    with pytest.raises(MismatchedParenthesesError) as e:
        rpn(expression)
    assert e.value.exc_type == exc_type


@pytest.mark.parametrize("expression", ["1, 2", "max(1, 2), 3"])
def test_separator_outside_parentheses(expression):
    with pytest.raises(MalformedArgumentListError):
        rpn(expression)


def test_unknown_operator():
    with pytest.raises(UnknownOperatorError) as e:
        rpn("1 $ 2")
    assert e.value.symbol == "$"


def test_empty_context_has_no_operators():
    with pytest.raises(UnknownOperatorError):
        rpn("1 + 2", Context.new())


def test_failure_is_logged(caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(UnknownOperatorError):
            ConverterRPN().rpn(tokenize("1 ? 2"))
    assert "Exception in rpn" in caplog.text
