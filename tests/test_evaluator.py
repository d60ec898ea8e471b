import pytest

from durcalc.durations import Duration
from durcalc.errors import (
    MissingOperandError,
    MissingOperatorError,
    NegativeDurationError,
)
from durcalc.evaluator import evaluate, evaluate_seconds, evaluate_tokens
from durcalc.expression import Operator, Term


def test_left_to_right_without_precedence():
    result = evaluate_tokens(["6d", "-", "1d", "-", "2d"])
    assert result == Duration(days=3)
    assert str(result) == "3d"


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["1h", "30m", "+", "45m"], "2h 15m"),
        (["1w"], "1w"),
        (["90m"], "1h 30m"),
        (["1d", "-", "1s"], "23h 59m 59s"),
        (["1d", "-", "2d", "+", "3d"], "2d"),
        (["1h", "-", "60m"], ""),
        (["6d 23h 59m 59s", "+", "1s"], "1w"),
    ],
)
def test_evaluate_tokens(tokens, expected):
    assert str(evaluate_tokens(tokens)) == expected


def test_negative_result_is_rejected():
    with pytest.raises(NegativeDurationError, match=r"result is negative \(-1d\)"):
        evaluate_tokens(["1d", "-", "2d"])


def test_evaluate_seconds_keeps_sign():
    expression = [Term("1d", 86400), Operator.MINUS, Term("2d", 172800)]
    assert evaluate_seconds(expression) == -86400


def test_evaluate_returns_canonical_duration():
    expression = [Term("100m", 6000)]
    assert evaluate(expression) == Duration(hours=1, minutes=40)


@pytest.mark.parametrize(
    "expression, error",
    [
        ([], MissingOperandError),
        ([Operator.PLUS, Term("1h", 3600)], MissingOperandError),
        ([Term("1h", 3600), Operator.PLUS], MissingOperandError),
        (
            [Term("1h", 3600), Operator.PLUS, Operator.MINUS, Term("1h", 3600)],
            MissingOperandError,
        ),
        ([Term("1h", 3600), Term("1m", 60)], MissingOperatorError),
    ],
)
def test_malformed_expressions(expression, error):
    with pytest.raises(error):
        evaluate_seconds(expression)
