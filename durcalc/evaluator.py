from typing import Iterable

from .durations import Duration, format_duration
from .errors import MissingOperandError, MissingOperatorError, NegativeDurationError
from .expression import Expression, Operator, Term, parse_expression


def evaluate_seconds(expression: Expression) -> int:
    """Fold ``expression`` left to right into a signed second count.

    There is no precedence: ``6d - 1d - 2d`` is ``(6d - 1d) - 2d``.
    """
    total = 0
    pending = Operator.PLUS
    expect_term = True
    for item in expression:
        if isinstance(item, Term):
            if not expect_term:
                raise MissingOperatorError(f"missing operator before '{item.text}'")
            if pending is Operator.PLUS:
                total += item.seconds
            else:
                total -= item.seconds
            expect_term = False
        else:
            if expect_term:
                raise MissingOperandError(f"missing operand before '{item.value}'")
            pending = item
            expect_term = True
    if expect_term:
        raise MissingOperandError("missing operand at end of expression")
    return total


def evaluate(expression: Expression) -> Duration:
    total = evaluate_seconds(expression)
    if total < 0:
        magnitude = format_duration(Duration.from_seconds(-total))
        raise NegativeDurationError(f"result is negative (-{magnitude})")
    return Duration.from_seconds(total)


def evaluate_tokens(tokens: Iterable[str]) -> Duration:
    return evaluate(parse_expression(tokens))
