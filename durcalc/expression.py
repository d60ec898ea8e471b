"""Turn raw argument tokens into an alternating term/operator expression."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union

from .durations import Duration
from .errors import EmptyOperandError, FormatError, MissingInputError

OPERATOR_CHARS = ("+", "-")


class Operator(Enum):
    PLUS = "+"
    MINUS = "-"


@dataclass(frozen=True)
class Term:
    text: str
    seconds: int


Item = Union[Term, Operator]
Expression = List[Item]


def is_operator(token: str) -> bool:
    return token.startswith(OPERATOR_CHARS)


def split_parts(tokens: Iterable[str]) -> List[str]:
    """Group raw tokens into operand strings and operator tokens.

    Consecutive non-operator tokens join into a single operand, so
    ``["1h", "30m", "+", "5m"]`` becomes ``["1h 30m", "+", "5m"]``.
    """
    parts: List[str] = []
    buffer: List[str] = []

    def flush() -> None:
        operand = " ".join(buffer).strip()
        if not operand:
            raise EmptyOperandError("missing operand")
        parts.append(operand)
        buffer.clear()

    for raw in tokens:
        token = raw.strip()
        if not token:
            raise EmptyOperandError("no char in substring")
        if is_operator(token):
            flush()
            parts.append(token)
        else:
            buffer.append(token)

    flush()
    return parts


def parse_item(part: str) -> Item:
    if is_operator(part):
        try:
            return Operator(part)
        except ValueError as exc:
            raise FormatError(f"invalid operator '{part}'") from exc
    return Term(part, Duration.parse(part).to_seconds())


def parse_expression(tokens: Iterable[str]) -> Expression:
    tokens = list(tokens)
    if not tokens:
        raise MissingInputError("missing input")
    return [parse_item(part) for part in split_parts(tokens)]
