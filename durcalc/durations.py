"""Calendar-free durations and their canonical second counts."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, List

from .errors import DuplicateUnitError, EmptyOperandError, NegativeDurationError
from .units import Unit, UnitValue, parse_unit_value

# Field name for each unit, largest first.
_FIELDS = {
    Unit.WEEK: "weeks",
    Unit.DAY: "days",
    Unit.HOUR: "hours",
    Unit.MINUTE: "minutes",
    Unit.SECOND: "seconds",
}

# Exclusive upper bound of each field in canonical form.
_CANONICAL_LIMITS = {"days": 7, "hours": 24, "minutes": 60, "seconds": 60}


@dataclass(frozen=True)
class Duration:
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        # UnitValue rejects negative and non-integer magnitudes.
        self.unit_values()

    @classmethod
    def parse(cls, text: str) -> Duration:
        return parse_duration(text)

    @classmethod
    def from_seconds(cls, total: int) -> Duration:
        """Decompose ``total`` seconds into the canonical duration.

        Each unit, largest first, takes as many whole units as fit and passes
        the remainder on, so ``from_seconds(5400)`` is one hour and thirty
        minutes.

        Raises
        ------
        TypeError
            If ``total`` is not an integer.
        NegativeDurationError
            If ``total`` is below zero.
        """
        if isinstance(total, bool) or not isinstance(total, int):
            raise TypeError(f"seconds must be an int, got {type(total).__name__}")
        if total < 0:
            raise NegativeDurationError(f"cannot decompose negative seconds ({total})")

        remaining = total
        kwargs: Dict[str, int] = {}
        for unit, name in _FIELDS.items():
            kwargs[name], remaining = divmod(remaining, unit.conversion_factor)
        assert remaining == 0
        return cls(**kwargs)

    def unit_values(self) -> List[UnitValue]:
        return [UnitValue(unit, getattr(self, name)) for unit, name in _FIELDS.items()]

    def to_seconds(self) -> int:
        return sum(value.seconds for value in self.unit_values())

    def canonical(self) -> Duration:
        return Duration.from_seconds(self.to_seconds())

    def is_canonical(self) -> bool:
        return all(
            getattr(self, name) < limit for name, limit in _CANONICAL_LIMITS.items()
        )

    def as_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        return format_duration(self)


def parse_duration(expr: str) -> Duration:
    """Convert a single operand such as ``"1h 30m"`` into a :class:`Duration`.

    The operand is one or more whitespace-separated unit terms: weeks
    (``w``), days (``d``), hours (``h``), minutes (``m``) or seconds
    (``s``), each preceded by a non-negative integer. Terms may appear in any
    order but each unit at most once. Units not mentioned are zero.

    Parameters
    ----------
    expr:
        Operand text to parse.

    Returns
    -------
    Duration
        The duration as written, not normalised.

    Raises
    ------
    EmptyOperandError
        If the operand holds no terms.
    UnknownSuffixError
        If a term ends in a character that is not a unit suffix.
    DuplicateUnitError
        If a unit appears more than once.
    NumericError
        If a term's magnitude is missing or not a plain integer.
    """

    parts = expr.split()
    if not parts:
        raise EmptyOperandError("empty duration")

    magnitudes: Dict[str, int] = {}
    for part in parts:
        unit = Unit.from_suffix(part[-1])
        name = _FIELDS[unit]
        if name in magnitudes:
            raise DuplicateUnitError(unit.plural)
        magnitudes[name] = parse_unit_value(part, unit).magnitude
    return Duration(**magnitudes)


def format_duration(duration: Duration) -> str:
    """Render the non-zero units of ``duration``, largest first."""
    return " ".join(
        str(value) for value in duration.unit_values() if value.magnitude != 0
    )
