from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .errors import FormatError, NumericError, UnknownSuffixError


class Unit(Enum):
    WEEK = ("w", "weeks")
    DAY = ("d", "days")
    HOUR = ("h", "hours")
    MINUTE = ("m", "minutes")
    SECOND = ("s", "seconds")

    def __init__(self, suffix: str, plural: str) -> None:
        self.suffix = suffix
        self.plural = plural

    @property
    def conversion_factor(self) -> int:
        """Number of seconds in one of this unit."""
        return _FACTORS[self]

    @classmethod
    def from_suffix(cls, suffix: str) -> "Unit":
        for unit in cls:
            if unit.suffix == suffix:
                return unit
        raise UnknownSuffixError(suffix)


def _compose_factors() -> Dict[Unit, int]:
    factors = {Unit.SECOND: 1}
    factors[Unit.MINUTE] = factors[Unit.SECOND] * 60
    factors[Unit.HOUR] = factors[Unit.MINUTE] * 60
    factors[Unit.DAY] = factors[Unit.HOUR] * 24
    factors[Unit.WEEK] = factors[Unit.DAY] * 7
    return factors


_FACTORS: Dict[Unit, int] = _compose_factors()

CONVERSION_TABLE: Dict[str, int] = {unit.suffix: _FACTORS[unit] for unit in Unit}


@dataclass(frozen=True)
class UnitValue:
    unit: Unit
    magnitude: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise NumericError(
                f"{self.unit.plural} must be a whole number (got {self.magnitude!r})"
            )
        if self.magnitude < 0:
            raise NumericError(
                f"{self.unit.plural} cannot be negative (got {self.magnitude})"
            )

    @property
    def seconds(self) -> int:
        return self.magnitude * self.unit.conversion_factor

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.suffix}"


def parse_unit_value(token: str, unit: Unit) -> UnitValue:
    """Parse ``token`` such as ``"3w"`` as a magnitude of ``unit``.

    Raises :class:`FormatError` when the token does not end with the unit's
    suffix and :class:`NumericError` when what precedes the suffix is not a
    plain run of ASCII digits.
    """
    if not token.endswith(unit.suffix):
        raise FormatError(f"{unit.plural} not ending in '{unit.suffix}'")
    digits = token[: -len(unit.suffix)]
    if not digits:
        raise NumericError(f"no number for {unit.plural}")
    # int() would also take signs, underscores and surrounding whitespace.
    if not (digits.isascii() and digits.isdigit()):
        raise NumericError(f"invalid number for {unit.plural}: '{digits}'")
    return UnitValue(unit, int(digits))
