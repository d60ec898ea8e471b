"""Exceptions raised while parsing and evaluating duration expressions."""


class DurationError(ValueError):
    """Base class for every user-facing duration failure."""


class MissingInputError(DurationError):
    pass


class EmptyOperandError(DurationError):
    pass


class FormatError(DurationError):
    pass


class NumericError(DurationError):
    pass


class UnknownSuffixError(DurationError):
    def __init__(self, suffix: str) -> None:
        super().__init__(f"unknown duration suffix '{suffix}'")
        self.suffix = suffix


class DuplicateUnitError(DurationError):
    def __init__(self, unit: str) -> None:
        super().__init__(f"can't set {unit} twice")
        self.unit = unit


class NegativeDurationError(DurationError):
    pass


class MissingOperandError(DurationError):
    pass


class MissingOperatorError(DurationError):
    pass
