"""Exception taxonomy and the ParseError value returned to callers."""

from __future__ import annotations

from dataclasses import dataclass


class HandHistoryError(Exception):
    """Base class for everything the parser raises internally."""


class EmptyHandHistoryError(HandHistoryError):
    def __init__(self, message: str = "Empty hand history") -> None:
        super().__init__(message)


class StructuralError(HandHistoryError):
    """A mandatory section is missing or malformed."""


class InvalidHeaderError(StructuralError):
    pass


class InvalidTableError(StructuralError):
    pass


class MissingPlayersError(StructuralError):
    pass


class UnexpectedEndOfInput(StructuralError):
    def __init__(self, message: str = "Unexpected end of hand history") -> None:
        super().__init__(message)


class InvalidAmountError(HandHistoryError, ValueError):
    """A chip amount is negative or not a number."""


class InvalidCardError(HandHistoryError, ValueError):
    """A card token is not rank + suit."""


class PlayerStateError(HandHistoryError):
    """The player ledger was asked to do something inconsistent."""


class DuplicatePlayerError(PlayerStateError):
    pass


class ChipUnderflowError(PlayerStateError):
    """Raised in strict mode when a balance would drop below zero."""


class PotMathError(HandHistoryError):
    """Pot amounts don't add up to the declared total."""


class ValidationError(HandHistoryError):
    """The assembled hand failed a fatal consistency check."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"Hand validation failed: {'; '.join(self.errors)}")


class UnsupportedFormatError(HandHistoryError):
    pass


@dataclass(frozen=True)
class ParseError:
    """Failure value returned by the parser instead of a hand.

    Attributes:
        message: Human-readable description.
        line: Zero-based line index where parsing stopped.
        context: The raw line at that index, if there was one.
    """

    message: str
    line: int = 0
    context: str | None = None

    def __str__(self) -> str:
        if self.context is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}: {self.context!r})"
