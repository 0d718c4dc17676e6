"""Error types surfaced to the user by the CLI."""
from __future__ import annotations


class DiceError(ValueError):
    """Base class for every failure reported back to the user."""


class InvalidNotationError(DiceError):
    """The input does not match ``<count>d<sides|F>[+-modifier]``."""

    def __init__(self, notation: str) -> None:
        self.notation = notation
        super().__init__(f"Invalid dice format! Use XdX or XdF (got '{notation}')")


class OptionConflictError(DiceError):
    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"--{first} cannot be used with --{second}")


class TooManyDiceError(DiceError):
    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Refusing to roll {count} dice (limit is {limit})")
