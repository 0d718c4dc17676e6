"""Validates option combinations before any dice are rolled."""
from __future__ import annotations

from itertools import combinations

from dicecalc.errors import OptionConflictError
from dicecalc.models.roll import RollOptions

KEEP_OPTIONS = ("highest", "lowest", "drop_highest", "drop_lowest")

# Options that make no sense together with --average.
_AVERAGE_CONFLICTS = KEEP_OPTIONS + ("exploding", "repeat")


def _flag(name: str) -> str:
    return name.replace("_", "-")


def _is_set(options: RollOptions, name: str) -> bool:
    value = getattr(options, name)
    if isinstance(value, bool):
        return value
    return value is not None


def validate_options(options: RollOptions) -> None:
    """Raise OptionConflictError for the first mutually exclusive pair found."""
    for first, second in combinations(KEEP_OPTIONS, 2):
        if _is_set(options, first) and _is_set(options, second):
            raise OptionConflictError(_flag(first), _flag(second))

    if options.average:
        for name in _AVERAGE_CONFLICTS:
            if _is_set(options, name):
                raise OptionConflictError("average", _flag(name))
