"""Dice notation parser: pure string handling, no randomness."""
from __future__ import annotations

import logging
import re

from dicecalc.errors import InvalidNotationError, TooManyDiceError
from dicecalc.models.roll import DieKind, DieSpec

logger = logging.getLogger(__name__)

DEFAULT_MAX_DICE = 1000

# Pattern: NdM or NdF, optional +/-X
_NOTATION_RE = re.compile(
    r"^(?P<count>\d+)d(?P<sides>\d+|F)"
    r"(?P<mod>[+-]\d+)?$",
    re.IGNORECASE,
)


def parse_notation(notation: str, max_dice: int = DEFAULT_MAX_DICE) -> DieSpec:
    """Parse an expression like '2d6', '1d20+5', '3d6-2' or '4dF'."""
    expr = "".join(notation.split())
    m = _NOTATION_RE.match(expr)
    if not m:
        raise InvalidNotationError(notation)

    count = int(m.group("count"))
    modifier = int(m.group("mod")) if m.group("mod") else 0
    sides_text = m.group("sides")

    if sides_text.upper() == "F":
        spec = DieSpec(count=count, kind=DieKind.FUDGE, modifier=modifier)
    else:
        sides = int(sides_text)
        if sides == 0:
            raise InvalidNotationError(notation)
        spec = DieSpec(count=count, kind=DieKind.STANDARD, sides=sides, modifier=modifier)

    if count > max_dice:
        raise TooManyDiceError(count, max_dice)

    logger.debug("Parsed %r as %s", notation, spec.notation)
    return spec
