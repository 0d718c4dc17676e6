"""Dice rolling engine: pure math, no I/O."""
from __future__ import annotations

import logging
import random

from dicecalc.models.roll import DieSpec, KeepPolicy, RollOptions, RollResult

logger = logging.getLogger(__name__)


def draw(spec: DieSpec) -> int:
    """Draw a single face: 1..sides for standard dice, -1/0/1 for fudge dice."""
    if spec.is_fudge:
        return random.randint(-1, 1)
    return random.randint(1, spec.sides)


def can_explode(spec: DieSpec) -> bool:
    # A d1 always shows its maximum and would chain forever.
    return spec.is_fudge or spec.sides > 1


def roll_pool(spec: DieSpec, exploding: bool = False) -> list[int]:
    """Roll ``spec.count`` dice, appending extra draws for exploding maxima."""
    explode = exploding and can_explode(spec)
    pool = []
    for _ in range(spec.count):
        value = draw(spec)
        pool.append(value)
        while explode and value == spec.max_face:
            value = draw(spec)
            pool.append(value)
    if len(pool) > spec.count:
        logger.debug("%s exploded into %d dice", spec.notation, len(pool))
    return pool


def resolve_keep_policy(options: RollOptions, pool_size: int) -> KeepPolicy:
    """Translate keep/drop options into a keep count and direction.

    Drop options are expressed as keeping the opposite end of the pool, so
    ``drop_highest=N`` keeps the lowest ``pool_size - N`` dice (never below
    zero). With no option every die is kept.
    """
    if options.highest is not None:
        policy = KeepPolicy(count=options.highest, highest=True)
    elif options.lowest is not None:
        policy = KeepPolicy(count=options.lowest, highest=False)
    elif options.drop_highest is not None:
        policy = KeepPolicy(count=max(pool_size - options.drop_highest, 0), highest=False)
    elif options.drop_lowest is not None:
        policy = KeepPolicy(count=max(pool_size - options.drop_lowest, 0), highest=True)
    else:
        policy = KeepPolicy(count=pool_size, highest=True)
    logger.debug("Keep policy for pool of %d: %s", pool_size, policy)
    return policy


def select_kept(pool: list[int], policy: KeepPolicy) -> list[int]:
    if policy.count >= len(pool):
        return list(pool)
    return sorted(pool, reverse=policy.highest)[:policy.count]


def roll(spec: DieSpec, options: RollOptions | None = None) -> RollResult:
    """Roll a parsed spec, applying exploding and keep/drop options."""
    options = options or RollOptions()
    pool = roll_pool(spec, exploding=options.exploding)
    policy = resolve_keep_policy(options, len(pool))
    kept = select_kept(pool, policy)
    total = sum(kept) + spec.modifier
    return RollResult(spec=spec, pool=pool, kept=kept, policy=policy, total=total)


def roll_many(spec: DieSpec, options: RollOptions | None = None) -> list[RollResult]:
    """Roll independently ``options.repeat`` times (once by default)."""
    options = options or RollOptions()
    return [roll(spec, options) for _ in range(options.times)]


def average(spec: DieSpec) -> float:
    """Expected total: count x per-die mean + modifier. Fudge dice average 0."""
    per_die = 0.0 if spec.is_fudge else (spec.sides + 1) / 2
    result = spec.count * per_die + spec.modifier
    logger.debug("Average of %s is %.2f", spec.notation, result)
    return result
