"""
Dice rolling for Sacred Geometry.

One d6 is rolled per rank of Knowledge (engineering); the results form
the dice multiset handed to the search engine.
"""

import random

from sacred_geometry.core.constants import DIE_SIDES


def roll_dice(count: int, rng: random.Random | None = None) -> list[int]:
    """
    Rolls a number of six-sided dice.

    Args:
        count (int): How many dice to roll.
        rng (random.Random | None):
            Optional random generator, for reproducible rolls.

    Returns:
        list[int]: The rolled values, each between 1 and 6.

    Raises:
        ValueError: If the count is negative.

    """
    if count < 0:
        raise ValueError(f"Cannot roll a negative number of dice: {count}")
    rng = rng or random.Random()
    return [rng.randint(1, DIE_SIDES) for _ in range(count)]
