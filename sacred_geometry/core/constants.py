"""
Constants and enumerations for the sacred geometry tool.

Defines the arithmetic operators used by the search engine, the prime
targets for each spell level, and the shared enum base class.
"""

from enum import Enum

# Maximum spell level possible in Pathfinder 1e.
MAX_SPELL_LEVEL = 9

# Faces of the dice rolled for Sacred Geometry.
DIE_SIDES = 6

# Prime constants that must all be produced for a spell of each level.
PRIME_CONSTANTS: dict[int, tuple[int, ...]] = {
    1: (3, 5, 7),
    2: (11, 13, 17),
    3: (19, 23, 29),
    4: (31, 37, 41),
    5: (43, 47, 53),
    6: (59, 61, 67),
    7: (71, 73, 79),
    8: (83, 89, 97),
    9: (101, 103, 107),
}


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class Operator(NiceEnum):
    """The four arithmetic operators combined with the dice."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        """Returns the textual symbol of the operator."""
        return self.value

    @property
    def is_additive(self) -> bool:
        return self in (Operator.ADD, Operator.SUB)

    @property
    def is_multiplicative(self) -> bool:
        return self in (Operator.MUL, Operator.DIV)


# Fixed enumeration order for operator sequences.
OPERATOR_SYMBOLS: tuple[str, ...] = tuple(op.symbol for op in Operator)

ADDITIVE_SYMBOLS = frozenset(op.symbol for op in Operator if op.is_additive)
MULTIPLICATIVE_SYMBOLS = frozenset(
    op.symbol for op in Operator if op.is_multiplicative
)


def get_prime_constants(level: int) -> tuple[int, ...]:
    """
    Returns the primes a Sacred Geometry check must produce for a spell level.

    Args:
        level (int): The spell level, between 1 and MAX_SPELL_LEVEL.

    Returns:
        tuple[int, ...]: The target primes in ascending order.

    Raises:
        ValueError: If the level has no prime constants.

    """
    if level not in PRIME_CONSTANTS:
        raise ValueError(
            f"Spell level must be between 1 and {MAX_SPELL_LEVEL}, got {level}"
        )
    return PRIME_CONSTANTS[level]
