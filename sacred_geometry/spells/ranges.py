"""
Spell ranges and their caster-level formulas.
"""

from sacred_geometry.core.constants import NiceEnum


class RangeKind(NiceEnum):
    """Defines the standard spell ranges."""

    TOUCH = "TOUCH"
    CLOSE = "CLOSE"
    MEDIUM = "MEDIUM"
    LONG = "LONG"
    UNLIMITED = "UNLIMITED"
    PERSONAL = "PERSONAL"

    @classmethod
    def from_name(cls, name: str) -> "RangeKind | None":
        """Returns the range matching the name, ignoring case, or None."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            return None

    @property
    def description(self) -> str:
        """Returns the rule text of this range."""
        return {
            RangeKind.TOUCH: "You must touch a creature or object to affect it.",
            RangeKind.CLOSE: "Spell reaches as far as 25 feet, plus an additional 5 feet for every 2 full caster levels.",
            RangeKind.MEDIUM: "Spell reaches as far as 100 feet plus 10 feet per caster level.",
            RangeKind.LONG: "Spell reaches as far as 400 feet plus 40 feet per caster level.",
            RangeKind.UNLIMITED: "Spell reaches anywhere on the same plane of existence.",
            RangeKind.PERSONAL: "Spell affects only the caster.",
        }[self]

    @property
    def extended(self) -> "RangeKind":
        """Returns the range one step further, as granted by Reach Spell."""
        return {
            RangeKind.TOUCH: RangeKind.CLOSE,
            RangeKind.CLOSE: RangeKind.MEDIUM,
            RangeKind.MEDIUM: RangeKind.LONG,
        }.get(self, self)

    def distance(self, caster_level: int) -> int | None:
        """
        Returns the range in feet at a caster level.

        Args:
            caster_level (int): The caster level.

        Returns:
            int | None: The distance in feet, or None for ranges without one.

        """
        if self == RangeKind.CLOSE:
            return 25 + (caster_level // 2) * 5
        if self == RangeKind.MEDIUM:
            return 100 + 10 * caster_level
        if self == RangeKind.LONG:
            return 400 + 40 * caster_level
        if self == RangeKind.TOUCH:
            return 0
        return None

    def compute(self, caster_level: int) -> str:
        """
        Returns the range at a caster level as display text.

        Args:
            caster_level (int): The caster level.

        Returns:
            str: The computed range with its breakdown.

        """
        total = self.distance(caster_level)
        if self == RangeKind.CLOSE:
            return f"{total} feet (Base: 25 ft + Bonus: {total - 25} ft)"
        if self == RangeKind.MEDIUM:
            return f"{total} feet (Base: 100 ft + {10 * caster_level} ft from caster level)"
        if self == RangeKind.LONG:
            return f"{total} feet (Base: 400 ft + {40 * caster_level} ft from caster level)"
        return {
            RangeKind.TOUCH: "Touch range (no numerical distance)",
            RangeKind.UNLIMITED: "Unlimited range",
            RangeKind.PERSONAL: "Personal (self only)",
        }[self]


def describe_range(name: str, caster_level: int) -> str:
    """
    Returns the computed range for a range name, or the name itself.

    Args:
        name (str): The range name, in any case.
        caster_level (int): The caster level.

    Returns:
        str: The computed range text, or the unchanged name when unknown.

    """
    kind = RangeKind.from_name(name) if name else None
    if kind is None:
        return name
    return kind.compute(caster_level)
