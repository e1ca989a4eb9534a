"""
Metamagic feats and their effect on spells.

The set of feats is closed: each member carries its level adjustment,
its rule text and the change it makes to a spell.
"""

from typing import TYPE_CHECKING

from catchery import log_debug, log_warning

from sacred_geometry.core.constants import NiceEnum
from sacred_geometry.spells.ranges import RangeKind

if TYPE_CHECKING:
    from sacred_geometry.spells.spell import Spell


class Metamagic(NiceEnum):
    """Defines the metamagic feats known to the tool."""

    EXTEND = "EXTEND"
    EMPOWER = "EMPOWER"
    REACH = "REACH"
    INTENSIFIED = "INTENSIFIED"
    WAYANG_SPELL_HUNTER = "WAYANG_SPELL_HUNTER"

    @classmethod
    def from_name(cls, name: str) -> "Metamagic | None":
        """
        Returns the feat matching a name, ignoring case.

        Unknown names are reported and yield None.
        """
        key = name.strip().upper().replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            log_warning(
                f"Unknown metamagic feat: '{name}'",
                {"name": name, "known": [m.name for m in cls]},
            )
            return None

    @property
    def level_increase(self) -> int:
        """Returns how many levels the feat adds to the spell."""
        return {
            Metamagic.EXTEND: 1,
            Metamagic.EMPOWER: 2,
            Metamagic.REACH: 1,
            Metamagic.INTENSIFIED: 1,
            Metamagic.WAYANG_SPELL_HUNTER: -1,
        }[self]

    @property
    def description(self) -> str:
        """Returns the rule text of the feat."""
        return {
            Metamagic.EXTEND: "Doubles the duration of the spell",
            Metamagic.EMPOWER: "All variable, numeric effects are increased by half (50%)",
            Metamagic.REACH: "Can cast touch spells at close range, close range spells at medium range, and medium range spells at long range",
            Metamagic.INTENSIFIED: "Adds 5 damage dice to spells with damage dice that scale with level",
            Metamagic.WAYANG_SPELL_HUNTER: "Lowers the total level of the spell by 1",
        }[self]

    def apply(self, spell: "Spell") -> "Spell":
        """
        Returns a copy of the spell modified by this feat.

        Empower only changes how damage is displayed, and Wayang Spell
        Hunter only changes the spell level, so both return the spell as is.

        Args:
            spell (Spell): The spell to modify.

        Returns:
            Spell: The modified copy.

        """
        if self == Metamagic.EXTEND and spell.duration.value > 0:
            duration = spell.duration.model_copy(
                update={"value": spell.duration.value * 2}
            )
            return spell.model_copy(update={"duration": duration})

        if self == Metamagic.REACH:
            kind = RangeKind.from_name(spell.range)
            if kind is not None and kind.extended != kind:
                return spell.model_copy(
                    update={"range": kind.extended.display_name}
                )

        if self == Metamagic.INTENSIFIED:
            damage = spell.damage
            if damage.max_dice > 0 and (damage.per_level or spell.name == "Fireball"):
                log_debug(
                    f"Intensified raises max dice of {spell.name}",
                    {"before": damage.max_dice, "after": damage.max_dice + 5},
                )
                return spell.model_copy(
                    update={
                        "damage": damage.model_copy(
                            update={"max_dice": damage.max_dice + 5}
                        )
                    }
                )

        return spell


def calculate_spell_level(spell: "Spell") -> int:
    """
    Returns the spell level after every metamagic adjustment.

    Args:
        spell (Spell): The spell and its feats.

    Returns:
        int: The adjusted spell level.

    """
    return spell.base_level + sum(feat.level_increase for feat in spell.metamagic)


def apply_metamagic(spell: "Spell") -> "Spell":
    """
    Applies every feat of the spell, in order.

    Args:
        spell (Spell): The spell and its feats.

    Returns:
        Spell: A modified copy; the given spell is left untouched.

    """
    for feat in spell.metamagic:
        spell = feat.apply(spell)
    return spell
