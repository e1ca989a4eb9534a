"""
Spell preparation with the Sacred Geometry feat.

Ties the spell rules to the search engine: rolls one d6 per rank of
Knowledge (engineering), looks up the primes for the metamagic-adjusted
spell level and checks that every prime can be produced.
"""

import random
from collections.abc import Sequence
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field

from sacred_geometry.config import CasterConfig
from sacred_geometry.core.constants import MAX_SPELL_LEVEL, get_prime_constants
from sacred_geometry.dice import roll_dice
from sacred_geometry.search.dispatcher import search_primes
from sacred_geometry.search.models import BatchResult
from sacred_geometry.spells.metamagic import (
    Metamagic,
    apply_metamagic,
    calculate_spell_level,
)
from sacred_geometry.spells.ranges import describe_range
from sacred_geometry.spells.spell import (
    Spell,
    format_damage,
    format_duration,
    missile_count,
)


def effective_caster_level(spell: Spell, config: CasterConfig) -> int:
    """
    Returns the caster level a spell is cast at.

    Transmuter of Korada adds one caster level to Transmutation spells.
    """
    if config.transmuter_of_korada and spell.school.strip().lower() == "transmutation":
        return config.caster_level + 1
    return config.caster_level


def sacred_geometry_level(spell: Spell) -> int:
    """Returns the metamagic-adjusted level whose primes must be found, at least 1."""
    return max(1, calculate_spell_level(spell))


def dice_count(spell: Spell, caster_level: int) -> int:
    """
    Returns the number of damage dice rolled at a caster level.

    Per-level dice are capped at the roll's maximum; Intensified adds five
    dice but never more than the caster level.

    Args:
        spell (Spell): The spell as listed, before metamagic is applied.
        caster_level (int): The caster level.

    Returns:
        int: The number of dice, 0 for spells without damage dice.

    """
    roll = spell.damage
    if roll.num_dice <= 0:
        return 0
    count = roll.num_dice
    if roll.per_level:
        count *= caster_level
        if roll.max_dice > 0:
            count = min(count, roll.max_dice)
    if spell.has_metamagic(Metamagic.INTENSIFIED):
        count = min(count + 5, caster_level)
    return count


def format_dice_count(spell: Spell, caster_level: int) -> str:
    """
    Formats the damage dice rolled at a caster level for display.

    Magic Missile multiplies dice and bonus by its missiles, and Empower
    adds a "(×1.5)" marker.

    Args:
        spell (Spell): The spell.
        caster_level (int): The caster level.

    Returns:
        str: The formatted dice, or "" for spells without damage dice.

    """
    count = dice_count(spell, caster_level)
    if count <= 0:
        return ""
    roll = spell.damage
    if spell.name == "Magic Missile":
        missiles = missile_count(caster_level)
        total_dice = roll.num_dice * missiles
        total_mod = roll.modifier * missiles
        if total_mod > 0:
            text = f"{total_dice}d{roll.dice_type} + {total_mod} ({missiles} missiles)"
        else:
            text = f"{total_dice}d{roll.dice_type} ({missiles} missiles)"
    else:
        text = f"{count}d{roll.dice_type}"
    if spell.has_metamagic(Metamagic.EMPOWER):
        text += " (×1.5)"
    return text


class SpellCheck(BaseModel):
    """Outcome of preparing one spell with Sacred Geometry."""

    spell: Spell = Field(description="The spell after metamagic is applied.")
    base_spell: Spell = Field(description="The spell as listed, before metamagic.")
    level: int = Field(description="The spell level whose primes were searched.")
    caster_level: int = Field(description="The caster level of the spell.", ge=1)
    dice: list[int] = Field(
        default_factory=list,
        description="The dice rolled for the check.",
    )
    batch: BatchResult | None = Field(
        default=None,
        description="The prime search results, None when no search ran.",
    )
    reason: str = Field(
        default="",
        description="Why the check could not be attempted, if it was not.",
    )

    @property
    def success(self) -> bool:
        return self.batch is not None and self.batch.success

    @property
    def updated_range(self) -> str:
        return describe_range(self.spell.range, self.caster_level)

    @property
    def updated_duration(self) -> str:
        """Duration of the prepared spell, "" for instantaneous spells."""
        if self.spell.duration.value <= 0:
            return ""
        return format_duration(self.spell.duration, self.caster_level)

    @property
    def updated_damage(self) -> str:
        return format_damage(self.spell.damage, self.caster_level, self.spell.name)

    @property
    def dice_columns(self) -> tuple[str, str]:
        """Damage dice at the caster level and two levels above it."""
        return (
            format_dice_count(self.base_spell, self.caster_level),
            format_dice_count(self.base_spell, self.caster_level + 2),
        )


def check_level(
    level: int,
    dice: Sequence[int],
    config: CasterConfig | None = None,
) -> BatchResult:
    """
    Checks whether the dice produce every prime of a spell level.

    Args:
        level (int): The spell level, between 1 and MAX_SPELL_LEVEL.
        dice (Sequence[int]): The dice multiset.
        config (CasterConfig | None): Supplies the optional search budget.

    Returns:
        BatchResult: The results for each prime of the level.

    Raises:
        ValueError: If the level has no prime constants.

    """
    budget = config.budget if config else None
    return search_primes(dice, get_prime_constants(level), budget)


def prepare_spell(
    spell: Spell,
    config: CasterConfig,
    dice: Sequence[int] | None = None,
    rng: random.Random | None = None,
) -> SpellCheck:
    """
    Prepares a spell with Sacred Geometry.

    Args:
        spell (Spell): The spell and its metamagic feats.
        config (CasterConfig): The caster values.
        dice (Sequence[int] | None):
            Dice to use instead of rolling config.engineering dice.
        rng (random.Random | None): Optional random generator for the roll.

    Returns:
        SpellCheck: The check, with its search results when one was run.

    """
    prepared = apply_metamagic(spell)
    level = sacred_geometry_level(spell)
    caster_level = effective_caster_level(spell, config)
    check: dict[str, Any] = {
        "spell": prepared,
        "base_spell": spell,
        "level": level,
        "caster_level": caster_level,
    }

    if level > MAX_SPELL_LEVEL:
        reason = f"Spell level {level} exceeds the maximum of {MAX_SPELL_LEVEL}"
        log_warning(reason, {"spell": spell.name, "level": level})
        return SpellCheck(**check, reason=reason)

    rolled = list(dice) if dice is not None else roll_dice(config.engineering, rng)
    if not rolled:
        reason = "No dice to roll: the caster has no ranks in engineering"
        log_warning(reason, {"spell": spell.name})
        return SpellCheck(**check, dice=rolled, reason=reason)

    batch = check_level(level, rolled, config)
    return SpellCheck(**check, dice=rolled, batch=batch)
