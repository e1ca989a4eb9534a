"""
Spell data model for the sacred geometry tool.

Defines spells, their damage rolls and durations, together with the
parsers and formatters for the textual forms used in spell lists.
"""

from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field

from sacred_geometry.spells.metamagic import Metamagic

# Default maximum for per-level damage when the text gives none.
DEFAULT_MAX_DICE = 5
# Magic Missile never fires more than this many missiles.
MAX_MISSILES = 5


class DamageRoll(BaseModel):
    """A damage roll such as 1d6/level(max:5) or 1d4+1."""

    num_dice: int = Field(default=0, description="Number of dice rolled.", ge=0)
    dice_type: int = Field(default=0, description="Sides of each die.", ge=0)
    modifier: int = Field(default=0, description="Flat bonus added to the roll.")
    per_level: bool = Field(
        default=False,
        description="Whether the number of dice scales with caster level.",
    )
    max_dice: int = Field(
        default=0,
        description="Maximum number of dice, 0 for no maximum.",
        ge=0,
    )
    projectiles: int = Field(
        default=0,
        description="Projectiles fired, for spells like Magic Missile.",
        ge=0,
    )


class Duration(BaseModel):
    """A spell duration such as 1 round or 1 minute/level."""

    value: int = Field(default=0, description="Duration amount.", ge=0)
    unit: str = Field(default="", description="Duration unit, e.g. rounds.")
    per_level: bool = Field(
        default=False,
        description="Whether the duration scales with caster level.",
    )


class Spell(BaseModel):
    """A spell prepared with Sacred Geometry."""

    name: str = Field(description="The name of the spell.")
    base_level: int = Field(default=1, description="The spell level.", ge=0)
    school: str = Field(default="", description="The school of magic.")
    range: str = Field(default="", description="The range name, e.g. Touch.")
    damage: DamageRoll = Field(
        default_factory=DamageRoll,
        description="The damage roll of the spell, if any.",
    )
    duration: Duration = Field(
        default_factory=Duration,
        description="The duration of the spell.",
    )
    metamagic: list[Metamagic] = Field(
        default_factory=list,
        description="Metamagic feats applied to the spell.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")

    def has_metamagic(self, feat: Metamagic) -> bool:
        return feat in self.metamagic


def _to_int(text: str, context: dict[str, Any]) -> int:
    """Converts text to an integer, reporting and returning 0 on failure."""
    text = text.strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        log_warning(f"Expected an integer, got '{text}'", context)
        return 0


def parse_damage(text: str, spell_name: str = "") -> DamageRoll:
    """
    Parses a damage string such as "1d6/level(max:5)", "6d6" or "1d4+1".

    Per-level damage without an explicit maximum is capped at
    DEFAULT_MAX_DICE dice.

    Args:
        text (str): The damage string.
        spell_name (str): The spell name, used for Magic Missile.

    Returns:
        DamageRoll: The parsed roll, empty for an empty string.

    """
    text = text.strip().lower()
    if not text:
        return DamageRoll()
    context = {"damage": text, "spell": spell_name}

    max_dice = 0
    explicit_max = False
    if "(max:" in text:
        head, _, tail = text.partition("(max:")
        max_dice = _to_int(tail.rstrip(")"), context)
        explicit_max = True
        text = head

    per_level = "/level" in text
    text = text.replace("/level", "", 1)

    dice_part, _, modifier_part = text.partition("+")
    modifier = _to_int(modifier_part, context)

    num_dice = dice_type = 0
    count_str, sep, sides_str = dice_part.partition("d")
    if sep:
        num_dice = _to_int(count_str, context)
        dice_type = _to_int(sides_str, context)
    else:
        log_warning(f"Invalid dice string format: '{dice_part}'", context)

    if per_level and not explicit_max:
        max_dice = DEFAULT_MAX_DICE

    return DamageRoll(
        num_dice=num_dice,
        dice_type=dice_type,
        modifier=modifier,
        per_level=per_level,
        max_dice=max_dice,
        projectiles=1 if spell_name == "Magic Missile" else 0,
    )


def missile_count(level: int) -> int:
    """Returns the Magic Missile missiles at a caster level: 1, +1 per 2 levels."""
    return min(1 + (level - 1) // 2, MAX_MISSILES)


def format_damage(roll: DamageRoll, level: int, spell_name: str = "") -> str:
    """
    Formats a damage roll at a caster level, e.g. "5d6" or "1d4+1".

    Args:
        roll (DamageRoll): The roll to format.
        level (int): The caster level.
        spell_name (str): The spell name, used for Magic Missile.

    Returns:
        str: The formatted roll, or "" for spells without damage dice.

    """
    if roll.num_dice == 0:
        return ""
    num_dice = roll.num_dice
    if roll.per_level:
        num_dice *= level
        if roll.max_dice > 0:
            num_dice = min(num_dice, roll.max_dice)

    result = f"{num_dice}d{roll.dice_type}"
    if roll.modifier > 0:
        result += f"+{roll.modifier}"
    if spell_name == "Magic Missile":
        result += f" ({missile_count(level)} missiles)"
    return result


def parse_duration(text: str) -> Duration:
    """
    Parses a duration string such as "1 round" or "1 minute/level".

    Both "/level" and "per_level" mark a duration that scales with caster
    level.

    Args:
        text (str): The duration string.

    Returns:
        Duration: The parsed duration, empty for "" or "instantaneous".

    """
    text = text.strip()
    if not text or text.lower() == "instantaneous":
        return Duration()

    per_level = False
    for marker in ("per_level", "/level"):
        if marker in text:
            per_level = True
            text = text.replace(marker, " ", 1)

    parts = text.split()
    if len(parts) < 2:
        log_warning(f"Invalid duration: '{text}'", {"duration": text})
        return Duration(per_level=per_level)
    return Duration(
        value=_to_int(parts[0], {"duration": text}),
        unit=parts[1],
        per_level=per_level,
    )


def format_duration(duration: Duration, caster_level: int) -> str:
    """
    Formats a duration at a caster level, e.g. "5 minutes" or "1 round".

    A value of exactly 1 drops the trailing "s" of the unit, any other
    value adds one when missing.

    Args:
        duration (Duration): The duration to format.
        caster_level (int): The caster level.

    Returns:
        str: The formatted duration.

    """
    value = duration.value
    if duration.per_level:
        value *= caster_level
    if value == 1:
        return f"1 {duration.unit.removesuffix('s')}"
    unit = duration.unit
    if unit and not unit.endswith("s"):
        unit += "s"
    return f"{value} {unit}"

