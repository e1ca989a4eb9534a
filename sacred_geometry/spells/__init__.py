"""
Spell rules used around the Sacred Geometry search.

Covers spell ranges, damage and duration formulas, metamagic feats, the
CSV spell list and the preparation check itself.
"""

from .loader import DEFAULT_SPELLS, read_spells_from_csv
from .metamagic import Metamagic, apply_metamagic, calculate_spell_level
from .preparation import (
    SpellCheck,
    check_level,
    dice_count,
    effective_caster_level,
    format_dice_count,
    prepare_spell,
    sacred_geometry_level,
)
from .ranges import RangeKind, describe_range
from .spell import (
    DamageRoll,
    Duration,
    Spell,
    format_damage,
    format_duration,
    parse_damage,
    parse_duration,
)

__all__ = [
    "DEFAULT_SPELLS",
    "DamageRoll",
    "Duration",
    "Metamagic",
    "RangeKind",
    "Spell",
    "SpellCheck",
    "apply_metamagic",
    "calculate_spell_level",
    "check_level",
    "describe_range",
    "dice_count",
    "effective_caster_level",
    "format_damage",
    "format_dice_count",
    "format_duration",
    "parse_damage",
    "parse_duration",
    "prepare_spell",
    "read_spells_from_csv",
    "sacred_geometry_level",
]
