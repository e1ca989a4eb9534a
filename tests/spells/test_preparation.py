"""
Tests for preparing spells with Sacred Geometry.
"""

import random

import pytest
from sacred_geometry.config import CasterConfig
from sacred_geometry.search.models import SearchBudget
from sacred_geometry.spells.metamagic import Metamagic
from sacred_geometry.spells.preparation import (
    check_level,
    dice_count,
    effective_caster_level,
    format_dice_count,
    prepare_spell,
    sacred_geometry_level,
)
from sacred_geometry.spells.spell import DamageRoll, Duration, Spell


@pytest.fixture
def config():
    return CasterConfig(caster_level=5, engineering=6)


@pytest.fixture
def enlarge_person():
    return Spell(
        name="Enlarge Person",
        base_level=1,
        school="Transmutation",
        range="Close",
        duration=Duration(value=1, unit="minute", per_level=True),
    )


@pytest.fixture
def shocking_grasp():
    return Spell(
        name="Shocking Grasp",
        base_level=1,
        school="Evocation",
        range="Touch",
        damage=DamageRoll(num_dice=1, dice_type=6, per_level=True, max_dice=5),
    )


def test_transmuter_of_korada(config, enlarge_person, shocking_grasp):
    """Test the +1 caster level for Transmutation spells only."""
    assert effective_caster_level(enlarge_person, config) == 6
    assert effective_caster_level(shocking_grasp, config) == 5
    disabled = config.model_copy(update={"transmuter_of_korada": False})
    assert effective_caster_level(enlarge_person, disabled) == 5


def test_sacred_geometry_level_is_at_least_one(shocking_grasp):
    spell = shocking_grasp.model_copy(
        update={"metamagic": [Metamagic.WAYANG_SPELL_HUNTER]}
    )
    assert sacred_geometry_level(spell) == 1
    spell = shocking_grasp.model_copy(
        update={"metamagic": [Metamagic.EMPOWER, Metamagic.REACH]}
    )
    assert sacred_geometry_level(spell) == 4


def test_dice_count(shocking_grasp):
    assert dice_count(shocking_grasp, 3) == 3
    assert dice_count(shocking_grasp, 8) == 5
    intensified = shocking_grasp.model_copy(
        update={"metamagic": [Metamagic.INTENSIFIED]}
    )
    assert dice_count(intensified, 3) == 3
    assert dice_count(intensified, 8) == 8


def test_dice_count_without_damage(enlarge_person):
    assert dice_count(enlarge_person, 6) == 0
    assert format_dice_count(enlarge_person, 6) == ""


def test_format_dice_count_empower(shocking_grasp):
    empowered = shocking_grasp.model_copy(update={"metamagic": [Metamagic.EMPOWER]})
    assert format_dice_count(empowered, 4) == "4d6 (×1.5)"


def test_format_dice_count_magic_missile():
    spell = Spell(
        name="Magic Missile",
        damage=DamageRoll(num_dice=1, dice_type=4, modifier=1, projectiles=1),
    )
    assert format_dice_count(spell, 1) == "1d4 + 1 (1 missiles)"
    assert format_dice_count(spell, 6) == "3d4 + 3 (3 missiles)"


def test_check_level(full_dice):
    batch = check_level(1, full_dice)
    assert batch.success
    assert [r.prime for r in batch.results] == [3, 5, 7]


def test_check_level_out_of_range(full_dice):
    with pytest.raises(ValueError):
        check_level(10, full_dice)


def test_prepare_spell_with_given_dice(config, enlarge_person, full_dice):
    check = prepare_spell(enlarge_person, config, dice=full_dice)
    assert check.success
    assert check.level == 1
    assert check.caster_level == 6
    assert check.dice == full_dice
    assert check.updated_range == "40 feet (Base: 25 ft + Bonus: 15 ft)"


def test_prepare_spell_applies_metamagic(config, shocking_grasp, full_dice):
    spell = shocking_grasp.model_copy(update={"metamagic": [Metamagic.REACH]})
    check = prepare_spell(spell, config, dice=full_dice)
    assert check.spell.range == "Close"
    assert check.level == 2
    assert [r.prime for r in check.batch.results] == [11, 13, 17]


def test_prepare_spell_rolls_engineering_dice(config, enlarge_person):
    first = prepare_spell(enlarge_person, config, rng=random.Random(7))
    second = prepare_spell(enlarge_person, config, rng=random.Random(7))
    assert len(first.dice) == 6
    assert first.dice == second.dice
    assert first.success == second.success


def test_prepare_spell_above_max_level(config):
    spell = Spell(
        name="Wish",
        base_level=9,
        metamagic=[Metamagic.EMPOWER],
    )
    check = prepare_spell(spell, config, dice=[1, 2, 3])
    assert not check.success
    assert check.batch is None
    assert "exceeds" in check.reason


def test_prepare_spell_without_engineering(enlarge_person):
    check = prepare_spell(enlarge_person, CasterConfig(engineering=0))
    assert not check.success
    assert check.dice == []
    assert check.reason


def test_prepare_spell_uses_budget(enlarge_person):
    config = CasterConfig(budget=SearchBudget(max_evaluations=1))
    check = prepare_spell(enlarge_person, config, dice=[1, 1])
    assert not check.success
    assert all(r.exhausted_budget for r in check.batch.results)


def test_dice_columns(config, shocking_grasp, full_dice):
    check = prepare_spell(shocking_grasp, config, dice=full_dice)
    assert check.dice_columns == ("5d6", "5d6")


def test_intensified_dice_are_counted_once(shocking_grasp, full_dice):
    """Test that Intensified stops at five extra dice above the cap."""
    spell = shocking_grasp.model_copy(update={"metamagic": [Metamagic.INTENSIFIED]})
    check = prepare_spell(spell, CasterConfig(caster_level=10), dice=full_dice)
    assert check.spell.damage.max_dice == 10
    assert check.dice_columns == ("10d6", "10d6")
    assert check.updated_damage == "10d6"


def test_extended_duration_is_shown(config, enlarge_person, full_dice):
    plain = prepare_spell(enlarge_person, config, dice=full_dice)
    assert plain.updated_duration == "6 minutes"
    extended = enlarge_person.model_copy(update={"metamagic": [Metamagic.EXTEND]})
    check = prepare_spell(extended, config, dice=full_dice)
    assert check.updated_duration == "12 minutes"
    assert check.base_spell.duration.value == 1


def test_instantaneous_spell_has_no_duration(config, shocking_grasp, full_dice):
    check = prepare_spell(shocking_grasp, config, dice=full_dice)
    assert check.updated_duration == ""
    assert check.updated_damage == "5d6"
