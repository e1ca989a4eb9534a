"""
Tests for the command line entry point and the printed sheets.
"""

import pytest
from sacred_geometry.config import CasterConfig
from sacred_geometry.core.utils import table_to_str
from sacred_geometry.main import create_config_from_args, main, parse_arguments
from sacred_geometry.search.models import BatchResult, PrimeResult
from sacred_geometry.sheets import build_spell_table, prime_line, print_check_details
from sacred_geometry.spells.loader import DEFAULT_SPELLS
from sacred_geometry.spells.metamagic import Metamagic
from sacred_geometry.spells.preparation import prepare_spell
from sacred_geometry.spells.spell import Duration, Spell


def test_level_check_success(capsys):
    assert main(["--level", "1", "--dice", "1", "2", "3", "4", "5", "6"]) == 0
    out = capsys.readouterr().out
    assert "Prime 3" in out
    assert "Success!" in out


def test_level_check_failure(capsys):
    assert main(["--level", "2", "--dice", "1", "1"]) == 1
    out = capsys.readouterr().out
    assert "Prime 11: Not found" in out
    assert "Failed to find all required prime numbers." in out


def test_ranges_reference(capsys):
    assert main(["--ranges", "--caster-level", "4"]) == 0
    out = capsys.readouterr().out
    assert "Computed Range Details (Caster Level: 4)" in out
    assert "35 feet" in out


def test_missing_csv_falls_back_to_defaults(tmp_path, capsys):
    argv = ["--csv", str(tmp_path / "missing.csv"), "--dice", "1", "2", "3", "4", "5", "6"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "Using default spell list..." in out
    assert "Sacred Geometry" in out


def test_verbose_csv_run(tmp_path, capsys):
    path = tmp_path / "spells.csv"
    path.write_text(
        "Name,BaseLevel,School,Range,Damage,Duration\n"
        "Sleep,1,Enchantment,Medium,,1 minute/level\n",
        encoding="utf-8",
    )
    assert main(["--csv", str(path), "--verbose", "--dice", "1", "1"]) == 1
    out = capsys.readouterr().out
    assert "Sleep (level 1)" in out
    assert "Prime 3: Not found" in out


def test_invalid_configuration_exit_code(capsys):
    assert main(["--ranges", "--caster-level", "0"]) == 2


def test_budget_flags_build_config():
    args = parse_arguments(["--max-evaluations", "50", "--no-transmuter"])
    config = create_config_from_args(args)
    assert config.budget is not None
    assert config.budget.max_evaluations == 50
    assert config.budget.max_seconds is None
    assert not config.transmuter_of_korada


def test_no_budget_by_default():
    config = create_config_from_args(parse_arguments([]))
    assert config.budget is None
    assert config.caster_level == 6
    assert config.engineering == 6


def test_level_out_of_choices():
    with pytest.raises(SystemExit):
        parse_arguments(["--level", "10"])


def test_spell_table_rows():
    config = CasterConfig()
    checks = [
        prepare_spell(spell, config, dice=[1, 2, 3, 4, 5, 6])
        for spell in DEFAULT_SPELLS
    ]
    text = table_to_str(build_spell_table(checks, config.caster_level), colour=False)
    assert "Dice Count: CL=6" in text
    assert "Dice Count: CL=8" in text
    assert "Duration" in text
    assert "7 minutes" in text
    for spell in DEFAULT_SPELLS:
        assert spell.name in text


def test_prime_line():
    assert "Prime 7: 3 + 4" in prime_line(
        PrimeResult(prime=7, expression="3 + 4", found=True)
    )
    assert "Not found" in prime_line(PrimeResult(prime=11))
    assert "budget" in prime_line(PrimeResult(prime=11, exhausted_budget=True))
    assert BatchResult().success


def test_check_details_show_prepared_duration(capsys):
    spell = Spell(
        name="Enlarge Person",
        school="Transmutation",
        range="Close",
        duration=Duration(value=1, unit="minute", per_level=True),
        metamagic=[Metamagic.EXTEND],
    )
    check = prepare_spell(spell, CasterConfig(), dice=[1, 2, 3, 4, 5, 6])
    print_check_details(check)
    out = capsys.readouterr().out
    assert "Enlarge Person (level 2)" in out
    assert "Duration: 14 minutes" in out
    assert "Range: 40 feet" in out
