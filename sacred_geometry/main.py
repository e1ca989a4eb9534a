"""
Main entry point for the Sacred Geometry spell preparation helper.

Loads the spell list, rolls one d6 per rank of Knowledge (engineering) for
every spell, and reports whether all the prime constants of the
metamagic-adjusted spell level can be produced from the roll.

Examples:
    sacred-geometry                          # Check every spell in spells.csv
    sacred-geometry --verbose                # Show dice and expressions
    sacred-geometry --ranges                 # Show the range reference
    sacred-geometry --level 2 --engineering 5
    sacred-geometry --level 1 --dice 1 2 3 4
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from sacred_geometry.config import CasterConfig
from sacred_geometry.core.constants import MAX_SPELL_LEVEL
from sacred_geometry.core.logging import get_logger, setup_logging
from sacred_geometry.core.utils import cprint, crule
from sacred_geometry.dice import roll_dice
from sacred_geometry.search.models import SearchBudget
from sacred_geometry.sheets import (
    print_batch,
    print_check_details,
    print_range_reference,
    print_spell_table,
)
from sacred_geometry.spells.loader import DEFAULT_SPELLS, read_spells_from_csv
from sacred_geometry.spells.preparation import check_level, prepare_spell
from sacred_geometry.spells.spell import Spell

logger = get_logger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="sacred-geometry",
        description="Check Sacred Geometry prime constants for prepared spells",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=Path("spells.csv"),
        help="Spell list to check (default: spells.csv)",
    )
    parser.add_argument(
        "--ranges",
        action="store_true",
        help="Display the computed ranges for the current caster level",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )
    parser.add_argument(
        "--caster-level",
        type=int,
        default=6,
        help="Caster level of the character (default: 6)",
    )
    parser.add_argument(
        "--engineering",
        type=int,
        default=6,
        help="Ranks in Knowledge (engineering), one d6 per rank (default: 6)",
    )
    parser.add_argument(
        "--no-transmuter",
        action="store_true",
        help="Disable the Transmuter of Korada caster level bonus",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible dice rolls",
    )
    parser.add_argument(
        "--level",
        type=int,
        default=None,
        choices=range(1, MAX_SPELL_LEVEL + 1),
        metavar="N",
        help=f"Run a single check against the primes of spell level N (1-{MAX_SPELL_LEVEL})",
    )
    parser.add_argument(
        "--dice",
        type=int,
        nargs="+",
        default=None,
        metavar="D",
        help="Use these dice instead of rolling",
    )
    parser.add_argument(
        "--max-evaluations",
        type=int,
        default=None,
        help="Give up on a prime after this many evaluations",
    )
    parser.add_argument(
        "--max-seconds",
        type=float,
        default=None,
        help="Give up on a prime after this many seconds",
    )
    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> CasterConfig:
    """Create a CasterConfig from parsed arguments."""
    budget = None
    if args.max_evaluations is not None or args.max_seconds is not None:
        budget = SearchBudget(
            max_evaluations=args.max_evaluations,
            max_seconds=args.max_seconds,
        )
    return CasterConfig(
        caster_level=args.caster_level,
        engineering=args.engineering,
        transmuter_of_korada=not args.no_transmuter,
        verbose=args.verbose,
        debug=args.debug,
        budget=budget,
    )


def load_spells(path: Path) -> list[Spell]:
    """Loads the spell list, falling back to the default spells."""
    try:
        spells = read_spells_from_csv(path)
        logger.debug("Loaded %d spells from %s", len(spells), path)
        return spells
    except ValueError as e:
        cprint(f"Error reading {path}: {e}", style="red", markup=False)
        cprint("Using default spell list...", style="yellow")
        return list(DEFAULT_SPELLS)


def run_level_check(config: CasterConfig, level: int, dice: list[int]) -> bool:
    """Checks one spell level against the dice and prints the outcome."""
    crule(f"Sacred Geometry: spell level {level}", style="bold green")
    cprint(f"  Rolling {len(dice)} d6: {dice}", markup=False)
    batch = check_level(level, dice, config)
    print_batch(batch)
    return batch.success


def run_spell_checks(
    config: CasterConfig,
    spells: list[Spell],
    rng: random.Random,
    dice: list[int] | None = None,
) -> bool:
    """Prepares every spell and prints the table or the detailed output."""
    cprint(f"Caster Level: {config.caster_level}\nEngineering: {config.engineering}\n")
    checks = [prepare_spell(spell, config, dice=dice, rng=rng) for spell in spells]
    if config.verbose:
        for check in checks:
            print_check_details(check)
    else:
        print_spell_table(checks, config.caster_level)
    return all(check.success for check in checks)


def main(argv: list[str] | None = None) -> int:
    """
    Run the Sacred Geometry checks.

    Args:
        argv (list[str] | None): Command line arguments, sys.argv when None.

    Returns:
        int: 0 when every check succeeded, 1 otherwise.

    """
    args = parse_arguments(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)
    try:
        config = create_config_from_args(args)
    except ValueError as e:
        cprint(f"Invalid configuration: {e}", style="red", markup=False)
        return 2

    if args.ranges:
        print_range_reference(config.caster_level)
        return 0

    rng = random.Random(args.seed)
    if args.level is not None:
        dice = args.dice or roll_dice(config.engineering, rng)
        success = run_level_check(config, args.level, dice)
    else:
        success = run_spell_checks(config, load_spells(args.csv), rng, args.dice)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
