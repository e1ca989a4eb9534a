"""
Module for printing Sacred Geometry checks and spell references in a
formatted way.
"""

from rich.markup import escape
from rich.table import Table

from sacred_geometry.core.utils import cprint, crule
from sacred_geometry.search.models import BatchResult, PrimeResult
from sacred_geometry.spells.metamagic import Metamagic
from sacred_geometry.spells.preparation import SpellCheck
from sacred_geometry.spells.ranges import RangeKind


def status_icon(success: bool) -> str:
    return "✅" if success else "❌"


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def prime_line(result: PrimeResult) -> str:
    """
    Formats the outcome of one prime search as a markup line.

    Args:
        result (PrimeResult): The search result.

    Returns:
        str: A green line with the expression, or a red "Not found" line.

    """
    if result.found:
        return f"[green]Prime {result.prime}: {result.expression}[/]"
    if result.exhausted_budget:
        return f"[red]Prime {result.prime}: Not found (search budget exhausted)[/]"
    return f"[red]Prime {result.prime}: Not found[/]"


def build_spell_table(checks: list[SpellCheck], caster_level: int) -> Table:
    """
    Builds the summary table of prepared spells.

    Args:
        checks (list[SpellCheck]): The checks to list, one row each.
        caster_level (int): The base caster level shown in the headers.

    Returns:
        Table: The rich table.

    """
    table = Table(title="Sacred Geometry", show_lines=False)
    table.add_column("Status", justify="center")
    table.add_column("Spell Name", style="bold magenta")
    table.add_column("Updated Range")
    table.add_column("Duration")
    table.add_column(f"Dice Count: CL={caster_level}")
    table.add_column(f"Dice Count: CL={caster_level + 2}")
    table.add_column("Empower")
    table.add_column("Intensify")
    for check in checks:
        dice_now, dice_later = check.dice_columns
        table.add_row(
            status_icon(check.success),
            check.spell.name,
            check.updated_range,
            check.updated_duration,
            dice_now,
            dice_later,
            yes_no(check.spell.has_metamagic(Metamagic.EMPOWER)),
            yes_no(check.spell.has_metamagic(Metamagic.INTENSIFIED)),
        )
    return table


def print_spell_table(checks: list[SpellCheck], caster_level: int) -> None:
    """Prints the summary table of prepared spells."""
    cprint(build_spell_table(checks, caster_level))


def print_batch(batch: BatchResult, padding: int = 2) -> None:
    """
    Prints every prime of a batch and the overall outcome.

    Args:
        batch (BatchResult): The search results.
        padding (int): Left padding for the output. Defaults to 2.

    """
    indent = " " * padding
    for result in batch.results:
        cprint(indent + prime_line(result))
    if batch.success:
        cprint(f"{indent}[green]Success! You can cast the spell at its original level.[/]")
    else:
        cprint(f"{indent}[red]Failed to find all required prime numbers.[/]")


def print_check_details(check: SpellCheck) -> None:
    """
    Prints the dice and expressions of one spell check.

    Args:
        check (SpellCheck): The check to describe.

    """
    crule(f"{check.spell.name} (level {check.level})", style="bold blue")
    if check.updated_range:
        cprint(f"  Range: {escape(check.updated_range)}")
    if check.updated_duration:
        cprint(f"  Duration: {escape(check.updated_duration)}")
    if check.updated_damage:
        cprint(f"  Damage: {escape(check.updated_damage)}")
    if check.reason:
        cprint(f"  [red]{escape(check.reason)}[/]")
        return
    cprint(f"  Rolling {len(check.dice)} d6: {escape(str(check.dice))}")
    if check.batch is not None:
        print_batch(check.batch)


def print_range_reference(caster_level: int) -> None:
    """
    Prints every spell range with its rule text and computed distance.

    Args:
        caster_level (int): The caster level used for the distances.

    """
    crule(f"Computed Range Details (Caster Level: {caster_level})", style="bold green")
    for kind in RangeKind:
        cprint(f"\n[bold]{kind.display_name}[/]:")
        cprint(f"  {kind.description}")
        cprint(f"  Computed Range: {kind.compute(caster_level)}")
