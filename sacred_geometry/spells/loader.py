"""
Spell list loading from CSV files.
"""

import csv
from collections.abc import Iterable, Iterator
from pathlib import Path

from catchery import log_warning
from pydantic import ValidationError

from sacred_geometry.spells.metamagic import Metamagic
from sacred_geometry.spells.spell import Duration, Spell, parse_damage, parse_duration

COMMENT_PREFIX = "#"

REQUIRED_COLUMNS = ("name", "baselevel", "school", "range", "damage", "duration")

# Optional Yes/No columns named after a feat, in the order feats are applied.
METAMAGIC_COLUMNS = ("empower", "intensified", "reach", "extend")

DEFAULT_SPELLS: list[Spell] = [
    Spell(
        name="Bull's Strength",
        base_level=2,
        school="Transmutation",
        range="Touch",
        duration=Duration(value=1, unit="minute", per_level=True),
    ),
    Spell(
        name="Enlarge Person",
        base_level=1,
        school="Transmutation",
        range="Close",
        duration=Duration(value=1, unit="minute", per_level=True),
    ),
    Spell(
        name="Mage Armor",
        base_level=1,
        school="Conjuration",
        range="Touch",
        duration=Duration(value=1, unit="hour", per_level=True),
    ),
    Spell(
        name="Shocking Grasp",
        base_level=1,
        school="Evocation",
        range="Touch",
        damage=parse_damage("1d6/level(max:5)", "Shocking Grasp"),
        metamagic=[Metamagic.WAYANG_SPELL_HUNTER],
    ),
    Spell(
        name="Mirror Image",
        base_level=2,
        school="Illusion",
        range="Personal",
        duration=Duration(value=1, unit="minute", per_level=True),
    ),
]


def skip_comments(lines: Iterable[str], prefix: str = COMMENT_PREFIX) -> Iterator[str]:
    """Yields the lines that are not comments once leading spaces are stripped."""
    for line in lines:
        if prefix and line.strip().startswith(prefix):
            continue
        yield line


def _read_row(row: list[str], columns: dict[str, int], line: int) -> Spell:
    """Builds a spell from one CSV row."""

    def cell(name: str) -> str:
        index = columns[name]
        return row[index].strip() if index < len(row) else ""

    name = cell("name")
    level_text = cell("baselevel")
    try:
        base_level = int(level_text) if level_text else 0
    except ValueError:
        log_warning(
            f"Invalid base level '{level_text}' for spell '{name}'",
            {"line": line, "name": name},
        )
        base_level = 0

    feats = [
        Metamagic.from_name(column)
        for column in METAMAGIC_COLUMNS
        if column in columns and cell(column).lower() == "yes"
    ]
    return Spell(
        name=name,
        base_level=base_level,
        school=cell("school"),
        range=cell("range"),
        damage=parse_damage(cell("damage"), name),
        duration=parse_duration(cell("duration")),
        metamagic=[feat for feat in feats if feat is not None],
    )


def read_spells_from_csv(filepath: Path | str) -> list[Spell]:
    """
    Reads a spell list from a CSV file.

    Lines starting with "#" are ignored. The header is matched without
    regard to case and must name every column in REQUIRED_COLUMNS; the
    Empower, Intensified, Reach and Extend columns are optional and mark a
    feat with "Yes".

    Args:
        filepath (Path | str): The CSV file to read.

    Returns:
        list[Spell]: The spells, in file order.

    Raises:
        ValueError: If the file cannot be read or a row is invalid.

    """
    filepath = Path(filepath)
    try:
        with open(filepath, encoding="utf-8", newline="") as f:
            reader = csv.reader(skip_comments(f))
            header = next(reader, None)
            if header is None:
                raise ValueError("missing header row")
            columns = {col.strip().lower(): i for i, col in enumerate(header)}
            missing = [col for col in REQUIRED_COLUMNS if col not in columns]
            if missing:
                raise ValueError(f"missing columns {missing}")
            spells = []
            for row in reader:
                if not any(cell.strip() for cell in row):
                    continue
                spells.append(_read_row(row, columns, reader.line_num))
            return spells
    except (OSError, csv.Error, ValidationError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}")
