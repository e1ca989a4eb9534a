"""
Utilities module for the sacred geometry tool.

Provides console printing with rich formatting and small integer helpers
shared by the search engine and the spell rules.
"""

from __future__ import annotations

import io
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def table_to_str(table: Table, *, colour: bool = True) -> str:
    """
    Render a Rich Table to a string.

    - If `colour` is True (default) you get ANSI escape sequences.
    - If False, output is plain text (good for logs or tests).
    """
    if colour:
        return ccapture(table)
    tmp = Console(record=True, color_system=None, width=160, file=io.StringIO())
    tmp.print(table)
    return tmp.export_text()


def trunc_div(dividend: int, divisor: int) -> int:
    """
    Integer division truncating toward zero.

    Python's floor division rounds toward negative infinity, which differs
    from truncation whenever exactly one operand is negative.

    Args:
        dividend (int): The number being divided.
        divisor (int): The non-zero divisor.

    Returns:
        int: The quotient truncated toward zero.

    Raises:
        ZeroDivisionError: If the divisor is zero.

    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient
