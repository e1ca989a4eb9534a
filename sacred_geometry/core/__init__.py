"""
Core system module for the sacred geometry tool.

This module contains the fundamental components shared by the search
engine and the spell rules, including constants, console output and
logging configuration.
"""

from .constants import (
    ADDITIVE_SYMBOLS,
    DIE_SIDES,
    MAX_SPELL_LEVEL,
    MULTIPLICATIVE_SYMBOLS,
    OPERATOR_SYMBOLS,
    PRIME_CONSTANTS,
    NiceEnum,
    Operator,
    get_prime_constants,
)
from .logging import (
    format_context,
    get_logger,
    setup_logging,
)
from .utils import (
    ccapture,
    cprint,
    crule,
    table_to_str,
    trunc_div,
)

__all__ = [
    # Import from constants.py
    "ADDITIVE_SYMBOLS",
    "DIE_SIDES",
    "MAX_SPELL_LEVEL",
    "MULTIPLICATIVE_SYMBOLS",
    "OPERATOR_SYMBOLS",
    "PRIME_CONSTANTS",
    "NiceEnum",
    "Operator",
    "get_prime_constants",
    # Import from logging.py
    "format_context",
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "table_to_str",
    "trunc_div",
]
