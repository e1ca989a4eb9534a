"""
Sacred Geometry search engine.

Enumerates subsets, orderings and operator sequences of a dice multiset,
evaluates them left to right, and runs one search per target prime.
"""

from .dispatcher import search_primes
from .driver import find_combination_to_prime, search_prime
from .enumeration import operator_sequences, permutations, subsets
from .evaluator import evaluate
from .models import BatchResult, PrimeResult, SearchBudget

__all__ = [
    "BatchResult",
    "PrimeResult",
    "SearchBudget",
    "evaluate",
    "find_combination_to_prime",
    "operator_sequences",
    "permutations",
    "search_prime",
    "search_primes",
    "subsets",
]
