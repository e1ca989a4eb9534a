"""
Prime search driver.

Walks the whole search space for one target prime (subsets, then their
orderings, then operator sequences) and stops at the first expression
that evaluates to the prime. No pruning is applied: the first valid
expression is reported, not the shortest.
"""

import time
from collections.abc import Sequence

from catchery import log_warning

from sacred_geometry.core.logging import get_logger
from sacred_geometry.search.enumeration import (
    operator_sequences,
    permutations,
    subsets,
)
from sacred_geometry.search.evaluator import evaluate
from sacred_geometry.search.models import PrimeResult, SearchBudget

logger = get_logger(__name__)


def search_prime(
    dice: Sequence[int],
    prime: int,
    budget: SearchBudget | None = None,
) -> PrimeResult:
    """
    Searches for an expression over the dice that evaluates to the prime.

    Args:
        dice (Sequence[int]): The dice multiset, never modified.
        prime (int): The target prime.
        budget (SearchBudget | None):
            Optional limits on the search. Without one the search runs
            until it succeeds or exhausts every combination.

    Returns:
        PrimeResult: The first matching expression, or a not-found result.

    """
    if not dice:
        log_warning(
            "Cannot search for a prime without dice",
            {"prime": prime},
        )
        return PrimeResult(prime=prime)
    if prime <= 0:
        log_warning(
            f"Target must be a positive integer, got {prime}",
            {"prime": prime, "dice": list(dice)},
        )
        return PrimeResult(prime=prime)

    max_evaluations = budget.max_evaluations if budget else None
    deadline = (
        time.monotonic() + budget.max_seconds
        if budget and budget.max_seconds is not None
        else None
    )

    evaluations = 0
    for subset in subsets(dice):
        for operands in permutations(subset):
            if deadline is not None and time.monotonic() >= deadline:
                logger.debug("Search for %d ran out of time", prime)
                return PrimeResult(
                    prime=prime, evaluations=evaluations, exhausted_budget=True
                )
            for operators in operator_sequences(len(operands) - 1):
                if max_evaluations is not None and evaluations >= max_evaluations:
                    logger.debug(
                        "Search for %d hit the limit of %d evaluations",
                        prime,
                        max_evaluations,
                    )
                    return PrimeResult(
                        prime=prime, evaluations=evaluations, exhausted_budget=True
                    )
                evaluations += 1
                outcome = evaluate(operands, operators)
                if outcome is None:
                    continue
                value, expression = outcome
                if value == prime:
                    logger.debug(
                        "Found %d = %s after %d evaluations",
                        prime,
                        expression,
                        evaluations,
                    )
                    return PrimeResult(
                        prime=prime,
                        expression=expression,
                        found=True,
                        evaluations=evaluations,
                    )

    logger.debug("Exhausted %d evaluations without reaching %d", evaluations, prime)
    return PrimeResult(prime=prime, evaluations=evaluations)


def find_combination_to_prime(
    dice: Sequence[int],
    prime: int,
    budget: SearchBudget | None = None,
) -> tuple[str, bool]:
    """
    Finds a combination of the dice producing the prime.

    Args:
        dice (Sequence[int]): The dice multiset.
        prime (int): The target prime.
        budget (SearchBudget | None): Optional limits on the search.

    Returns:
        tuple[str, bool]: The expression ("" if none) and whether it was found.

    """
    result = search_prime(dice, prime, budget)
    return result.expression, result.found
