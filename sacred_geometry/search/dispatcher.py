"""
Concurrent dispatcher for a set of target primes.

Runs one prime search per target in its own worker process, waits for all
of them, and aggregates the results in ascending prime order.
"""

from collections.abc import Sequence
from concurrent.futures import (
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)

from catchery import log_warning

from sacred_geometry.core.logging import format_context, get_logger
from sacred_geometry.search.driver import search_prime
from sacred_geometry.search.models import BatchResult, PrimeResult, SearchBudget

logger = get_logger(__name__)


def search_primes(
    dice: Sequence[int],
    primes: Sequence[int],
    budget: SearchBudget | None = None,
    *,
    processes: bool = True,
) -> BatchResult:
    """
    Searches every target prime concurrently against the same dice.

    Workers only read the dice, which are copied into a tuple before any
    worker starts. The pool holds one worker per prime, so no search waits
    for another to finish.

    Args:
        dice (Sequence[int]): The dice multiset shared by every worker.
        primes (Sequence[int]): The target primes, usually two or three.
        budget (SearchBudget | None): Optional limits applied to each search.
        processes (bool):
            Run each search in its own process so the searches execute in
            parallel. When False, threads of this interpreter are used.

    Returns:
        BatchResult: One result per prime, sorted by prime ascending.

    Raises:
        Exception: Any exception raised inside a worker, once all workers
            have finished.

    """
    shared_dice = tuple(dice)
    if not primes:
        log_warning(
            "No target primes given, nothing to search",
            {"dice": list(shared_dice)},
        )
        return BatchResult(dice=list(shared_dice))

    executor_class: type[Executor] = (
        ProcessPoolExecutor if processes else ThreadPoolExecutor
    )
    results: list[PrimeResult] = []
    errors: list[BaseException] = []
    with executor_class(max_workers=len(primes)) as executor:
        futures = {
            executor.submit(search_prime, shared_dice, prime, budget): prime
            for prime in primes
        }
        for future in as_completed(futures):
            prime = futures[future]
            try:
                results.append(future.result())
            except Exception as e:  # re-raised once every worker is done
                logger.error(
                    format_context(
                        "Search worker failed",
                        {"prime": prime, "error": repr(e)},
                    )
                )
                errors.append(e)
    if errors:
        raise errors[0]

    results.sort(key=lambda result: result.prime)
    batch = BatchResult(dice=list(shared_dice), results=results)
    logger.debug(
        format_context(
            "Finished searching primes",
            {
                "dice": list(shared_dice),
                "primes": [r.prime for r in results],
                "success": batch.success,
            },
        )
    )
    return batch
