"""
Enumeration of the Sacred Geometry search space.

Provides the three generators the search driver nests: non-empty subsets
of the dice, every ordering of a subset, and every operator sequence of a
given length.
"""

from collections.abc import Iterator, Sequence
from itertools import product

from sacred_geometry.core.constants import OPERATOR_SYMBOLS


def subsets(values: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """
    Yields every non-empty subset of the values, selected by index.

    Subsets are produced in increasing order of a binary mask over the
    indices, from 1 to 2^N - 1, where bit j set means value j is included.
    Values keep their original order inside each subset, and equal values
    at different indices are distinct items.

    Args:
        values (Sequence[int]): The indexed values to choose from.

    Yields:
        tuple[int, ...]: The selected values in original index order.

    """
    count = len(values)
    for mask in range(1, 1 << count):
        yield tuple(values[j] for j in range(count) if mask & (1 << j))


def permutations(values: Sequence[int]) -> list[tuple[int, ...]]:
    """
    Returns every ordering of the values, using Heap's algorithm.

    Orderings that only swap equal values are still returned separately,
    so the result always holds exactly len(values)! entries.

    Args:
        values (Sequence[int]): The values to reorder.

    Returns:
        list[tuple[int, ...]]: All orderings of the values.

    """
    if not values:
        return []
    arr = list(values)
    result: list[tuple[int, ...]] = []

    def _heap(n: int) -> None:
        if n == 1:
            result.append(tuple(arr))
            return
        for i in range(n):
            _heap(n - 1)
            if n % 2 == 1:
                arr[0], arr[n - 1] = arr[n - 1], arr[0]
            else:
                arr[i], arr[n - 1] = arr[n - 1], arr[i]

    _heap(len(arr))
    return result


def operator_sequences(length: int) -> Iterator[tuple[str, ...]]:
    """
    Returns an iterator over every operator sequence of the given length.

    Sequences are lexicographic over the fixed operator order +, -, *, /.
    A length of zero gives exactly one empty sequence.

    Args:
        length (int): The number of operators in each sequence.

    Returns:
        Iterator[tuple[str, ...]]: The operator symbols, one tuple per
        sequence.

    Raises:
        ValueError: If the length is negative.

    """
    if length < 0:
        raise ValueError(f"Operator sequence length must be >= 0, got {length}")
    return product(OPERATOR_SYMBOLS, repeat=length)
