"""Higher-order operations over finite, in-memory sequences.

Every function here is pure: inputs are only read, and each call returns a
freshly built ``list`` owned by the caller. Exceptions raised by a
caller-supplied callable propagate unmodified.

Several names (``map``, ``filter``, ``zip``, ``sorted``, ``reversed``) shadow
builtins; the builtins themselves are reached through the
``builtins`` module inside this file.

Examples:
    >>> foldl(lambda acc, x: acc + x, [1, 2, 3])
    6
    >>> zip_with_indices(sorted([8, 4, 9, 1]))
    [(0, 1), (1, 4), (2, 8), (3, 9)]
"""

from __future__ import annotations

import builtins
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from seqtools.domain.errors import EmptySequenceError
from seqtools.domain.types import A, Ord, T, U

_MISSING: Any = object()


def map(f: Callable[[T], U], seq: Iterable[T]) -> list[U]:
    """Apply *f* to each element in order; output length equals input length."""
    return [f(x) for x in seq]


def filter(pred: Callable[[T], object], seq: Iterable[T]) -> list[T]:
    """Keep the elements for which *pred* is truthy, preserving order.

    Retained elements are the input's own objects (not copies); the input
    itself is left untouched.
    """
    return [x for x in seq if pred(x)]


def flat_map(f: Callable[[T], Iterable[U]], seq: Iterable[T]) -> list[U]:
    """Apply *f* to each element and concatenate the results in input order.

    Examples:
        >>> flat_map(lambda x: [x, x + 1, x + 2], [1, 2])
        [1, 2, 3, 2, 3, 4]
    """
    result: list[U] = []
    for x in seq:
        result.extend(f(x))
    return result


def foldl(f: Callable[[A, T], A], seq: Iterable[T], init: A = _MISSING) -> A:
    """Left-to-right reduction: ``f(f(f(init, x0), x1), x2)``.

    Without *init* the first element seeds the accumulator and the fold
    runs over the remainder.

    Raises:
        EmptySequenceError: *seq* is empty and no *init* was given.
    """
    it = iter(seq)
    accum = init
    if accum is _MISSING:
        try:
            accum = next(it)
        except StopIteration:
            raise EmptySequenceError("foldl of empty sequence with no initial value") from None
    for x in it:
        accum = f(accum, x)
    return accum


def foldr(f: Callable[[A, T], A], seq: Iterable[T], init: A = _MISSING) -> A:
    """Right-to-left reduction: ``f(f(f(init, xn), xn-1), ...)``.

    The accumulator is always the first argument of *f*, as in :func:`foldl`.
    Without *init* the last element seeds the accumulator.

    Raises:
        EmptySequenceError: *seq* is empty and no *init* was given.
    """
    items = seq if isinstance(seq, Sequence) else list(seq)
    if init is _MISSING and not items:
        raise EmptySequenceError("foldr of empty sequence with no initial value")
    return foldl(f, builtins.reversed(items), init)


def zip(*seqs: Iterable[Any]) -> list[tuple[Any, ...]]:
    """Pair elements positionally, truncating to the shortest input.

    Mismatched lengths are not an error. With no inputs the result is empty.
    """
    return list(builtins.zip(*seqs))


def zip_with_indices(seq: Iterable[T]) -> list[tuple[int, T]]:
    """Pair each element with its position: ``zip(range(len(seq)), seq)``."""
    return list(builtins.enumerate(seq))


def recursive_seq(init: T, f: Callable[[T], T], n: int) -> list[T]:
    """Build ``[init, f(init), f(f(init)), ...]`` of length *n*.

    ``n == 1`` yields ``[init]`` and any ``n <= 0`` yields ``[]``. *f* is
    called exactly ``max(n - 1, 0)`` times.

    Note: ``n == 0`` gives an empty list rather than ``[init]``, so the
    result length is always ``max(n, 0)``. Generators that always emit the
    seed first differ here.
    """
    if n <= 0:
        return []
    result = [init]
    for _ in range(n - 1):
        result.append(f(result[-1]))
    return result


def sorted(
    seq: Iterable[Ord],
    *,
    key: Callable[[Ord], Any] | None = None,
    reverse: bool = False,
) -> list[Ord]:
    """Return a new list in ascending order under the elements' ``<``."""
    return builtins.sorted(seq, key=key, reverse=reverse)


def reversed(seq: Sequence[T]) -> list[T]:
    """Return a new list with the elements of *seq* in reverse order."""
    return list(builtins.reversed(seq))
