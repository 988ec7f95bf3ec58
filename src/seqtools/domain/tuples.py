"""Fixed-arity tuple helpers: deconstruct and divmod."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from seqtools.domain.errors import InvalidArgument
from seqtools.domain.types import T


def deconstruct(seq: Sequence[T], n: int) -> tuple[T, ...]:
    """Return the first *n* elements of *seq* as a tuple.

    Pairs naturally with unpacking::

        first, second, third = deconstruct(values, 3)

    Raises:
        InvalidArgument: *n* is negative or *seq* has fewer than *n* elements.
    """
    if n < 0:
        raise InvalidArgument(f"deconstruct size must be non-negative, got {n}")
    if len(seq) < n:
        raise InvalidArgument(f"Sequence of length {len(seq)} is shorter than {n}")
    return tuple(seq[i] for i in range(n))


def divmod(x: Any, d: Any) -> tuple[Any, Any]:
    """Quotient and remainder of *x* / *d*, truncating toward zero.

    The remainder takes the sign of *x* and ``x == d * q + r`` always holds.
    This differs from the builtin ``divmod`` (which floors) only when the
    operands have opposite signs and the division is inexact.

    Examples:
        >>> divmod(7, 2)
        (3, 1)
        >>> divmod(-7, 2)
        (-3, -1)

    Raises:
        ZeroDivisionError: *d* is zero.
    """
    q = x // d
    r = x - d * q
    if r and (r < 0) != (x < 0):
        q += 1
        r -= d
    return q, r
