"""Boolean aggregation and range predicates.

``all_of``/``one_of``/``none_of`` aggregate a fixed argument list, not a
runtime sequence, and short-circuit on the first deciding argument.

The half-open ``[a, b)`` form of :func:`range_filter` is the only one
provided. An older open-interval ``(a, b)`` variant existed alongside it;
code relying on that should test ``a < x < b`` directly.
"""

from __future__ import annotations

from collections.abc import Callable

from seqtools.domain.types import Ord


def all_of(*args: object) -> bool:
    """True iff every argument is truthy (``True`` for no arguments)."""
    return all(args)


def one_of(*args: object) -> bool:
    """True iff at least one argument is truthy (``False`` for no arguments)."""
    return any(args)


def none_of(*args: object) -> bool:
    """True iff every argument is falsy (``True`` for no arguments)."""
    return not any(args)


def range_filter(a: Ord, b: Ord) -> Callable[[Ord], bool]:
    """Return a predicate testing membership in the half-open interval ``[a, b)``.

    Only ``<`` and ``==`` are used, so any totally ordered type works.

    Examples:
        >>> in_range = range_filter(1, 4)
        >>> [x for x in [0, 1, 2, 3, 4] if in_range(x)]
        [1, 2, 3]
    """

    def in_range(c: Ord) -> bool:
        return (a == c or a < c) and c < b

    in_range.__qualname__ = f"range_filter[{a!r}, {b!r})"
    return in_range
