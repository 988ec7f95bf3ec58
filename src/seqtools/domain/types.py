"""Type variables and capability protocols shared by the library."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


class SupportsLessThan(Protocol):
    """Elements with a ``<`` relation (the total order used by sort/range_filter)."""

    def __lt__(self, other: Any, /) -> bool: ...


Ord = TypeVar("Ord", bound=SupportsLessThan)


class OperatorKind(StrEnum):
    """Categories of named callables in the operator registry."""

    TRANSFORM = "transform"
    BINARY = "binary"
    PREDICATE = "predicate"
    EXPANDER = "expander"
