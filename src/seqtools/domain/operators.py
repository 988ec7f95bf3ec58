"""Registry of named callables.

Callers that cannot pass Python callables (the CLI) refer to transforms,
binary operators, predicates and expanders by name. Lookups go through
:func:`resolve` or the ``get_*`` shortcuts, which raise
:class:`UnknownOperatorError` listing the valid names.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

from seqtools.domain.errors import UnknownOperatorError
from seqtools.domain.types import OperatorKind

TRANSFORMS: dict[str, Callable[[Any], Any]] = {
    "abs": abs,
    "neg": operator.neg,
    "inc": lambda x: x + 1,
    "dec": lambda x: x - 1,
    "double": lambda x: x * 2,
    "square": lambda x: x * x,
    "half": lambda x: x / 2,
    "str": str,
    "len": len,
}

BINARY_OPS: dict[str, Callable[[Any, Any], Any]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": operator.truediv,
    "pow": operator.pow,
    "max": max,
    "min": min,
    "concat": lambda a, b: f"{a}{b}",
}

PREDICATES: dict[str, Callable[[Any], bool]] = {
    "even": lambda x: x % 2 == 0,
    "odd": lambda x: x % 2 != 0,
    "positive": lambda x: x > 0,
    "negative": lambda x: x < 0,
    "nonzero": lambda x: x != 0,
    "truthy": bool,
}

EXPANDERS: dict[str, Callable[[Any], Iterable[Any]]] = {
    "dup": lambda x: [x, x],
    "range3": lambda x: [x, x + 1, x + 2],
    "chars": lambda x: list(str(x)),
}

_REGISTRY: dict[OperatorKind, dict[str, Callable[..., Any]]] = {
    OperatorKind.TRANSFORM: TRANSFORMS,
    OperatorKind.BINARY: BINARY_OPS,
    OperatorKind.PREDICATE: PREDICATES,
    OperatorKind.EXPANDER: EXPANDERS,
}


def names(kind: OperatorKind) -> list[str]:
    """Sorted registered names for *kind* (used for CLI help and errors)."""
    return sorted(_REGISTRY[kind])


def resolve(kind: OperatorKind, name: str) -> Callable[..., Any]:
    """Look up the callable registered as *name* under *kind*."""
    table = _REGISTRY[kind]
    try:
        return table[name]
    except KeyError:
        raise UnknownOperatorError(kind.value, name, table) from None


def get_transform(name: str) -> Callable[[Any], Any]:
    return resolve(OperatorKind.TRANSFORM, name)


def get_binary(name: str) -> Callable[[Any, Any], Any]:
    return resolve(OperatorKind.BINARY, name)


def get_predicate(name: str) -> Callable[[Any], bool]:
    return resolve(OperatorKind.PREDICATE, name)


def get_expander(name: str) -> Callable[[Any], Iterable[Any]]:
    return resolve(OperatorKind.EXPANDER, name)
