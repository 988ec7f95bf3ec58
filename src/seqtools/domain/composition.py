"""Left-to-right function composition."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from seqtools.domain.errors import InvalidArgument


def pipeline(*stages: Callable[..., Any]) -> Callable[..., Any]:
    """Compose callables left to right.

    ``pipeline(f, g, h)(x)`` is ``h(g(f(x)))``. The first stage receives
    every call argument; each later stage receives the previous stage's
    return value. ``pipeline(f)`` returns *f* itself.

    Examples:
        >>> pipeline(lambda x: x + 1, lambda x: x * 10)(2)
        30
        >>> pipeline(max, str)(3, 7)
        '7'

    Raises:
        InvalidArgument: No stages were given, or a stage is not callable.
    """
    if not stages:
        raise InvalidArgument("pipeline requires at least one function")
    for index, stage in enumerate(stages):
        if not callable(stage):
            raise InvalidArgument(f"pipeline stage {index} is not callable: {stage!r}")

    first, *rest = stages
    if not rest:
        return first

    def composed(*args: Any, **kwargs: Any) -> Any:
        value = first(*args, **kwargs)
        for stage in rest:
            value = stage(value)
        return value

    composed.__qualname__ = "pipeline"
    composed.__doc__ = " | ".join(getattr(s, "__name__", repr(s)) for s in stages)
    return composed
