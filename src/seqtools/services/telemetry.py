"""Per-call timing for SequenceService, surfaced by ``--verbose``.

Telemetry is off unless :func:`enable_telemetry` was called for the current
context; a disabled ``@traced`` call costs one ContextVar lookup. When on,
each traced call's ServiceResult gains ``meta["telemetry"]``::

    {"name": "SequenceService.foldl", "duration_ms": 0.041, "ok": false,
     "code": "EMPTY_SEQUENCE"}
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, ParamSpec, TypeVar

import structlog

from seqtools.services.result import ServiceResult

log = structlog.get_logger("seqtools.telemetry")

_enabled: ContextVar[bool] = ContextVar("seqtools_telemetry", default=False)

_P = ParamSpec("_P")
_R = TypeVar("_R")


@dataclass(frozen=True)
class CallTiming:
    """Wall-clock duration and outcome of one service call."""

    name: str
    duration_ms: float
    ok: bool
    code: str | None = None

    @classmethod
    def of(cls, name: str, started: float, result: ServiceResult) -> CallTiming:
        return cls(
            name=name,
            duration_ms=(time.perf_counter() - started) * 1000,
            ok=result.ok,
            code=result.error.code if result.error else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.duration_ms, 3),
            "ok": self.ok,
        }
        if self.code is not None:
            data["code"] = self.code
        return data


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Attach a :class:`CallTiming` to the ServiceResult returned by *func*.

    Return values that are not ServiceResults pass through untouched, as do
    exceptions.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        started = time.perf_counter()
        result = func(*args, **kwargs)
        if not isinstance(result, ServiceResult):
            return result

        timing = CallTiming.of(func.__qualname__, started, result)
        log.debug("service.timed", op=result.op, **timing.to_dict())
        meta = {**(result.meta or {}), "telemetry": timing.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn on timing for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
