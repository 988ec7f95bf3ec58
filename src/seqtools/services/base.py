"""BaseService: error mapping shared by all seqtools services.

Services evaluate library operations inside :meth:`BaseService._run`,
which converts the library's exception taxonomy into ServiceError codes.
Named callables are resolved through :meth:`BaseService._named` so that a
failure inside one is reported as ``INVOCATION_ERROR`` with its name.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

from seqtools.domain.errors import (
    EmptySequenceError,
    InvalidArgument,
    InvocationError,
    UnknownOperatorError,
)
from seqtools.domain.operators import resolve
from seqtools.domain.types import OperatorKind
from seqtools.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases.
ERROR_CODES: tuple[tuple[type[Exception], str], ...] = (
    (UnknownOperatorError, "UNKNOWN_OPERATOR"),
    (EmptySequenceError, "EMPTY_SEQUENCE"),
    (InvalidArgument, "INVALID_ARGUMENT"),
    (InvocationError, "INVOCATION_ERROR"),
    (ZeroDivisionError, "INVALID_ARGUMENT"),
)


def error_code(exc: Exception) -> str | None:
    """Return the ServiceError code for *exc*, or None if it is not a mapped error."""
    for exc_type, code in ERROR_CODES:
        if isinstance(exc, exc_type):
            return code
    return None


class BaseService:
    """Foundation for services that evaluate library operations.

    Usage::

        class SequenceService(BaseService):
            def foldl(self, op: str, values: list[Any]) -> ServiceResult:
                def compute() -> dict[str, Any]:
                    fn = self._named(OperatorKind.BINARY, op)
                    return {"result": foldl(fn, values)}

                return self._run("foldl", compute)
    """

    def _named(self, kind: OperatorKind, name: str) -> Callable[..., Any]:
        """Resolve a named callable, wrapping its failures in InvocationError.

        Raises UnknownOperatorError immediately if *name* is not registered.
        """
        fn = resolve(kind, name)

        @functools.wraps(fn)
        def invoke(*args: Any) -> Any:
            try:
                return fn(*args)
            except Exception as exc:
                raise InvocationError(name, exc) from exc

        return invoke

    def _run(
        self,
        op: str,
        compute: Callable[[], dict[str, Any]],
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Evaluate *compute* and wrap its data (or its mapped error) in a ServiceResult.

        Exceptions outside the library taxonomy propagate.
        """
        try:
            data = compute()
        except Exception as exc:
            code = error_code(exc)
            if code is None:
                raise
            logger.debug("%s failed with %s: %s", op, code, exc)
            detail: dict[str, Any] = {"exception": type(exc).__name__}
            if isinstance(exc, InvocationError):
                detail["callable"] = exc.name
                detail["cause"] = type(exc.cause).__name__
            if isinstance(exc, UnknownOperatorError):
                detail["choices"] = exc.choices
            return ServiceResult.failure(op, code, str(exc), **detail)
        logger.debug("%s ok", op)
        return ServiceResult.success(op, data, warnings)
