"""ServiceResult and ServiceError: the contract between services and front ends.

INVARIANT: Every SequenceService method returns a ServiceResult; library
errors are converted to ``ok=False`` results, never re-raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is one of ``EMPTY_SEQUENCE``, ``INVALID_ARGUMENT``,
    ``UNKNOWN_OPERATOR``, ``INVOCATION_ERROR``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Library operation evaluated (e.g. ``"foldl"``).
        data: ``result`` plus operation-specific fields on success.
        warnings: Non-fatal notes (e.g. zip truncation).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry when verbose).
    """

    # inf/nan are valid float results; emit them as Infinity/NaN, not null.
    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
