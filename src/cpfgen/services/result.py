"""Return type of every service call.

Commands never inspect exceptions from the service layer; they hand the
result to :meth:`AppContext.emit`, which picks stdout or stderr and the
exit code from ``ok``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation; ``error`` is set exactly when ``ok`` is False."""

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, meta: dict[str, Any] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, meta=meta)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
