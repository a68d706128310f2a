"""What every service call returns.

Expected failures (unknown post, taken username) come back as
``ServiceResult(ok=False, error=...)``; database faults are raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_FROZEN = ConfigDict(frozen=True)


class ServiceError(BaseModel):
    model_config = _FROZEN

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    ``op`` names the operation (``"update_post"``). ``data`` is its payload
    when ``ok``; ``error`` explains why not otherwise. ``warnings`` never
    change ``ok``, and ``meta`` carries telemetry when tracing is on.
    """

    model_config = _FROZEN

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail)
        return cls(ok=False, op=op, error=error)
