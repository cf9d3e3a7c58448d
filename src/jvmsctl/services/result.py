"""ServiceResult and ServiceError — the contract between services and CLI.

Management services return a ServiceResult instead of raising, so the CLI
can render success and failure uniformly (human, quiet, or ``--json``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from jvmsctl.domain.errors import JvmsError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: JvmsError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=dict(exc.detail))


class ServiceResult(BaseModel):
    """Return type for every management operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"toolchain_add"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
