"""ServiceResult and ServiceError, the return contract of every service call.

Domain exceptions stop at the service boundary and become a ServiceError
whose ``code`` names the failure kind (``OUT_OF_RANGE``, ``PARSE_ERROR`` ...).
Drivers never see an exception from a board command.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from toyrobot.domain.errors import RobotError


class ServiceError(BaseModel):
    """Why a command failed: stable code, readable message, input detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: RobotError, **detail: Any) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one board command or of a whole script.

    Attributes:
        ok: False when the command was rejected.
        op: Operation name (``"place_robot"``, ``"report"``, ``"ignore"``...).
        data: Payload on success, e.g. ``{"report": "2,1,NORTH"}``.
        warnings: Non-fatal notes, e.g. a MOVE before any PLACE_ROBOT.
        error: Set when ``ok`` is False.
        meta: The source line and, for scripts, its line number.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, error: ServiceError, **kwargs: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=error, **kwargs)
