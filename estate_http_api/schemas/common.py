# estate_http_api/schemas/common.py

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - camelCase on the wire, snake_case accepted on input as well
    - forbid extra fields so clients get early feedback on typos
    - read straight from ORM objects
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="forbid",
    )


class ErrorResponse(APIModel):
    """
    Body returned by the exception handlers.
    """

    status: str = "error"
    code: int
    message: str
    details: Optional[Any] = None


class HealthResponse(APIModel):
    status: str = "ok"
    app: str
    version: str
    env: str


class OperationResponse(APIModel):
    """
    Outcome of a state-changing call (revoke, deactivate, delete).
    """

    success: bool
    message: str = Field(default="")


__all__ = ["APIModel", "ErrorResponse", "HealthResponse", "OperationResponse"]
