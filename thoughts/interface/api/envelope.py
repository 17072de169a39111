"""JSON response envelopes.

Every response body is either
    {"status": "success", "data": {...}}
or
    {"status": "fail" | "error", "message": "..."}
with "fail" for client errors (4xx) and "error" for server errors (5xx).
"""

from typing import Generic, Literal, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Success envelope."""

    status: Literal["success"] = "success"
    data: T


class ListSuccessResponse(BaseModel, Generic[T]):
    """Success envelope for collections, with the item count."""

    status: Literal["success"] = "success"
    results: int
    data: T


class ErrorResponse(BaseModel):
    """Fail/error envelope."""

    status: Literal["fail", "error"]
    message: str


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a fail (4xx) or error (5xx) envelope response."""
    body = ErrorResponse(
        status="error" if status_code >= 500 else "fail",
        message=message,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())
