from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope returned by every endpoint."""
    success: bool = True
    message: str
    data: T | None = None


class ErrorResponse(BaseModel):
    """Failure envelope produced by the exception handlers."""
    success: bool = False
    message: str
    error_details: Any = Field(None, serialization_alias="errorDetails")
