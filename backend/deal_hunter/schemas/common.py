"""Common Pydantic schemas used across the API."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Error detail for error responses."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Standard API error response."""

    status: str = "error"
    error: ErrorDetail
