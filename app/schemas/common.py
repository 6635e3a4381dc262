"""Common schemas used across the API."""

from pydantic import BaseModel


class FieldError(BaseModel):
    """A single violated input constraint."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "success": false, "message": str, "errors": [FieldError] | absent }
    """

    success: bool = False
    message: str
    errors: list[FieldError] | None = None


class MessageResponse(BaseModel):
    """Plain success acknowledgement."""

    success: bool = True
    message: str
