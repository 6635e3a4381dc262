"""Pydantic schemas for API request/response validation."""

from app.schemas.auth import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from app.schemas.common import ErrorResponse, FieldError, MessageResponse
from app.schemas.platform import Platform, PlatformCreate, PlatformCreated

__all__ = [
    "ErrorResponse",
    "FieldError",
    "MessageResponse",
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "TokenResponse",
    "Platform",
    "PlatformCreate",
    "PlatformCreated",
]
