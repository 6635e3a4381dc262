"""Schemas for registration and login (/register, /login)."""

from typing import Any

from pydantic import BaseModel, EmailStr, field_validator

from app.schemas.common import MessageResponse

MIN_PASSWORD_LENGTH = 6


def _strip(v: Any) -> Any:
    return v.strip() if isinstance(v, str) else v


class RegisterRequest(BaseModel):
    """Request body for POST /register."""

    name: str
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def _strip_email(cls, v: Any) -> Any:
        return _strip(v)

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("password")
    @classmethod
    def _password_length(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters"
            )
        return v


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def _strip_email(cls, v: Any) -> Any:
        return _strip(v)

    @field_validator("password")
    @classmethod
    def _password_present(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class RegisterResponse(MessageResponse):
    pass


class TokenResponse(BaseModel):
    """Response payload for POST /login."""

    success: bool = True
    token: str
