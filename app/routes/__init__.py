"""API routes."""

from typing import Any

from fastapi import APIRouter

from app.routes import auth, platforms
from app.schemas import ErrorResponse

# Error envelope documented on every API route
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation failed or bad request"},
    429: {"model": ErrorResponse, "description": "Too many requests"},
    500: {"model": ErrorResponse, "description": "Server error"},
}

api_router = APIRouter(responses=ERROR_RESPONSES)

# Accounts (register/login)
api_router.include_router(auth.router, tags=["auth"])

# Platform catalog
api_router.include_router(platforms.router, tags=["platforms"])
