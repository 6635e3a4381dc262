"""Password hashing and access-token signing.

- Passwords: bcrypt with a per-hash random salt (cost from settings)
- Tokens: HS256 JWT carrying the user id (`sub`) and `role`, one-hour expiry
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging

import bcrypt
from jose import JWTError, jwt

from app.errors import InvalidToken
from app.settings import get_settings

logger = logging.getLogger("uvicorn.error")

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class Identity:
    """Caller identity decoded from a verified access token."""

    id: str
    role: str


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, *, rounds: int | None = None) -> str:
    """Salted one-way hash of `password`."""
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check `password` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password hash is malformed")
        return False


def create_access_token(identity: Identity, *, now: datetime | None = None) -> str:
    """Sign a token for `identity` that expires after the configured lifetime."""
    settings = get_settings()
    issued = now or datetime.now(timezone.utc)
    claims = {
        "sub": identity.id,
        "role": identity.role,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(seconds=settings.access_token_expire_seconds)).timestamp()),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Identity:
    """Verify signature and expiry, then return the embedded identity.

    Raises:
        InvalidToken: For any token that cannot be trusted.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise InvalidToken() from e

    user_id = payload.get("sub")
    role = payload.get("role")
    if not isinstance(user_id, str) or not user_id or not isinstance(role, str):
        logger.warning("JWT token missing 'sub' or 'role' claim")
        raise InvalidToken()

    return Identity(id=user_id, role=role)
