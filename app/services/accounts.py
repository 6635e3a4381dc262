"""Account service: registration and login.

Login never reveals whether an email is registered: an unknown email and a
wrong password produce the same InvalidCredentials error.
"""

import logging

from app.errors import InvalidCredentials
from app.models import User
from app.models.user import DEFAULT_ROLE
from app.services.security import Identity, create_access_token, hash_password, verify_password
from app.stores.users import UserStore

logger = logging.getLogger("uvicorn.error")


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def register_user(store: UserStore, *, name: str, email: str, password: str) -> User:
    """Hash the password and persist a new user with the default role.

    Raises:
        PersistenceError: If the store rejects the insert (e.g. duplicate email).
    """
    user = User(
        name=name.strip(),
        email=normalize_email(email),
        password_hash=hash_password(password),
        role=DEFAULT_ROLE,
    )
    user = await store.add(user)
    logger.info(f"Registered user {user.id}")
    return user


async def authenticate(store: UserStore, *, email: str, password: str) -> str:
    """Verify credentials and issue an access token.

    Returns:
        Signed token embedding the user's id and role.

    Raises:
        InvalidCredentials: Unknown email or wrong password.
    """
    user = await store.get_by_email(normalize_email(email))
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentials()

    return create_access_token(Identity(id=user.id, role=user.role))
