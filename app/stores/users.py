"""Credential store: persistence for User records."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.errors import PersistenceError
from app.models import User
from app.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


class UserStore:
    """Repository for users backed by PostgreSQL."""

    async def add(self, user: User) -> User:
        """Insert a new user.

        Raises:
            PersistenceError: On any write failure, including a duplicate email.
        """
        try:
            async with get_session() as session:
                session.add(user)
                await session.flush()
        except IntegrityError as e:
            logger.warning(f"User insert rejected for {user.email}: {e.orig}")
            raise PersistenceError() from e
        except SQLAlchemyError as e:
            raise PersistenceError() from e
        return user

    async def get_by_email(self, email: str) -> User | None:
        try:
            async with get_session() as session:
                result = await session.execute(select(User).where(User.email == email))
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError() from e
