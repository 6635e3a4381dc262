"""Catalog store: persistence and filtering for Platform records.

Filtering is pushed into SQL (case-insensitive substring match); ranking
stays in app.services.catalog.
"""

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from app.errors import PersistenceError
from app.models import Platform
from app.stores.postgres import get_session

# Joins niche arrays into one searchable string; never typed by clients
NICHE_SEPARATOR = "\x1f"


def like_pattern(text: str) -> str:
    """Build an ILIKE substring pattern, escaping LIKE wildcards in `text`."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _niches_text():
    return func.array_to_string(Platform.niches, NICHE_SEPARATOR)


class PlatformStore:
    """Repository for platforms backed by PostgreSQL."""

    async def add(self, platform: Platform) -> Platform:
        try:
            async with get_session() as session:
                session.add(platform)
                await session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError() from e
        return platform

    async def get(self, platform_id: str) -> Platform | None:
        try:
            async with get_session() as session:
                return await session.get(Platform, platform_id)
        except SQLAlchemyError as e:
            raise PersistenceError() from e

    async def search(self, text: str | None = None) -> list[Platform]:
        """All platforms whose name or any niche contains `text` (any case)."""
        query = select(Platform)
        if text:
            pattern = like_pattern(text)
            query = query.where(
                or_(
                    Platform.name.ilike(pattern, escape="\\"),
                    _niches_text().ilike(pattern, escape="\\"),
                )
            )
        return await self._all(query)

    async def by_niche(self, niche: str | None = None) -> list[Platform]:
        """All platforms with a niche containing `niche` (any case)."""
        query = select(Platform)
        if niche:
            query = query.where(_niches_text().ilike(like_pattern(niche), escape="\\"))
        return await self._all(query)

    async def _all(self, query: Select) -> list[Platform]:
        query = query.order_by(Platform.created_at.asc(), Platform.id.asc())
        try:
            async with get_session() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise PersistenceError() from e
