"""Catalog service: platform creation, search, recommendations, join steps.

Recommendation ranking:
1. Optional niche filter (case-insensitive substring on any niche)
2. Sort by commission rate DESC, compared numerically
3. Ties keep catalog order (oldest first)
4. Return <= 5 platforms

Commission rates are stored as free text ("8%", "30", "up to 50%"). The sort
key is the first number in the text; rates without a number rank last.
A comma followed by exactly three digits groups thousands ("$1,000" -> 1000);
any other comma is a decimal mark ("7,5 %" -> 7.5).
"""

import logging
import math
import re

from app.errors import NotFound
from app.models import Platform
from app.schemas import PlatformCreate
from app.stores.platforms import PlatformStore

logger = logging.getLogger("uvicorn.error")

RECOMMENDATION_LIMIT = 5

# Thousands-grouped first, so "1,000" is not read as 1.0
_NUMBER = re.compile(r"[-+]?(?:\d{1,3}(?:,\d{3})+(?!\d)(?:\.\d+)?|\d+(?:[.,]\d+)?)")
_GROUPED = re.compile(r"[-+]?\d{1,3}(?:,\d{3})+(?:\.\d+)?")


def commission_sort_key(commission_rate: str | None) -> float:
    """Numeric value of a commission rate string (-inf when there is none).

    Examples:
        "12.5%" -> 12.5
        "up to 50%" -> 50.0
        "$1,250 per sale" -> 1250.0
        "n/a" -> -inf
    """
    if not commission_rate:
        return -math.inf
    match = _NUMBER.search(commission_rate)
    if not match:
        return -math.inf
    number = match.group(0)
    if _GROUPED.fullmatch(number):
        return float(number.replace(",", ""))
    return float(number.replace(",", "."))


def rank_by_commission(platforms: list[Platform], limit: int = RECOMMENDATION_LIMIT) -> list[Platform]:
    """Highest commission first, stable for equal rates, at most `limit` entries."""
    ranked = sorted(platforms, key=lambda p: commission_sort_key(p.commission_rate), reverse=True)
    return ranked[:limit]


async def create_platform(
    store: PlatformStore,
    payload: PlatformCreate,
    added_by: str | None = None,
) -> Platform:
    """Persist a platform as submitted (no ownership or duplicate checks)."""
    platform = Platform(
        name=payload.name,
        description=payload.description,
        niches=list(payload.niches),
        commission_rate=payload.commission_rate,
        api_url=payload.api_url,
        join_steps=list(payload.join_steps),
    )
    platform = await store.add(platform)
    logger.info(f"Platform added: {platform.id} ({platform.name}) by {added_by or 'unknown'}")
    return platform


async def search_platforms(store: PlatformStore, search: str | None = None) -> list[Platform]:
    """All platforms whose name or niches contain `search`; everything when empty."""
    search = (search or "").strip()
    return await store.search(search or None)


async def recommend_platforms(
    store: PlatformStore,
    niche: str | None = None,
    limit: int = RECOMMENDATION_LIMIT,
) -> list[Platform]:
    """Top platforms by commission rate, optionally within a niche."""
    niche = (niche or "").strip()
    candidates = await store.by_niche(niche or None)
    return rank_by_commission(candidates, limit=min(limit, RECOMMENDATION_LIMIT))


async def get_join_steps(store: PlatformStore, platform_id: str) -> list[str]:
    """Ordered join steps of a platform.

    Raises:
        NotFound: No platform with that id.
    """
    platform = await store.get(platform_id)
    if platform is None:
        raise NotFound("Platform not found")
    return list(platform.join_steps or [])
