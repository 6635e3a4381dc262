"""Platform catalog endpoints.

POST /platform                    - add a platform (bearer token required)
GET  /platforms?search=           - list, optionally filtered by name/niche
GET  /recommendations?niche=      - top 5 by commission rate
GET  /platform/{id}/join-steps    - ordered steps to join a platform
"""

from fastapi import APIRouter, Depends, Path, Query, status

from app.auth import get_current_identity
from app.dependencies import get_platform_store
from app.schemas import ErrorResponse, Platform, PlatformCreate, PlatformCreated
from app.services.catalog import (
    create_platform,
    get_join_steps,
    recommend_platforms,
    search_platforms,
)
from app.services.security import Identity
from app.stores.platforms import PlatformStore

router = APIRouter()


@router.post(
    "/platform",
    response_model=PlatformCreated,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse, "description": "Missing bearer token"}},
)
async def add_platform(
    body: PlatformCreate,
    identity: Identity = Depends(get_current_identity),
    store: PlatformStore = Depends(get_platform_store),
) -> PlatformCreated:
    """Add a platform to the catalog."""
    platform = await create_platform(store, body, added_by=identity.id)
    return PlatformCreated(message="Platform added successfully", id=platform.id)


@router.get("/platforms", response_model=list[Platform])
async def list_platforms(
    search: str | None = Query(
        default=None,
        max_length=200,
        description="Case-insensitive substring matched against name or niches",
    ),
    store: PlatformStore = Depends(get_platform_store),
) -> list[Platform]:
    platforms = await search_platforms(store, search)
    return [Platform.model_validate(p) for p in platforms]


@router.get("/recommendations", response_model=list[Platform])
async def recommendations(
    niche: str | None = Query(
        default=None,
        max_length=200,
        description="Only platforms with a niche containing this text",
    ),
    store: PlatformStore = Depends(get_platform_store),
) -> list[Platform]:
    """Up to 5 platforms, highest commission rate first."""
    platforms = await recommend_platforms(store, niche)
    return [Platform.model_validate(p) for p in platforms]


@router.get(
    "/platform/{platform_id}/join-steps",
    response_model=list[str],
    responses={404: {"model": ErrorResponse, "description": "Platform not found"}},
)
async def join_steps(
    platform_id: str = Path(description="Platform ID"),
    store: PlatformStore = Depends(get_platform_store),
) -> list[str]:
    return await get_join_steps(store, platform_id)
