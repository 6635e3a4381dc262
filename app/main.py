"""FastAPI application entry point.

Affiliate Hub API - accounts and affiliate platform catalog.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware

from app.errors import register_exception_handlers
from app.routes import api_router
from app.services.rate_limit import build_limiter
from app.settings import get_settings
from app.stores.postgres import init_db, close_db, ping_db

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup failures are logged; the API still comes up and reports
    # persistence errors per request.
    try:
        await init_db()
        await ping_db()
        logger.info("Postgres connected")
    except Exception:
        logger.exception("Postgres init failed")

    yield

    # Shutdown
    await close_db()


async def health_check() -> dict[str, bool]:
    """Health check endpoint."""
    return {"ok": True}


def use_limiter(app: FastAPI, limiter: Limiter) -> Limiter:
    """Install `limiter` as the app's rate limiter; /health is never counted."""
    limiter.exempt(health_check)
    app.state.limiter = limiter
    return limiter


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Accounts and affiliate platform catalog API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Rate limiting: SlowAPIMiddleware reads app.state.limiter per request
    use_limiter(app, build_limiter(settings))
    app.add_middleware(SlowAPIMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Uniform {"success": false, "message": ...} error envelope
    register_exception_handlers(app)

    app.add_api_route("/health", health_check, methods=["GET"], tags=["health"])

    # Include API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
