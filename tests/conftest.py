"""Shared fixtures: in-memory stores and an HTTP client over the ASGI app."""

import os

# Settings are cached on first use; configure before the app is imported.
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("RATE_LIMIT_BACKEND", "memory")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.dependencies import get_platform_store, get_user_store  # noqa: E402
from app.errors import PersistenceError  # noqa: E402
from app.main import app, use_limiter  # noqa: E402
from app.models import Platform, User  # noqa: E402
from app.services.rate_limit import build_limiter  # noqa: E402
from app.settings import get_settings  # noqa: E402
from app.stores.postgres import new_id  # noqa: E402


class InMemoryUserStore:
    """UserStore stand-in with the same uniqueness contract on email."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    async def add(self, user: User) -> User:
        if any(u.email == user.email for u in self.users.values()):
            raise PersistenceError()
        user.id = user.id or new_id()
        user.created_at = user.created_at or datetime.now(timezone.utc)
        self.users[user.id] = user
        return user

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)


class InMemoryPlatformStore:
    """PlatformStore stand-in; filters mirror the SQL ILIKE semantics."""

    def __init__(self) -> None:
        self.platforms: dict[str, Platform] = {}
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    async def add(self, platform: Platform) -> Platform:
        platform.id = platform.id or new_id()
        # Strictly increasing timestamps keep "oldest first" deterministic
        self._clock += timedelta(seconds=1)
        platform.created_at = platform.created_at or self._clock
        platform.niches = platform.niches or []
        platform.join_steps = platform.join_steps or []
        platform.description = platform.description or ""
        platform.commission_rate = platform.commission_rate or ""
        platform.api_url = platform.api_url or ""
        self.platforms[platform.id] = platform
        return platform

    async def get(self, platform_id: str) -> Platform | None:
        return self.platforms.get(platform_id)

    async def search(self, text: str | None = None) -> list[Platform]:
        if not text:
            return list(self.platforms.values())
        needle = text.lower()
        return [
            p
            for p in self.platforms.values()
            if needle in p.name.lower() or any(needle in n.lower() for n in p.niches)
        ]

    async def by_niche(self, niche: str | None = None) -> list[Platform]:
        if not niche:
            return list(self.platforms.values())
        needle = niche.lower()
        return [p for p in self.platforms.values() if any(needle in n.lower() for n in p.niches)]


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def platform_store() -> InMemoryPlatformStore:
    return InMemoryPlatformStore()


@pytest.fixture
async def client(user_store: InMemoryUserStore, platform_store: InMemoryPlatformStore):
    """Test client wired to in-memory stores and a fresh rate limiter."""
    app.dependency_overrides[get_user_store] = lambda: user_store
    app.dependency_overrides[get_platform_store] = lambda: platform_store
    use_limiter(app, build_limiter(get_settings()))

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client: AsyncClient):
    """Async helper: register a user, log in, return the bearer token."""

    async def _register_and_login(
        *,
        name: str = "Alice",
        email: str = "alice@example.com",
        password: str = "secret1",
    ) -> str:
        response = await client.post(
            "/register", json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        response = await client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _register_and_login
