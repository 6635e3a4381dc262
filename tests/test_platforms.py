"""Tests for the platform catalog endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from app.services.security import Identity, create_access_token


def _platform(name: str, commission: str = "", niches: list[str] | None = None, steps=None) -> dict:
    return {
        "name": name,
        "description": f"{name} affiliate program",
        "niches": niches or [],
        "commissionRate": commission,
        "apiUrl": f"https://api.{name.lower().replace(' ', '')}.example",
        "joinSteps": steps or [],
    }


async def _add(client: AsyncClient, token: str, payload: dict) -> str:
    response = await client.post(
        "/platform", json=payload, headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


@pytest.mark.asyncio
async def test_create_platform_requires_token(client: AsyncClient, platform_store):
    response = await client.post("/platform", json=_platform("Impact"))
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "No token, authorization denied"}
    assert platform_store.platforms == {}


@pytest.mark.asyncio
async def test_create_platform_rejects_non_bearer_scheme(client: AsyncClient, platform_store):
    response = await client.post(
        "/platform", json=_platform("Impact"), headers={"Authorization": "Basic abc"}
    )
    assert response.status_code == 401
    assert platform_store.platforms == {}


@pytest.mark.asyncio
async def test_create_platform_rejects_invalid_token(client: AsyncClient, platform_store):
    response = await client.post(
        "/platform",
        json=_platform("Impact"),
        headers={"Authorization": "Bearer not.a.token"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Token is not valid"}
    assert platform_store.platforms == {}


@pytest.mark.asyncio
async def test_create_platform_rejects_expired_token(client: AsyncClient, platform_store):
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    token = create_access_token(Identity(id="u1", role="user"), now=two_hours_ago)

    response = await client.post(
        "/platform", json=_platform("Impact"), headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 400
    assert platform_store.platforms == {}


@pytest.mark.asyncio
async def test_auth_is_checked_before_body_validation(client: AsyncClient):
    response = await client.post("/platform", json={"name": ""})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_platform(client: AsyncClient, platform_store, register_and_login):
    token = await register_and_login()
    payload = _platform("Impact", "12%", ["SaaS", "Travel"], ["Apply", "Wait for approval"])

    response = await client.post(
        "/platform", json=payload, headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Platform added successfully"

    stored = platform_store.platforms[body["id"]]
    assert stored.name == "Impact"
    assert stored.niches == ["SaaS", "Travel"]
    assert stored.commission_rate == "12%"
    assert stored.join_steps == ["Apply", "Wait for approval"]


@pytest.mark.asyncio
async def test_create_platform_accepts_numeric_commission(client, platform_store, register_and_login):
    token = await register_and_login()
    platform_id = await _add(client, token, {"name": "Rakuten", "commissionRate": 8.5})
    assert platform_store.platforms[platform_id].commission_rate == "8.5"


@pytest.mark.asyncio
async def test_create_platform_allows_duplicates(client, platform_store, register_and_login):
    token = await register_and_login()
    first = await _add(client, token, _platform("Impact"))
    second = await _add(client, token, _platform("Impact"))
    assert first != second
    assert len(platform_store.platforms) == 2


@pytest.mark.asyncio
async def test_create_platform_requires_name(client, platform_store, register_and_login):
    token = await register_and_login()
    response = await client.post(
        "/platform", json={"name": "  "}, headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "name", "message": "Name is required"}]
    assert platform_store.platforms == {}


@pytest.mark.asyncio
async def test_list_platforms_returns_everything_in_catalog_order(client, register_and_login):
    token = await register_and_login()
    for name in ("Impact", "ClickBank", "Awin"):
        await _add(client, token, _platform(name))

    response = await client.get("/platforms")
    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data] == ["Impact", "ClickBank", "Awin"]
    assert set(data[0]) == {
        "id",
        "name",
        "description",
        "niches",
        "commissionRate",
        "apiUrl",
        "joinSteps",
        "createdAt",
    }


@pytest.mark.asyncio
async def test_search_matches_name_or_niche_case_insensitively(client, register_and_login):
    token = await register_and_login()
    await _add(client, token, _platform("Impact", niches=["SaaS"]))
    await _add(client, token, _platform("ClickBank", niches=["Health", "Fitness"]))
    await _add(client, token, _platform("FitnessPro", niches=["Sports"]))

    response = await client.get("/platforms", params={"search": "FITNESS"})
    assert [p["name"] for p in response.json()] == ["ClickBank", "FitnessPro"]

    response = await client.get("/platforms", params={"search": "saas"})
    assert [p["name"] for p in response.json()] == ["Impact"]

    response = await client.get("/platforms", params={"search": "nothing-matches"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_users_do_not_leak_into_platform_search(client: AsyncClient):
    response = await client.post(
        "/register", json={"name": "A", "email": "a@x.com", "password": "secret1"}
    )
    assert response.status_code == 201
    response = await client.post("/login", json={"email": "a@x.com", "password": "secret1"})
    assert response.status_code == 200
    assert response.json()["token"]

    response = await client.get("/platforms", params={"search": "a"})
    assert response.status_code == 200
    assert all(p["name"] != "A" for p in response.json())


@pytest.mark.asyncio
async def test_recommendations_capped_and_sorted_by_numeric_commission(client, register_and_login):
    token = await register_and_login()
    rates = ["9%", "100%", "25%", "n/a", "7.5", "50%", "12%"]
    for i, rate in enumerate(rates):
        await _add(client, token, _platform(f"P{i}", rate, ["general"]))

    response = await client.get("/recommendations")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 5
    assert [p["commissionRate"] for p in data] == ["100%", "50%", "25%", "12%", "9%"]


@pytest.mark.asyncio
async def test_recommendations_filter_by_niche(client, register_and_login):
    token = await register_and_login()
    await _add(client, token, _platform("Low", "5%", ["Travel"]))
    await _add(client, token, _platform("High", "40%", ["Finance"]))
    await _add(client, token, _platform("Mid", "20%", ["travel", "hotels"]))

    response = await client.get("/recommendations", params={"niche": "TRAVEL"})
    assert [p["name"] for p in response.json()] == ["Mid", "Low"]

    response = await client.get("/recommendations", params={"niche": "crypto"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_join_steps_returns_stored_order(client, register_and_login):
    token = await register_and_login()
    steps = ["Create account", "Verify email", "Add website", "Get approved"]
    platform_id = await _add(client, token, _platform("Impact", steps=steps))

    response = await client.get(f"/platform/{platform_id}/join-steps")
    assert response.status_code == 200
    assert response.json() == steps


@pytest.mark.asyncio
async def test_join_steps_empty_list(client, register_and_login):
    token = await register_and_login()
    platform_id = await _add(client, token, {"name": "Bare"})

    response = await client.get(f"/platform/{platform_id}/join-steps")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_join_steps_unknown_platform(client: AsyncClient):
    response = await client.get("/platform/does-not-exist/join-steps")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Platform not found"}
