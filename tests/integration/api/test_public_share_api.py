"""
Integration tests for anonymous share resolution
"""

import asyncio
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.domain.base import utcnow
from src.domain.entities import ShareLink
from tests.utils.auth import API, auth_headers
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_resolve_public_share(client: AsyncClient, make_vehicle, test_data):
    """Test an active share exposes only the public vehicle fields"""
    owner_id = uuid4()
    vehicle = await make_vehicle(owner_id)
    share = (
        await client.post(f"{API}/shares/{vehicle.id}", headers=auth_headers(owner_id))
    ).json()["data"]

    response = await client.get(f"{API}/public/vehicle/{share['token']}")

    assert response.status_code == 200
    data = response.json()["data"]
    expected = exclude_keys(
        test_data.get_copy("vehicle"), {"vin", "current_mileage", "last_service_date"}
    )
    assert exclude_keys(data["vehicle"], {"id"}) == expected
    assert data["vehicle"]["id"] == str(vehicle.id)
    assert data["share"] == {
        "id": share["id"],
        "createdAt": share["createdAt"],
        "expiresAt": None,
    }
    assert "token" not in data["share"]
    assert "ownerId" not in data["share"]


@pytest.mark.asyncio
async def test_resolve_expired_share(client: AsyncClient, make_vehicle):
    """Scenario 2: a share created to expire in 1s is forbidden 2s later"""
    owner_id = uuid4()
    vehicle = await make_vehicle(owner_id)
    expires_at = datetime.now(UTC) + timedelta(seconds=1)
    share = (
        await client.post(
            f"{API}/shares/{vehicle.id}",
            json={"expiresAt": expires_at.isoformat()},
            headers=auth_headers(owner_id),
        )
    ).json()["data"]

    await asyncio.sleep(2)
    response = await client.get(f"{API}/public/vehicle/{share['token']}")

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "SHARE_EXPIRED"


@pytest.mark.asyncio
async def test_resolve_inactive_share(client: AsyncClient, make_vehicle):
    owner_id = uuid4()
    vehicle = await make_vehicle(owner_id)
    headers = auth_headers(owner_id)
    share = (await client.post(f"{API}/shares/{vehicle.id}", headers=headers)).json()["data"]
    await client.patch(f"{API}/shares/{share['id']}", json={"isActive": False}, headers=headers)

    response = await client.get(f"{API}/public/vehicle/{share['token']}")

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "SHARE_INACTIVE"


@pytest.mark.asyncio
async def test_resolve_never_issued_token(client: AsyncClient, make_vehicle):
    """Test unknown tokens are 404 whether or not vehicles exist"""
    vehicle = await make_vehicle(uuid4())

    for token in ("never-issued", str(vehicle.id), str(vehicle.id).replace("-", "")):
        response = await client.get(f"{API}/public/vehicle/{token}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "SHARE_NOT_FOUND"


@pytest.mark.asyncio
async def test_expired_active_share_is_replaced(client: AsyncClient, make_vehicle, db_session):
    """Test a new share can be created once the active one has expired"""
    owner_id = uuid4()
    vehicle = await make_vehicle(owner_id)
    stale = ShareLink(
        vehicle_id=vehicle.id,
        owner_id=owner_id,
        token="stale-token",
        is_active=True,
        created_at=utcnow() - timedelta(days=2),
        expires_at=utcnow() - timedelta(days=1),
    )
    db_session.add(stale)
    await db_session.commit()

    created = await client.post(f"{API}/shares/{vehicle.id}", headers=auth_headers(owner_id))
    listed = await client.get(f"{API}/shares/{vehicle.id}", headers=auth_headers(owner_id))

    assert created.status_code == 201
    shares = listed.json()["data"]
    assert [s["isActive"] for s in shares] == [True, False]
    assert shares[1]["token"] == "stale-token"
