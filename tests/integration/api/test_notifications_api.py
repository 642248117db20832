"""
Integration tests for Notification API
"""

import base64
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.domain.base import utcnow
from src.domain.entities import Notification
from tests.utils.auth import API, auth_headers


async def add_notifications(db_session, user_id, count, start=None, step=timedelta(seconds=1)):
    """Insert ``count`` notifications, oldest first, ``step`` apart"""
    start = start or utcnow() - timedelta(hours=1)
    rows = []
    for i in range(count):
        row = Notification(
            user_id=user_id,
            kind="maintenance_due",
            title=f"Notice {i}",
            created_at=start + step * i,
        )
        db_session.add(row)
        rows.append(row)
    await db_session.commit()
    return rows


def cursor_timestamp(cursor: str) -> str:
    padded = cursor + "=" * (-len(cursor) % 4)
    return base64.urlsafe_b64decode(padded).decode().split("|")[0]


@pytest.mark.asyncio
async def test_list_pages_scenario(client: AsyncClient, db_session):
    """Scenario 3: three notifications paged two at a time"""
    user_id = uuid4()
    rows = await add_notifications(db_session, user_id, 3)
    headers = auth_headers(user_id)

    first = await client.get(f"{API}/notifications", params={"limit": 2}, headers=headers)

    assert first.status_code == 200
    body = first.json()
    assert body["ok"] is True
    assert [n["title"] for n in body["data"]] == ["Notice 2", "Notice 1"]
    assert body["nextCursor"] is not None
    assert cursor_timestamp(body["nextCursor"]) + "Z" == body["data"][1]["createdAt"]
    assert cursor_timestamp(body["nextCursor"]) == rows[1].created_at.isoformat()

    second = await client.get(
        f"{API}/notifications",
        params={"limit": 2, "cursor": body["nextCursor"]},
        headers=headers,
    )

    body = second.json()
    assert [n["title"] for n in body["data"]] == ["Notice 0"]
    assert "nextCursor" not in body


@pytest.mark.asyncio
async def test_unread_count_and_mark_read_scenario(client: AsyncClient, db_session):
    """Scenario 4: marking the oldest read drops the unread count from 3 to 2"""
    user_id = uuid4()
    rows = await add_notifications(db_session, user_id, 3)
    headers = auth_headers(user_id)

    before = await client.get(f"{API}/notifications/unread/count", headers=headers)
    marked = await client.post(
        f"{API}/notifications/read", json={"ids": [str(rows[0].id)]}, headers=headers
    )
    after = await client.get(f"{API}/notifications/unread/count", headers=headers)

    assert before.json() == {"ok": True, "data": {"count": 3}}
    assert marked.status_code == 200
    assert marked.json()["data"]["updated"] == 1
    assert after.json()["data"]["count"] == 2


@pytest.mark.asyncio
async def test_pagination_covers_everything_once(client: AsyncClient, db_session):
    """Test paging to the end yields every item exactly once, newest first"""
    user_id = uuid4()
    await add_notifications(db_session, user_id, 23)
    headers = auth_headers(user_id)

    seen = []
    cursor = None
    for _ in range(10):
        params = {"limit": 5}
        if cursor:
            params["cursor"] = cursor
        body = (await client.get(f"{API}/notifications", params=params, headers=headers)).json()
        seen.extend(body["data"])
        cursor = body.get("nextCursor")
        if cursor is None:
            break

    assert cursor is None
    assert len(seen) == 23
    assert len({n["id"] for n in seen}) == 23
    timestamps = [n["createdAt"] for n in seen]
    assert timestamps == sorted(timestamps, reverse=True)
    assert len(set(timestamps)) == 23


@pytest.mark.asyncio
async def test_pagination_with_identical_timestamps(client: AsyncClient, db_session):
    """Test items sharing a created_at are neither skipped nor repeated across pages"""
    user_id = uuid4()
    await add_notifications(db_session, user_id, 7, step=timedelta(0))
    headers = auth_headers(user_id)

    seen = []
    cursor = None
    while True:
        params = {"limit": 3}
        if cursor:
            params["cursor"] = cursor
        body = (await client.get(f"{API}/notifications", params=params, headers=headers)).json()
        seen.extend(n["id"] for n in body["data"])
        cursor = body.get("nextCursor")
        if cursor is None:
            break

    assert len(seen) == 7
    assert len(set(seen)) == 7


@pytest.mark.asyncio
async def test_mark_read_is_idempotent(client: AsyncClient, db_session):
    user_id = uuid4()
    rows = await add_notifications(db_session, user_id, 4)
    headers = auth_headers(user_id)
    ids = [str(rows[0].id), str(rows[2].id)]

    first = await client.post(f"{API}/notifications/read", json={"ids": ids}, headers=headers)
    count_once = (await client.get(f"{API}/notifications/unread/count", headers=headers)).json()
    items_once = (await client.get(f"{API}/notifications", headers=headers)).json()["data"]

    second = await client.post(f"{API}/notifications/read", json={"ids": ids}, headers=headers)
    count_twice = (await client.get(f"{API}/notifications/unread/count", headers=headers)).json()
    items_twice = (await client.get(f"{API}/notifications", headers=headers)).json()["data"]

    assert first.json()["data"]["updated"] == 2
    assert second.json()["data"]["updated"] == 0
    assert count_once == count_twice == {"ok": True, "data": {"count": 2}}
    assert items_once == items_twice


@pytest.mark.asyncio
async def test_mark_read_ignores_other_users(client: AsyncClient, db_session):
    """Test marking another user's ids succeeds and changes nothing for them"""
    user_a = uuid4()
    user_b = uuid4()
    rows_b = await add_notifications(db_session, user_b, 2)

    response = await client.post(
        f"{API}/notifications/read",
        json={"ids": [str(r.id) for r in rows_b] + ["not-a-uuid", str(uuid4())]},
        headers=auth_headers(user_a),
    )
    count_b = await client.get(f"{API}/notifications/unread/count", headers=auth_headers(user_b))
    items_b = await client.get(f"{API}/notifications", headers=auth_headers(user_b))

    assert response.status_code == 200
    assert response.json()["data"]["updated"] == 0
    assert count_b.json()["data"]["count"] == 2
    assert all(n["readAt"] is None for n in items_b.json()["data"])


@pytest.mark.asyncio
async def test_mark_read_only_touches_listed_ids(client: AsyncClient, db_session):
    """Test a notification appended after the client's snapshot stays unread"""
    user_id = uuid4()
    headers = auth_headers(user_id)
    snapshot = await add_notifications(db_session, user_id, 2)
    late = await add_notifications(db_session, user_id, 1, start=utcnow() - timedelta(minutes=1))

    await client.post(
        f"{API}/notifications/read",
        json={"ids": [str(r.id) for r in snapshot]},
        headers=headers,
    )
    items = (await client.get(f"{API}/notifications", headers=headers)).json()["data"]

    by_id = {n["id"]: n for n in items}
    assert len(items) == 3
    assert by_id[str(late[0].id)]["readAt"] is None
    assert all(by_id[str(r.id)]["readAt"] is not None for r in snapshot)


@pytest.mark.asyncio
async def test_mark_all_read(client: AsyncClient, db_session):
    user_id = uuid4()
    other = uuid4()
    await add_notifications(db_session, user_id, 3)
    await add_notifications(db_session, other, 1)

    response = await client.post(f"{API}/notifications/read-all", headers=auth_headers(user_id))
    count = await client.get(f"{API}/notifications/unread/count", headers=auth_headers(user_id))
    other_count = await client.get(
        f"{API}/notifications/unread/count", headers=auth_headers(other)
    )

    assert response.json()["data"]["updated"] == 3
    assert count.json()["data"]["count"] == 0
    assert other_count.json()["data"]["count"] == 1


@pytest.mark.asyncio
async def test_list_only_returns_own_notifications(client: AsyncClient, db_session):
    user_id = uuid4()
    await add_notifications(db_session, user_id, 2)
    await add_notifications(db_session, uuid4(), 5)

    body = (await client.get(f"{API}/notifications", headers=auth_headers(user_id))).json()

    assert len(body["data"]) == 2
    assert "nextCursor" not in body


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, 51])
async def test_list_rejects_out_of_range_limit(client: AsyncClient, limit):
    response = await client.get(
        f"{API}/notifications", params={"limit": limit}, headers=auth_headers(uuid4())
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_LIMIT"


@pytest.mark.asyncio
async def test_list_rejects_bad_cursor(client: AsyncClient):
    response = await client.get(
        f"{API}/notifications", params={"cursor": "%%%"}, headers=auth_headers(uuid4())
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_CURSOR"


@pytest.mark.asyncio
async def test_mark_read_requires_ids(client: AsyncClient):
    response = await client.post(
        f"{API}/notifications/read", json={"ids": []}, headers=auth_headers(uuid4())
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_IDS"


@pytest.mark.asyncio
async def test_list_single_stored_notification(client: AsyncClient, db_session):
    """Test a stored notification is returned with all of its fields"""
    user_id = uuid4()
    (row,) = await add_notifications(db_session, user_id, 1)

    response = await client.get(f"{API}/notifications", headers=auth_headers(user_id))

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert "nextCursor" not in body
    assert body["data"] == [
        {
            "id": str(row.id),
            "kind": "maintenance_due",
            "title": "Notice 0",
            "body": None,
            "link": None,
            "createdAt": row.created_at.isoformat() + "Z",
            "readAt": None,
        }
    ]


@pytest.mark.asyncio
async def test_list_unread_only_with_cursor_paging(client: AsyncClient, db_session):
    """Test unreadOnly skips read items on every page and paging still ends"""
    user_id = uuid4()
    headers = auth_headers(user_id)
    rows = await add_notifications(db_session, user_id, 7)
    read_ids = [str(rows[i].id) for i in (1, 3, 4)]
    await client.post(f"{API}/notifications/read", json={"ids": read_ids}, headers=headers)

    seen = []
    cursor = None
    while True:
        params = {"limit": 2, "unreadOnly": "true"}
        if cursor:
            params["cursor"] = cursor
        body = (await client.get(f"{API}/notifications", params=params, headers=headers)).json()
        seen.extend(body["data"])
        cursor = body.get("nextCursor")
        if cursor is None:
            break

    assert [n["title"] for n in seen] == ["Notice 6", "Notice 5", "Notice 2", "Notice 0"]
    assert all(n["readAt"] is None for n in seen)

    everything = (
        await client.get(f"{API}/notifications", params={"limit": 50}, headers=headers)
    ).json()["data"]
    assert len(everything) == 7
