"""
Notification pagination cursors.

A cursor is the (created_at, id) position of the oldest item of the previous
page, base64url encoded. Bare ISO-8601 timestamps and epoch milliseconds are
also accepted; they bound on created_at alone.
"""

import base64
from datetime import UTC, datetime
from typing import Optional, Tuple
from uuid import UUID

from src.domain.base import to_naive_utc

CursorPosition = Tuple[datetime, Optional[UUID]]


def encode_cursor(created_at: datetime, notification_id: UUID) -> str:
    raw = f"{created_at.isoformat()}|{notification_id}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> CursorPosition:
    """
    Decode a cursor string.

    Raises:
        ValueError: cursor is not in any accepted format
    """
    cursor = cursor.strip()
    if not cursor:
        raise ValueError("empty cursor")

    if cursor.isdigit():
        try:
            created_at = datetime.fromtimestamp(int(cursor) / 1000, UTC)
        except (OverflowError, OSError) as exc:
            raise ValueError("cursor timestamp out of range") from exc
        return created_at.replace(tzinfo=None), None

    try:
        return to_naive_utc(datetime.fromisoformat(cursor)), None
    except ValueError:
        pass

    padded = cursor + "=" * (-len(cursor) % 4)
    raw = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
    timestamp, _, ident = raw.partition("|")
    created_at = to_naive_utc(datetime.fromisoformat(timestamp))
    return created_at, UUID(ident) if ident else None
