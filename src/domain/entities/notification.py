"""
Notification Entity

Append-only per-user event log entry.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

KIND_MAX_LENGTH = 64
TITLE_MAX_LENGTH = 140
BODY_MAX_LENGTH = 2000
LINK_MAX_LENGTH = 2048


class Notification(SQLModel, table=True):
    """
    Notification entity - a message addressed to exactly one user.

    Business Rules:
    - Never updated after creation except read_at
    - read_at is monotonic (unread -> read, never back)
    - Paginated newest first by (created_at, id)
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)

    kind: str = Field(max_length=KIND_MAX_LENGTH)
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    body: Optional[str] = Field(default=None, max_length=BODY_MAX_LENGTH)
    link: Optional[str] = Field(default=None, max_length=LINK_MAX_LENGTH)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    read_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_notifications_user_created", "user_id", "created_at"),
        Index("idx_notifications_user_read", "user_id", "read_at"),
    )
