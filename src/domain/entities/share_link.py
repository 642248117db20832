"""
ShareLink Entity

Public, tokenized, read-only link to a vehicle.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class ShareLink(SQLModel, table=True):
    """
    ShareLink entity - bearer-token access to a vehicle's public fields.

    Business Rules:
    - Token is random, unique and never derived from vehicle or owner ids
    - At most one active link per vehicle (partial unique index)
    - Resolvable only while active and not past expires_at
    - Deleted links are gone (no tombstones); expired links are kept
    """

    __tablename__ = "share_links"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    vehicle_id: UUID = Field(foreign_key="vehicles.id", nullable=False, index=True)
    owner_id: UUID = Field(nullable=False, index=True)

    token: str = Field(unique=True, index=True, max_length=64)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "uq_share_links_active_vehicle",
            "vehicle_id",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
        Index("idx_share_links_vehicle_created", "vehicle_id", "created_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now

    def is_resolvable(self, now: datetime) -> bool:
        return self.is_active and not self.is_expired(now)
