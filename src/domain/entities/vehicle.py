"""
Vehicle Entity

Owned vehicle record. Only read by this service; the share resolver
projects it down to the public field set.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

PUBLIC_VEHICLE_FIELDS = ("id", "year", "make", "model")


class Vehicle(SQLModel, table=True):
    """
    Vehicle entity - registered by VIN and owned by a single user.

    Business Rules:
    - VIN is unique across all vehicles
    - Only id, year, make and model are ever exposed through a public share
    """

    __tablename__ = "vehicles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)

    year: int = Field(nullable=False)
    make: str = Field(max_length=100, nullable=False)
    model: str = Field(max_length=100, nullable=False)
    vin: str = Field(max_length=17, unique=True, index=True)
    current_mileage: int = Field(default=0)
    last_service_date: Optional[str] = Field(default=None, max_length=32)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def public_view(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in PUBLIC_VEHICLE_FIELDS}
