"""
Share Use Case DTOs (Data Transfer Objects)

Response classes for the share-link domain.
"""

from typing import Optional

from src.app.use_cases.dto_base import CamelModel, isoformat_utc
from src.domain.entities import ShareLink, Vehicle


# ============================================================================
# Response DTOs
# ============================================================================


class ShareLinkResponse(CamelModel):
    """A share link as seen by its owner"""

    id: str
    vehicle_id: str
    owner_id: str
    token: str
    is_active: bool
    created_at: str
    expires_at: Optional[str] = None

    @classmethod
    def from_entity(cls, share: ShareLink) -> "ShareLinkResponse":
        return cls(
            id=str(share.id),
            vehicle_id=str(share.vehicle_id),
            owner_id=str(share.owner_id),
            token=share.token,
            is_active=share.is_active,
            created_at=isoformat_utc(share.created_at),
            expires_at=isoformat_utc(share.expires_at),
        )


class DeleteShareResponse(CamelModel):
    """Response for delete share use case"""

    status: str


class PublicVehicle(CamelModel):
    """Public subset of a vehicle record"""

    id: str
    year: int
    make: str
    model: str

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> "PublicVehicle":
        view = vehicle.public_view()
        view["id"] = str(view["id"])
        return cls(**view)


class PublicShareInfo(CamelModel):
    """Share metadata safe to show to anonymous visitors"""

    id: str
    created_at: str
    expires_at: Optional[str] = None


class PublicVehicleView(CamelModel):
    """Response for resolving a public share token"""

    vehicle: PublicVehicle
    share: PublicShareInfo
