"""
Resolve Public Share Use Case

Anonymous lookup of a share token.
"""

from datetime import datetime
from typing import Callable

from libs.result import Result, Return
from src.app.errors import forbidden_error, not_found_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dto_base import isoformat_utc
from src.domain.base import utcnow

from .dtos import PublicShareInfo, PublicVehicle, PublicVehicleView


class ResolvePublicShareUseCase:
    """
    Use case for resolving a share token to a read-only vehicle view.

    Business Rules:
    - Unknown token: SHARE_NOT_FOUND (never reveals whether the vehicle exists)
    - Deactivated link: SHARE_INACTIVE
    - expires_at reached: SHARE_EXPIRED
    - Only the public vehicle fields are returned
    - Read-only: nothing is written
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[PublicVehicleView]:
        async with self.uow:
            share = await self.uow.share_links.get_by_token(token)
            if share is None:
                return Return.err(not_found_error("SHARE_NOT_FOUND", "Share not found"))

            if not share.is_active:
                return Return.err(forbidden_error("SHARE_INACTIVE", "Share is inactive"))

            if share.is_expired(self.clock()):
                return Return.err(forbidden_error("SHARE_EXPIRED", "Share has expired"))

            vehicle = await self.uow.vehicles.get_by_id(share.vehicle_id)
            if vehicle is None:
                return Return.err(not_found_error("SHARE_NOT_FOUND", "Share not found"))

            return Return.ok(
                PublicVehicleView(
                    vehicle=PublicVehicle.from_entity(vehicle),
                    share=PublicShareInfo(
                        id=str(share.id),
                        created_at=isoformat_utc(share.created_at),
                        expires_at=isoformat_utc(share.expires_at),
                    ),
                )
            )
