"""
List Shares Use Case

Lists every share link of a vehicle for its owner.
"""

from typing import List
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import not_found_error
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ShareLinkResponse


class ListSharesUseCase:
    """
    Use case for listing the share links of a vehicle.

    Business Rules:
    - Only the vehicle owner may list its links
    - Active, inactive and expired links are all returned, newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, vehicle_id: UUID, owner_id: UUID) -> Result[List[ShareLinkResponse]]:
        async with self.uow:
            vehicle = await self.uow.vehicles.get_owned(vehicle_id, owner_id)
            if vehicle is None:
                return Return.err(not_found_error("VEHICLE_NOT_FOUND", "Vehicle not found"))

            shares = await self.uow.share_links.list_by_vehicle(vehicle_id)

            return Return.ok([ShareLinkResponse.from_entity(s) for s in shares])
