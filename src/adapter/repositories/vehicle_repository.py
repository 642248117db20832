from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.vehicle_repository import IVehicleRepository
from src.domain.entities import Vehicle


class VehicleRepository(IVehicleRepository):
    """Vehicle repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, vehicle_id: UUID) -> Optional[Vehicle]:
        """Get vehicle by ID"""
        stmt = select(Vehicle).where(Vehicle.id == vehicle_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_owned(self, vehicle_id: UUID, user_id: UUID) -> Optional[Vehicle]:
        """Get vehicle by ID only if it belongs to the user"""
        stmt = select(Vehicle).where(Vehicle.id == vehicle_id, Vehicle.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
