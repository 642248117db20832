from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Vehicle


class IVehicleRepository(ABC):
    """Vehicle repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, vehicle_id: UUID) -> Optional[Vehicle]:
        """Get vehicle by ID"""
        pass

    @abstractmethod
    async def get_owned(self, vehicle_id: UUID, user_id: UUID) -> Optional[Vehicle]:
        """Get vehicle by ID only if it belongs to the user"""
        pass
