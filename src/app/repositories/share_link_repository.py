from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ShareLink


class IShareLinkRepository(ABC):
    """ShareLink repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[ShareLink]:
        """Get share link by token"""
        pass

    @abstractmethod
    async def get_owned(self, share_id: UUID, owner_id: UUID) -> Optional[ShareLink]:
        """Get share link by ID only if it was created by the owner"""
        pass

    @abstractmethod
    async def get_active_by_vehicle(self, vehicle_id: UUID) -> Optional[ShareLink]:
        """Get the active share link for a vehicle, expired or not"""
        pass

    @abstractmethod
    async def list_by_vehicle(self, vehicle_id: UUID) -> List[ShareLink]:
        """Get all share links for a vehicle, newest first"""
        pass

    @abstractmethod
    async def create(self, share_link: ShareLink) -> ShareLink:
        """
        Create a new share link.

        Raises:
            DuplicateRecordError: token or active-per-vehicle constraint violated
        """
        pass

    @abstractmethod
    async def update(self, share_link: ShareLink) -> ShareLink:
        """
        Update existing share link.

        Raises:
            DuplicateRecordError: active-per-vehicle constraint violated
        """
        pass

    @abstractmethod
    async def delete(self, share_link: ShareLink) -> None:
        """Hard delete a share link"""
        pass
