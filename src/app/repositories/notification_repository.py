from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from src.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def count_unread(self, user_id: UUID) -> int:
        """Count notifications of a user with no read_at"""
        pass

    @abstractmethod
    async def get_page(
        self,
        user_id: UUID,
        limit: int,
        before: Optional[Tuple[datetime, Optional[UUID]]] = None,
        not_after: Optional[datetime] = None,
        unread_only: bool = False,
    ) -> List[Notification]:
        """
        Get up to ``limit`` notifications ordered by (created_at, id) DESC.

        Args:
            before: (created_at, id) position; only strictly older rows are
                returned. With id None the bound is created_at alone.
            not_after: upper bound on created_at used when no cursor is given
            unread_only: only rows with no read_at
        """
        pass

    @abstractmethod
    async def mark_read(
        self, user_id: UUID, notification_ids: Sequence[UUID], read_at: datetime
    ) -> int:
        """Set read_at on the listed unread notifications of the user, returns rows changed"""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID, read_at: datetime) -> int:
        """Set read_at on every unread notification of the user, returns rows changed"""
        pass
