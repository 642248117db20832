from datetime import datetime
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import and_, func, or_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_repository import INotificationRepository
from src.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def count_unread(self, user_id: UUID) -> int:
        """Count notifications of a user with no read_at"""
        stmt = select(func.count()).select_from(Notification).where(
            Notification.user_id == user_id, Notification.read_at.is_(None)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

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

        The caller asks for one row more than the page size to learn whether
        another page exists.
        """
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.read_at.is_(None))

        if before is not None:
            cursor_created_at, cursor_id = before
            if cursor_id is None:
                stmt = stmt.where(Notification.created_at < cursor_created_at)
            else:
                stmt = stmt.where(
                    or_(
                        Notification.created_at < cursor_created_at,
                        and_(
                            Notification.created_at == cursor_created_at,
                            Notification.id < cursor_id,
                        ),
                    )
                )
        elif not_after is not None:
            stmt = stmt.where(Notification.created_at <= not_after)

        stmt = stmt.order_by(
            Notification.created_at.desc(), Notification.id.desc()
        ).limit(limit)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_read(
        self, user_id: UUID, notification_ids: Sequence[UUID], read_at: datetime
    ) -> int:
        """Set read_at on the listed unread notifications of the user"""
        if not notification_ids:
            return 0
        stmt = (
            update(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.id.in_(list(notification_ids)),
                Notification.read_at.is_(None),
            )
            .values(read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def mark_all_read(self, user_id: UUID, read_at: datetime) -> int:
        """Set read_at on every unread notification of the user"""
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, Notification.read_at.is_(None))
            .values(read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
