from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateRecordError
from src.app.repositories.share_link_repository import IShareLinkRepository
from src.domain.entities import ShareLink


class ShareLinkRepository(IShareLinkRepository):
    """ShareLink repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[ShareLink]:
        """Get share link by token"""
        stmt = select(ShareLink).where(ShareLink.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_owned(self, share_id: UUID, owner_id: UUID) -> Optional[ShareLink]:
        """Get share link by ID only if it was created by the owner"""
        stmt = select(ShareLink).where(
            ShareLink.id == share_id, ShareLink.owner_id == owner_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_vehicle(self, vehicle_id: UUID) -> Optional[ShareLink]:
        """Get the active share link for a vehicle, expired or not"""
        # Row lock on backends that support it; the partial unique index is the backstop
        stmt = (
            select(ShareLink)
            .where(ShareLink.vehicle_id == vehicle_id, ShareLink.is_active == True)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_vehicle(self, vehicle_id: UUID) -> List[ShareLink]:
        """Get all share links for a vehicle, newest first"""
        stmt = (
            select(ShareLink)
            .where(ShareLink.vehicle_id == vehicle_id)
            .order_by(ShareLink.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, share_link: ShareLink) -> ShareLink:
        """Create a new share link"""
        self.session.add(share_link)
        await self._flush()
        await self.session.refresh(share_link)
        return share_link

    async def update(self, share_link: ShareLink) -> ShareLink:
        """Update existing share link"""
        self.session.add(share_link)
        await self._flush()
        await self.session.refresh(share_link)
        return share_link

    async def delete(self, share_link: ShareLink) -> None:
        """Hard delete a share link"""
        await self.session.delete(share_link)
        await self.session.flush()

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc
