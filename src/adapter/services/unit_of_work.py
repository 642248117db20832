from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.share_link_repository import ShareLinkRepository
from src.adapter.repositories.vehicle_repository import VehicleRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.vehicles = VehicleRepository(self.session)
        self.share_links = ShareLinkRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
