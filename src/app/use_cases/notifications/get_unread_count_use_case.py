from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import UnreadCountResponse


class GetUnreadCountUseCase:
    """Counts the unread notifications of a user straight from the store"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UnreadCountResponse]:
        async with self.uow:
            count = await self.uow.notifications.count_unread(user_id)
            return Return.ok(UnreadCountResponse(count=count))
