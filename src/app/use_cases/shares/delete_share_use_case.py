"""
Delete Share Use Case
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import not_found_error
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteShareResponse

logger = logging.getLogger(__name__)


class DeleteShareUseCase:
    """Hard-deletes a share link owned by the caller"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, share_id: UUID, owner_id: UUID) -> Result[DeleteShareResponse]:
        async with self.uow:
            share = await self.uow.share_links.get_owned(share_id, owner_id)
            if share is None:
                return Return.err(not_found_error("SHARE_NOT_FOUND", "Share not found"))

            await self.uow.share_links.delete(share)
            await self.uow.commit()
            logger.info("Share %s deleted", share_id)

            return Return.ok(DeleteShareResponse(status="deleted"))
