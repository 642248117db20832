"""
Mark Notifications Read Use Cases
"""

import logging
from datetime import datetime
from typing import Callable, List, Sequence
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import MarkReadResponse

logger = logging.getLogger(__name__)

MAX_IDS_PER_REQUEST = 100


def _parse_ids(raw_ids: Sequence[str]) -> List[UUID]:
    parsed = []
    for raw in raw_ids:
        try:
            parsed.append(UUID(str(raw)))
        except ValueError:
            # Unknown ids are skipped like foreign ones
            continue
    return parsed


class MarkNotificationsReadUseCase:
    """
    Use case for batch-marking notifications read.

    Business Rules:
    - 1-100 ids per call
    - Only the listed ids are touched, and only those owned by the user
      and still unread; everything else is skipped without error
    - Idempotent: read_at is never overwritten
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID, ids: Sequence[str]) -> Result[MarkReadResponse]:
        if not ids or len(ids) > MAX_IDS_PER_REQUEST:
            return Return.err(
                validation_error(
                    "INVALID_IDS", f"ids must contain 1-{MAX_IDS_PER_REQUEST} entries"
                )
            )

        notification_ids = _parse_ids(ids)

        async with self.uow:
            updated = await self.uow.notifications.mark_read(
                user_id, notification_ids, self.clock()
            )
            await self.uow.commit()

        logger.debug("Marked %d of %d notifications read for user %s", updated, len(ids), user_id)
        return Return.ok(MarkReadResponse(updated=updated))


class MarkAllNotificationsReadUseCase:
    """Marks every currently unread notification of the user read"""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID) -> Result[MarkReadResponse]:
        async with self.uow:
            updated = await self.uow.notifications.mark_all_read(user_id, self.clock())
            await self.uow.commit()

        return Return.ok(MarkReadResponse(updated=updated))
