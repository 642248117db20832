"""
List Notifications Use Case

Cursor-paginated notification history.
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .cursor import decode_cursor, encode_cursor
from .dtos import NotificationPage, NotificationResponse

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 20


class ListNotificationsUseCase:
    """
    Use case for listing a user's notifications.

    Business Rules:
    - limit must be within 1-50
    - Ordered newest first; pages continue strictly older than the cursor
    - next_cursor is set only when older items remain, and points at the
      oldest item of the returned page
    - Without a cursor the page starts at "now"
    - unread_only narrows the feed to items with no read_at; paging is
      unchanged
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        user_id: UUID,
        cursor: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        unread_only: bool = False,
    ) -> Result[NotificationPage]:
        """
        Execute list notifications use case.

        Args:
            user_id: Recipient from JWT
            cursor: next_cursor of the previous page (optional)
            limit: Page size (1-50)
            unread_only: Skip notifications that have been read

        Returns:
            Result with NotificationPage DTO, or Error
        """
        if limit < MIN_PAGE_SIZE or limit > MAX_PAGE_SIZE:
            return Return.err(
                validation_error(
                    "INVALID_LIMIT",
                    f"limit must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}",
                )
            )

        position = None
        if cursor:
            try:
                position = decode_cursor(cursor)
            except ValueError:
                return Return.err(validation_error("INVALID_CURSOR", "Invalid pagination cursor"))

        async with self.uow:
            rows = await self.uow.notifications.get_page(
                user_id,
                limit=limit + 1,
                before=position,
                not_after=None if position else self.clock(),
                unread_only=unread_only,
            )

            has_more = len(rows) > limit
            rows = rows[:limit]

            next_cursor = None
            if has_more:
                oldest = rows[-1]
                next_cursor = encode_cursor(oldest.created_at, oldest.id)

            return Return.ok(
                NotificationPage(
                    items=[NotificationResponse.from_entity(n) for n in rows],
                    next_cursor=next_cursor,
                )
            )
