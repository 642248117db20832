"""
Append Notification Use Case

Adds a notification to a user's feed.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from libs.result import Result, Return
from src.app.errors import validation_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Notification
from src.domain.entities.notification import (
    BODY_MAX_LENGTH,
    KIND_MAX_LENGTH,
    LINK_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)

from .dtos import NotificationResponse

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(AnyHttpUrl)


class AppendNotificationUseCase:
    """
    Use case for appending a notification.

    Business Rules:
    - kind: 1-64 characters
    - title: 1-140 characters
    - body: at most 2000 characters
    - link: absolute http(s) URL, at most 2048 characters
    - Stored unread; a single insert, nothing else is written
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        user_id: UUID,
        kind: str,
        title: str,
        body: Optional[str] = None,
        link: Optional[str] = None,
    ) -> Result[NotificationResponse]:
        kind = (kind or "").strip()
        if not kind or len(kind) > KIND_MAX_LENGTH:
            return Return.err(
                validation_error(
                    "INVALID_KIND", f"kind must be 1-{KIND_MAX_LENGTH} characters"
                )
            )

        title = (title or "").strip()
        if not title or len(title) > TITLE_MAX_LENGTH:
            return Return.err(
                validation_error(
                    "INVALID_TITLE", f"title must be 1-{TITLE_MAX_LENGTH} characters"
                )
            )

        if body is not None and len(body) > BODY_MAX_LENGTH:
            return Return.err(
                validation_error(
                    "INVALID_BODY", f"body must be at most {BODY_MAX_LENGTH} characters"
                )
            )

        if link is not None:
            if len(link) > LINK_MAX_LENGTH:
                return Return.err(
                    validation_error(
                        "INVALID_LINK", f"link must be at most {LINK_MAX_LENGTH} characters"
                    )
                )
            try:
                _url_adapter.validate_python(link)
            except ValidationError as exc:
                return Return.err(
                    validation_error(
                        "INVALID_LINK",
                        "link must be an absolute http(s) URL",
                        details=exc.errors(include_url=False, include_context=False),
                    )
                )

        async with self.uow:
            notification = Notification(
                user_id=user_id,
                kind=kind,
                title=title,
                body=body,
                link=link,
                created_at=self.clock(),
            )
            await self.uow.notifications.create(notification)
            await self.uow.commit()

            logger.debug("Notification %s (%s) appended for user %s", notification.id, kind, user_id)

            return Return.ok(NotificationResponse.from_entity(notification))
