"""
Notification Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from src.app.use_cases.dto_base import CamelModel, isoformat_utc
from src.domain.entities import Notification


class NotificationResponse(CamelModel):
    """A notification as delivered to its recipient"""

    id: str
    kind: str
    title: str
    body: Optional[str] = None
    link: Optional[str] = None
    created_at: str
    read_at: Optional[str] = None

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=str(notification.id),
            kind=notification.kind,
            title=notification.title,
            body=notification.body,
            link=notification.link,
            created_at=isoformat_utc(notification.created_at),
            read_at=isoformat_utc(notification.read_at),
        )


class NotificationPage(CamelModel):
    """One page of a user's notifications, newest first"""

    items: List[NotificationResponse]
    next_cursor: Optional[str] = None


class UnreadCountResponse(CamelModel):
    count: int


class MarkReadResponse(CamelModel):
    updated: int
