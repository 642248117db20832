"""
Notification Feed Use Cases
"""

from .append_notification_use_case import AppendNotificationUseCase
from .cursor import decode_cursor, encode_cursor
from .dtos import (
    MarkReadResponse,
    NotificationPage,
    NotificationResponse,
    UnreadCountResponse,
)
from .get_unread_count_use_case import GetUnreadCountUseCase
from .list_notifications_use_case import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListNotificationsUseCase,
)
from .mark_notifications_read_use_case import (
    MarkAllNotificationsReadUseCase,
    MarkNotificationsReadUseCase,
)

__all__ = [
    "AppendNotificationUseCase",
    "GetUnreadCountUseCase",
    "ListNotificationsUseCase",
    "MarkNotificationsReadUseCase",
    "MarkAllNotificationsReadUseCase",
    "NotificationResponse",
    "NotificationPage",
    "UnreadCountResponse",
    "MarkReadResponse",
    "encode_cursor",
    "decode_cursor",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
]
