"""
Notification API Routes

The authenticated user's notification feed.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.envelope import Envelope, PageEnvelope
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.notifications import (
    DEFAULT_PAGE_SIZE,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationsReadUseCase,
    MarkReadResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


class MarkReadRequest(CamelModel):
    """POST /notifications/read payload"""

    ids: List[str]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=PageEnvelope[List[NotificationResponse]],
)
async def list_notifications(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(DEFAULT_PAGE_SIZE, description="Page size (1-50)"),
    cursor: Optional[str] = Query(None, description="nextCursor of the previous page"),
    unread_only: bool = Query(False, alias="unreadOnly", description="Only unread notifications"),
):
    """
    List Notifications

    Returns:
        - data: notifications ordered newest first
        - nextCursor: cursor for the next (older) page, omitted when exhausted

    Raises:
        - 400 Bad Request: INVALID_LIMIT, INVALID_CURSOR
        - 401 Unauthorized: Missing or invalid JWT
    """
    result = await ListNotificationsUseCase(uow).execute(
        user_id, cursor=cursor, limit=limit, unread_only=unread_only
    )

    if result.is_err():
        raise_for_error(result.error)

    page = result.value
    return PageEnvelope(data=page.items, next_cursor=page.next_cursor)


@router.get(
    "/unread/count",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[UnreadCountResponse],
)
async def unread_count(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Unread Notification Count"""
    result = await GetUnreadCountUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)


@router.post(
    "/read",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[MarkReadResponse],
)
async def mark_read(
    request: MarkReadRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Mark Notifications Read

    Ids that are unknown, foreign or already read are skipped without error.

    Raises:
        - 400 Bad Request: INVALID_IDS (empty or more than 100 ids)
        - 401 Unauthorized: Missing or invalid JWT
    """
    result = await MarkNotificationsReadUseCase(uow).execute(user_id, request.ids)

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)


@router.post(
    "/read-all",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[MarkReadResponse],
)
async def mark_all_read(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Mark Every Unread Notification Read"""
    result = await MarkAllNotificationsReadUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)
