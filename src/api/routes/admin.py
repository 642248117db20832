"""
Admin API Routes - Service Integration Endpoints

Other services push notifications to users through these endpoints.
Authentication is via Admin API Key, not user JWTs.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import Field

from src.api.envelope import Envelope
from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.notifications import AppendNotificationUseCase, NotificationResponse
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class AppendNotificationRequest(CamelModel):
    """
    Append notification HTTP request payload

    Length and URL rules are enforced by the use case.
    """

    user_id: UUID = Field(..., description="Recipient")
    kind: str = Field(..., description='Category tag, e.g. "transfer_request"')
    title: str
    body: Optional[str] = None
    link: Optional[str] = None


@router.post(
    "/notifications",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[NotificationResponse],
    dependencies=[Depends(verify_admin_api_key)],
)
async def append_notification(
    request: AppendNotificationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Append Notification

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_KIND, INVALID_TITLE, INVALID_BODY, INVALID_LINK
        - 401 Unauthorized: Missing or invalid admin API key
    """
    result = await AppendNotificationUseCase(uow).execute(
        request.user_id,
        kind=request.kind,
        title=request.title,
        body=request.body,
        link=request.link,
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)
