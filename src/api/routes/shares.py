"""
Share API Routes

Owner-facing management of public vehicle share links.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.envelope import Envelope
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.shares import (
    CreateShareUseCase,
    DeleteShareResponse,
    DeleteShareUseCase,
    ListSharesUseCase,
    ShareLinkResponse,
    UpdateShareUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/shares", tags=["Shares"])


class CreateShareRequest(CamelModel):
    """
    Create share HTTP request payload

    expiresAt is an ISO-8601 timestamp; omitted means the link never expires.
    """

    expires_at: Optional[datetime] = None


class UpdateShareRequest(CamelModel):
    """
    Update share HTTP request payload

    Omitted fields are left unchanged; "expiresAt": null removes the expiry.
    """

    is_active: Optional[bool] = None
    expires_at: Optional[datetime] = None


@router.get(
    "/{vehicle_id}",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[List[ShareLinkResponse]],
)
async def list_shares(
    vehicle_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Shares

    All share links of a vehicle owned by the caller, newest first.

    Raises:
        - 401 Unauthorized: Missing or invalid JWT
        - 404 Not Found: VEHICLE_NOT_FOUND (missing or not owned)
    """
    result = await ListSharesUseCase(uow).execute(vehicle_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)


@router.post(
    "/{vehicle_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[ShareLinkResponse],
)
async def create_share(
    vehicle_id: UUID,
    request: Optional[CreateShareRequest] = None,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Share

    Issues a new public token for the vehicle.

    Raises:
        - 400 Bad Request: INVALID_EXPIRES_AT
        - 401 Unauthorized: Missing or invalid JWT
        - 404 Not Found: VEHICLE_NOT_FOUND
        - 409 Conflict: SHARE_ALREADY_ACTIVE
    """
    expires_at = request.expires_at if request else None

    result = await CreateShareUseCase(uow).execute(vehicle_id, user_id, expires_at)

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)


@router.patch(
    "/{share_id}",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[ShareLinkResponse],
)
async def update_share(
    share_id: UUID,
    request: UpdateShareRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Share

    Raises:
        - 400 Bad Request: INVALID_EXPIRES_AT
        - 401 Unauthorized: Missing or invalid JWT
        - 404 Not Found: SHARE_NOT_FOUND (missing or not owned)
        - 409 Conflict: SHARE_ALREADY_ACTIVE (re-activation while another link is live)
    """
    clear_expiry = "expires_at" in request.model_fields_set and request.expires_at is None

    result = await UpdateShareUseCase(uow).execute(
        share_id,
        user_id,
        is_active=request.is_active,
        expires_at=request.expires_at,
        clear_expiry=clear_expiry,
    )

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)


@router.delete(
    "/{share_id}",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[DeleteShareResponse],
)
async def delete_share(
    share_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Share

    Raises:
        - 401 Unauthorized: Missing or invalid JWT
        - 404 Not Found: SHARE_NOT_FOUND (missing or not owned)
    """
    result = await DeleteShareUseCase(uow).execute(share_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)
