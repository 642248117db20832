"""
Public API Routes

Anonymous endpoints; no Authorization header is read.
"""

from fastapi import APIRouter, Depends, status

from src.api.envelope import Envelope
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shares import PublicVehicleView, ResolvePublicShareUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/public", tags=["Public"])


@router.get(
    "/vehicle/{token}",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[PublicVehicleView],
)
async def resolve_public_vehicle(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resolve Public Vehicle Share

    Raises:
        - 403 Forbidden: SHARE_INACTIVE, SHARE_EXPIRED
        - 404 Not Found: SHARE_NOT_FOUND
    """
    result = await ResolvePublicShareUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return Envelope(data=result.value)
