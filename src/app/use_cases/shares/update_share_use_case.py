"""
Update Share Use Case

Toggles a share link on or off and edits its expiry.
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import conflict_error, not_found_error, validation_error
from src.app.repositories.errors import DuplicateRecordError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_naive_utc, utcnow

from .dtos import ShareLinkResponse


class UpdateShareUseCase:
    """
    Use case for updating a share link.

    Business Rules:
    - Lookup is ownership-scoped: a foreign link is reported as not found
    - Each field is idempotent (setting the current value is a no-op)
    - A new expires_at must be in the future; clear_expiry removes it
    - Re-activating is refused while another resolvable link is active
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        share_id: UUID,
        owner_id: UUID,
        is_active: Optional[bool] = None,
        expires_at: Optional[datetime] = None,
        clear_expiry: bool = False,
    ) -> Result[ShareLinkResponse]:
        expires_at = to_naive_utc(expires_at)

        async with self.uow:
            share = await self.uow.share_links.get_owned(share_id, owner_id)
            if share is None:
                return Return.err(not_found_error("SHARE_NOT_FOUND", "Share not found"))

            now = self.clock()

            if expires_at is not None and expires_at <= now:
                return Return.err(
                    validation_error("INVALID_EXPIRES_AT", "expiresAt must be in the future")
                )

            if is_active and not share.is_active:
                active = await self.uow.share_links.get_active_by_vehicle(share.vehicle_id)
                if active is not None and active.id != share.id:
                    if active.is_resolvable(now):
                        return Return.err(
                            conflict_error(
                                "SHARE_ALREADY_ACTIVE",
                                "Vehicle already has an active share",
                            )
                        )
                    active.is_active = False
                    await self.uow.share_links.update(active)

            if is_active is not None:
                share.is_active = is_active
            if clear_expiry:
                share.expires_at = None
            elif expires_at is not None:
                share.expires_at = expires_at

            try:
                await self.uow.share_links.update(share)
            except DuplicateRecordError:
                await self.uow.rollback()
                return Return.err(
                    conflict_error(
                        "SHARE_ALREADY_ACTIVE", "Vehicle already has an active share"
                    )
                )

            await self.uow.commit()

            return Return.ok(ShareLinkResponse.from_entity(share))
