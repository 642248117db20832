"""
Create Share Use Case

Issues a public share token for a vehicle.
"""

import logging
import secrets
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.errors import (
    conflict_error,
    internal_error,
    not_found_error,
    validation_error,
)
from src.app.repositories.errors import DuplicateRecordError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_naive_utc, utcnow
from src.domain.entities import ShareLink

from .dtos import ShareLinkResponse

logger = logging.getLogger(__name__)

TOKEN_BYTES = 24
MAX_TOKEN_ATTEMPTS = 2


def generate_share_token() -> str:
    return secrets.token_urlsafe(TOKEN_BYTES)


class CreateShareUseCase:
    """
    Use case for creating a public share link.

    Business Rules:
    - Only the vehicle owner can share it
    - expires_at, when given, must be after the creation instant
    - One active, unexpired link per vehicle; a second request is a conflict
    - An active link that already expired is retired to free the slot
    - The store enforces token uniqueness and the one-active-link rule;
      a token collision is regenerated once, a lost race is a conflict
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Callable[[], datetime] = utcnow,
        token_factory: Callable[[], str] = generate_share_token,
    ):
        self.uow = uow
        self.clock = clock
        self.token_factory = token_factory

    async def execute(
        self, vehicle_id: UUID, owner_id: UUID, expires_at: Optional[datetime] = None
    ) -> Result[ShareLinkResponse]:
        """
        Execute create share use case.

        Args:
            vehicle_id: Vehicle to share
            owner_id: Authenticated user (must own the vehicle)
            expires_at: Optional expiry, timezone-aware values are converted to UTC

        Returns:
            Result with ShareLinkResponse DTO, or Error
        """
        expires_at = to_naive_utc(expires_at)

        async with self.uow:
            vehicle = await self.uow.vehicles.get_owned(vehicle_id, owner_id)
            if vehicle is None:
                return Return.err(not_found_error("VEHICLE_NOT_FOUND", "Vehicle not found"))

            for attempt in range(MAX_TOKEN_ATTEMPTS):
                now = self.clock()
                if expires_at is not None and expires_at <= now:
                    return Return.err(
                        validation_error(
                            "INVALID_EXPIRES_AT", "expiresAt must be in the future"
                        )
                    )

                active = await self.uow.share_links.get_active_by_vehicle(vehicle_id)
                if active is not None:
                    if active.is_resolvable(now):
                        return Return.err(
                            conflict_error(
                                "SHARE_ALREADY_ACTIVE",
                                "Vehicle already has an active share",
                            )
                        )
                    active.is_active = False
                    await self.uow.share_links.update(active)

                token = self.token_factory()
                share = ShareLink(
                    vehicle_id=vehicle_id,
                    owner_id=owner_id,
                    token=token,
                    is_active=True,
                    created_at=now,
                    expires_at=expires_at,
                )

                try:
                    await self.uow.share_links.create(share)
                except DuplicateRecordError:
                    await self.uow.rollback()
                    if await self.uow.share_links.get_by_token(token) is not None:
                        logger.warning(
                            "Share token collision for vehicle %s (attempt %d)",
                            vehicle_id,
                            attempt + 1,
                        )
                        continue
                    return Return.err(
                        conflict_error(
                            "SHARE_ALREADY_ACTIVE", "Vehicle already has an active share"
                        )
                    )

                await self.uow.commit()
                logger.info("Share %s created for vehicle %s", share.id, vehicle_id)

                return Return.ok(ShareLinkResponse.from_entity(share))

        return Return.err(
            internal_error("TOKEN_GENERATION_FAILED", "Could not issue a unique share token")
        )
