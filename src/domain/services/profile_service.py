"""Profile service layer: the server side of the profile store."""

from collections.abc import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import ProfileConflictError, ProfileNotFoundError
from domain.entities.profile import ProfileRecord, ProfileUpdate
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for profile reads and writes.

    Satisfies ``IProfileStore`` so a synchronizer can run in-process
    against the database without the HTTP hop.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get(self, identity: UUID) -> ProfileRecord | None:
        """Get a profile, or None if the user has never saved one."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get(identity)

    async def get_by_id(self, identity: UUID) -> ProfileRecord:
        """Get a profile, raising when it does not exist."""
        profile = await self.get(identity)
        if not profile:
            raise ProfileNotFoundError(str(identity))
        return profile

    async def upsert(self, identity: UUID, update: ProfileUpdate) -> ProfileRecord:
        """Insert or fully replace a profile. Last write wins."""
        async with self._uow_factory() as uow:
            try:
                saved = await uow.profiles.upsert(identity, update)
                await uow.commit()
            except IntegrityError as e:
                await uow.rollback()
                logger.warning(
                    "profile_upsert_conflict",
                    profile_id=str(identity),
                    error=str(e.orig),
                )
                raise ProfileConflictError(
                    "Email address is already used by another profile"
                ) from e

        logger.info("profile_upserted", profile_id=str(identity))
        return saved
