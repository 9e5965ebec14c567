"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import ProfileRecord, ProfileUpdate


class IProfileRepository(Protocol):
    """Repository interface for ProfileRecord entities."""

    async def get(self, id: UUID) -> ProfileRecord | None:
        """Get a profile by ID."""
        ...

    async def upsert(self, id: UUID, update: ProfileUpdate) -> ProfileRecord:
        """Insert the profile if absent, otherwise replace every field."""
        ...
