"""Remote profile store protocol.

Anything the synchronizer can load from and commit to: the in-process
``ProfileService`` or the ``HttpProfileStore`` client.
"""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import ProfileRecord, ProfileUpdate


class IProfileStore(Protocol):
    """Keyed profile store with point lookup and upsert."""

    async def get(self, identity: UUID) -> ProfileRecord | None:
        """
        Look up the profile for ``identity``.

        Returns:
            The stored record, or None when no record exists yet

        Raises:
            Exception: on any transport, auth or server fault
        """
        ...

    async def upsert(self, identity: UUID, update: ProfileUpdate) -> ProfileRecord:
        """
        Insert or fully replace the profile for ``identity``.

        Returns:
            The record as persisted by the store
        """
        ...
