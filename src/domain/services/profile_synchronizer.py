"""Profile synchronization between an edit draft and the profile store.

One ``ProfileSynchronizer`` lives for one edit session. It owns the draft,
the ``loading``/``saving`` flags, and the request counter used to drop
responses from superseded loads.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from uuid import UUID

import structlog

from core.exceptions import AppException, CommitFailure, LoadFailure
from domain.entities.profile import (
    ProfileDraft,
    ProfileRecord,
    normalize_snapshot,
)
from domain.repositories.profile_store import IProfileStore

logger = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProfileSynchronizer:
    """Load-or-default and commit for a single profile draft."""

    def __init__(
        self,
        store: IProfileStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._clock = clock
        self.draft = ProfileDraft()
        self.loading = False
        self.saving = False
        self._load_seq = 0
        self._commits_in_flight = 0

    def set_field(self, name: str, value: str) -> None:
        """Edit one draft field."""
        self.draft.set(name, value)

    def on_avatar_change(self, avatar_url: str) -> None:
        """Callback for the avatar uploader."""
        self.draft.set("avatar_url", avatar_url)

    async def load(self, identity: UUID, email: str) -> ProfileDraft | None:
        """Populate the draft from the store, or from defaults if no record exists.

        Returns the draft, or None when a later ``load`` superseded this one
        before it completed; superseded results and failures are dropped.

        Raises:
            LoadFailure: the store lookup failed for a reason other than absence
        """
        self._load_seq += 1
        seq = self._load_seq
        self.loading = True
        try:
            record = await self._store.get(identity)
        except Exception as e:
            if seq != self._load_seq:
                logger.info("profile_load_discarded", profile_id=str(identity), seq=seq)
                return None
            logger.error("profile_load_failed", profile_id=str(identity), error=str(e))
            raise LoadFailure() from e
        finally:
            if seq == self._load_seq:
                self.loading = False

        if seq != self._load_seq:
            logger.info("profile_load_discarded", profile_id=str(identity), seq=seq)
            return None

        if record is None:
            hydrated = ProfileDraft.blank(email)
        else:
            hydrated = ProfileDraft.from_record(record, fallback_email=email)
        self.draft.restore(hydrated.snapshot())
        logger.info(
            "profile_loaded",
            profile_id=str(identity),
            record_found=record is not None,
        )
        return self.draft

    async def commit(self, identity: UUID, email: str) -> ProfileRecord:
        """Upsert the current draft and re-hydrate it from the persisted record.

        ``email`` is the session's authoritative address and is what gets
        written. Concurrent commits are independent; the store keeps
        whichever completes last.

        Raises:
            CommitFailure: the draft could not be written; the draft is unchanged
        """
        snapshot = self.draft.snapshot()
        self._commits_in_flight += 1
        self.saving = True
        try:
            try:
                update = normalize_snapshot(snapshot, email=email, updated_at=self._clock())
            except ValueError as e:
                raise CommitFailure(
                    f"Invalid date of birth: {snapshot.date_of_birth!r}"
                ) from e

            try:
                saved = await self._store.upsert(identity, update)
            except AppException as e:
                logger.warning(
                    "profile_commit_failed",
                    profile_id=str(identity),
                    error_code=e.error_code.value,
                    error=e.message,
                )
                raise CommitFailure(e.message) from e
            except Exception as e:
                logger.error("profile_commit_failed", profile_id=str(identity), error=str(e))
                raise CommitFailure(str(e) or "Failed to save profile") from e
        finally:
            self._commits_in_flight -= 1
            self.saving = self._commits_in_flight > 0

        # Edits made while the write was in flight take precedence.
        if self.draft.snapshot() == snapshot:
            self.draft.restore(ProfileDraft.from_record(saved, fallback_email=email).snapshot())
        else:
            logger.debug("profile_rehydrate_skipped", profile_id=str(identity))

        logger.info("profile_committed", profile_id=str(identity))
        return saved


async def start_profile_session(
    store: IProfileStore, identity: UUID, email: str
) -> ProfileSynchronizer:
    """Composition-root entry point: build a synchronizer and run its first load.

    A ``LoadFailure`` propagates; the returned synchronizer is not created in
    that case, so the caller decides whether to retry or show defaults.
    """
    synchronizer = ProfileSynchronizer(store)
    await synchronizer.load(identity, email)
    return synchronizer
