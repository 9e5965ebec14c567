"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import ProfileRecord, ProfileUpdate
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> ProfileRecord | None:
        """Get a profile by ID."""
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def upsert(self, id: UUID, update: ProfileUpdate) -> ProfileRecord:
        """Insert the profile, or overwrite every column of the existing row."""
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            model = ProfileModel(id=id)
            self._session.add(model)

        model.email = update.email
        model.full_name = update.full_name
        model.date_of_birth = update.date_of_birth
        model.user_role = update.user_role
        model.gender = update.gender
        model.avatar_url = update.avatar_url
        model.updated_at = update.updated_at

        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    def _to_entity(self, model: ProfileModel) -> ProfileRecord:
        """Convert ORM model to domain entity."""
        return ProfileRecord(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            date_of_birth=model.date_of_birth,
            user_role=model.user_role,
            gender=model.gender,
            avatar_url=model.avatar_url,
            updated_at=model.updated_at,
        )
