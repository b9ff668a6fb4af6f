"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ProfileAlreadyExistsError
from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, owner: str) -> Profile | None:
        """Get the profile owned by an identity."""
        model = await self._get_model(owner)
        return self._to_entity(model) if model else None

    async def exists(self, owner: str) -> bool:
        """Check whether an identity owns a profile."""
        stmt = select(func.count()).select_from(ProfileModel).where(ProfileModel.owner == owner)
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # A concurrent request inserted the same owner first
            raise ProfileAlreadyExistsError(profile.owner) from e
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Persist skills, location and bio of an existing profile."""
        model = await self._get_model(profile.owner)

        if not model:
            raise ValueError(f"Profile {profile.owner} not found")

        model.skills = list(profile.skills)
        model.location = profile.location
        model.bio = profile.bio
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, owner: str) -> bool:
        """Delete a profile."""
        model = await self._get_model(owner)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, owner: str) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.owner == owner)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            owner=model.owner,
            username=model.username,
            skills=list(model.skills),
            location=model.location,
            bio=model.bio,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            owner=entity.owner,
            username=entity.username,
            skills=list(entity.skills),
            location=entity.location,
            bio=entity.bio,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
