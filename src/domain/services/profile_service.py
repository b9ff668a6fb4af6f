"""Profile service layer with the profile lifecycle rules.

Every mutation is keyed by the calling identity. A caller can only ever reach
the record stored under its own key, so "a profile exists for this owner" is
the whole authorization check: a caller without a profile gets
``ProfileNotFoundError`` for update/delete, never a forbidden error.
"""

from collections.abc import Callable

import structlog

from core.exceptions import (
    InvalidInputError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from domain.entities.profile import (
    SKILLS_MAX_COUNT,
    SKILLS_MIN_COUNT,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    Profile,
    is_valid_skills,
    is_valid_username,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get(self, identity: str) -> Profile | None:
        """Get the profile stored under any identity. Absence is not an error."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get(identity)

    async def create(
        self,
        owner: str,
        username: str,
        skills: list[str],
        location: str | None = None,
        bio: str | None = None,
    ) -> Profile:
        """Create the caller's profile.

        Input bounds are checked before the existence check, so an invalid
        request from an existing owner still answers 400.
        """
        if not is_valid_username(username):
            raise InvalidInputError(
                "username",
                f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters",
            )
        self._require_valid_skills(skills)

        async with self._uow_factory() as uow:
            if await uow.profiles.exists(owner):
                raise ProfileAlreadyExistsError(owner)

            profile = Profile(
                owner=owner,
                username=username,
                skills=list(skills),
                location=location,
                bio=bio,
            )

            created = await uow.profiles.create(profile)
            await uow.commit()

        logger.info("profile_created", owner=owner, skill_count=len(skills))
        return created

    async def update(
        self,
        owner: str,
        skills: list[str],
        location: str | None = None,
        bio: str | None = None,
    ) -> Profile:
        """Replace skills, location and bio of the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(owner)
            if not profile:
                raise ProfileNotFoundError(owner)

            self._require_valid_skills(skills)

            profile.replace_details(skills=skills, location=location, bio=bio)
            updated = await uow.profiles.update(profile)
            await uow.commit()

        logger.info("profile_updated", owner=owner, skill_count=len(skills))
        return updated

    async def delete(self, owner: str) -> None:
        """Delete the caller's profile."""
        async with self._uow_factory() as uow:
            deleted = await uow.profiles.delete(owner)
            if not deleted:
                raise ProfileNotFoundError(owner)
            await uow.commit()

        logger.info("profile_deleted", owner=owner)

    def _require_valid_skills(self, skills: list[str]) -> None:
        if not is_valid_skills(skills):
            raise InvalidInputError(
                "skills",
                f"Skills must contain {SKILLS_MIN_COUNT}-{SKILLS_MAX_COUNT} entries",
            )
