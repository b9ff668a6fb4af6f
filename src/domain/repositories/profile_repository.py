"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities, keyed by owner identity."""

    async def get(self, owner: str) -> Profile | None:
        """Get the profile owned by an identity."""
        ...

    async def exists(self, owner: str) -> bool:
        """Check whether an identity owns a profile."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile.

        Raises:
            ProfileAlreadyExistsError: If the owner key is already taken
        """
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist skills, location and bio of an existing profile."""
        ...

    async def delete(self, owner: str) -> bool:
        """Delete a profile and return success status."""
        ...
