"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 50
SKILLS_MIN_COUNT = 1
SKILLS_MAX_COUNT = 10


def is_valid_username(username: str) -> bool:
    """Check the username length against the allowed bounds (inclusive)."""
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def is_valid_skills(skills: list[str]) -> bool:
    """Check the number of skills against the allowed bounds (inclusive)."""
    return SKILLS_MIN_COUNT <= len(skills) <= SKILLS_MAX_COUNT


@dataclass
class Profile:
    """Domain entity for a skill profile, keyed by its owner's identity."""

    owner: str
    username: str
    skills: list[str] = field(default_factory=list)
    location: str | None = None
    bio: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def replace_details(
        self,
        skills: list[str],
        location: str | None,
        bio: str | None,
    ) -> None:
        """Overwrite the mutable fields. Owner and username never change."""
        self.skills = list(skills)
        self.location = location
        self.bio = bio
        self.updated_at = datetime.utcnow()

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
