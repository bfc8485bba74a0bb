"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.user import UserIdentity

SOCIAL_PLATFORMS: tuple[str, ...] = (
    "youtube",
    "facebook",
    "twitter",
    "linkedin",
    "instagram",
)


def parse_skills(raw: str) -> list[str]:
    """Split a comma-separated skills string into a trimmed, ordered list."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


@dataclass
class Profile:
    """Domain entity for a developer profile (one per user)."""

    user_id: UUID
    status: str
    skills: list[str]
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    social: dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass
class ProfileInput:
    """Fields supplied to a profile upsert.

    ``None`` means the field was not supplied. ``skills`` is the raw
    comma-separated string; social platforms are flat keys.
    """

    status: str | None = None
    skills: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    youtube: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def supplied_fields(self) -> dict[str, str]:
        """Plain profile fields that were supplied with a non-empty value."""
        values = {
            "status": self.status,
            "company": self.company,
            "website": self.website,
            "location": self.location,
            "bio": self.bio,
            "github_username": self.github_username,
        }
        return {name: value for name, value in values.items() if value}

    def supplied_social(self) -> dict[str, str]:
        """Recognized social platform links that were supplied."""
        return {
            platform: getattr(self, platform)
            for platform in SOCIAL_PLATFORMS
            if getattr(self, platform)
        }


@dataclass(frozen=True, slots=True)
class ProfileView:
    """Read-only value object: a Profile joined with its user's display fields."""

    profile: Profile
    user: UserIdentity
