"""Profile aggregate: the profile and its embedded experience/education entries."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "instagram", "linkedin")


@dataclass
class Experience:
    """A work experience entry. ``id`` is assigned by the storage adapter."""

    title: str
    company: str
    from_date: date
    location: Optional[str] = None
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None
    id: Optional[UUID] = None


@dataclass
class Education:
    """An education entry. ``id`` is assigned by the storage adapter."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None
    id: Optional[UUID] = None


@dataclass
class ProfileFields:
    """The mutable, caller-supplied part of a profile after normalization."""

    status: str
    skills: list[str]
    company: Optional[str] = None
    website: str = ""
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: dict[str, str] = field(default_factory=dict)


@dataclass
class Profile:
    """Domain entity for a user's professional profile."""

    user_id: UUID
    status: str
    id: UUID = field(default_factory=uuid4)
    company: Optional[str] = None
    website: str = ""
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def apply(self, fields: ProfileFields) -> None:
        """Replace every mutable field. Sub-collections are left alone."""
        self.status = fields.status
        self.skills = list(fields.skills)
        self.company = fields.company
        self.website = fields.website
        self.location = fields.location
        self.bio = fields.bio
        self.github_username = fields.github_username
        self.social = dict(fields.social)

    def add_experience(self, entry: Experience) -> None:
        self.experience.insert(0, entry)

    def add_education(self, entry: Education) -> None:
        self.education.insert(0, entry)

    def remove_experience(self, entry_id: str) -> bool:
        """Remove the experience entry with ``entry_id``. Returns False if absent."""
        return _remove_by_id(self.experience, entry_id)

    def remove_education(self, entry_id: str) -> bool:
        """Remove the education entry with ``entry_id``. Returns False if absent."""
        return _remove_by_id(self.education, entry_id)


def _remove_by_id(entries: list, entry_id: str) -> bool:
    """Match on the exact canonical (lower-case) id string. Other spellings of
    the same UUID do not match and leave the list unchanged.
    """
    index = next(
        (i for i, entry in enumerate(entries) if str(entry.id) == entry_id),
        -1,
    )
    if index == -1:
        return False
    del entries[index]
    return True


@dataclass(frozen=True, slots=True)
class OwnerSummary:
    """Public display fields of the owning account."""

    id: UUID
    name: str
    avatar: str


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile bundled with its owner's display fields."""

    profile: Profile
    owner: Optional[OwnerSummary]
