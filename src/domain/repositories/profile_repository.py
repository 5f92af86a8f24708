"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile, ProfileWithOwner


class IProfileRepository(Protocol):
    """Repository interface for the Profile aggregate."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by an account."""
        ...

    async def get_with_owner(self, user_id: UUID) -> ProfileWithOwner | None:
        """Get the profile owned by an account, with the owner's display fields."""
        ...

    async def list_with_owners(self) -> list[ProfileWithOwner]:
        """Get every profile with its owner's display fields."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile. Raises DuplicateProfileError if the owner has one."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist the whole aggregate, assigning ids to new sub-entries."""
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by an account and return whether one existed."""
        ...
