"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for Post entities."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        ...

    async def get_all_for_user(self, user_id: UUID) -> list[Post]:
        """Get all posts authored by an account."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete all posts authored by an account and return how many."""
        ...
