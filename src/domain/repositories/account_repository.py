"""Account repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.account import Account


class IAccountRepository(Protocol):
    """Repository interface for Account entities."""

    async def get(self, id: UUID) -> Account | None:
        """Get an account by ID."""
        ...

    async def create(self, account: Account) -> Account:
        """Create a new account."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an account and return whether it existed."""
        ...
