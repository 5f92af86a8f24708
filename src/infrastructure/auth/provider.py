"""Token verification contract used by the auth dependency."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass(frozen=True)
class TokenUser:
    """The account a bearer token was issued to.

    ``id`` is the account id that owns the caller's profile and posts.
    """

    id: UUID
    email: str
    name: Optional[str] = None


class IAuthProvider(Protocol):
    """Issues and verifies bearer tokens for accounts."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Return the token's account, or None when it does not verify."""
        ...

    def create_token(self, user: TokenUser) -> str:
        """Sign a token for ``user``."""
        ...
