"""Account domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Account:
    """Domain entity for a registered user account."""

    id: UUID = field(default_factory=uuid4)
    email: str = ""
    name: str = ""
    avatar: str = ""
    created_at: datetime = field(default_factory=datetime.utcnow)
