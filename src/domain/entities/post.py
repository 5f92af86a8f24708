"""Post domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Post:
    """Domain entity for a post authored by an account."""

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str = ""
    avatar: str = ""
    created_at: datetime = field(default_factory=datetime.utcnow)
