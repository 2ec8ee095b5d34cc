"""
Record types held by the entity store.

Records reference each other by foreign key only; relations are derived
at read time by the field resolvers.
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class UserRecord:
    id: str
    name: str
    email: str
    age: int | None = None


@dataclass(frozen=True)
class PostRecord:
    id: str
    title: str
    body: str
    published: bool
    author: str  # UserRecord.id


@dataclass(frozen=True)
class CommentRecord:
    id: str
    text: str
    author: str  # UserRecord.id
    post: str  # PostRecord.id


Record = UserRecord | PostRecord | CommentRecord


def generate_record_id() -> str:
    """Generate a random 128-bit record identifier."""
    return str(uuid4())
