"""In-memory entity store for users, posts and comments."""

from .entity_store import Collection, EntityStore
from .records import CommentRecord, PostRecord, Record, UserRecord, generate_record_id
from .seed_data import seed_store

__all__ = [
    "Collection",
    "CommentRecord",
    "EntityStore",
    "PostRecord",
    "Record",
    "UserRecord",
    "generate_record_id",
    "seed_store",
]
