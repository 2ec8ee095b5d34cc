"""
Sample data loaded into a fresh store at startup.

Seed ids are short numeric strings, so they never collide with the
UUIDs generated for records created through mutations.
"""

from ..logging import get_logger
from .entity_store import EntityStore
from .records import CommentRecord, PostRecord, UserRecord

logger = get_logger(__name__)

SEED_USERS = [
    UserRecord(id="1", name="Steve", email="steve.jobs@apple.com", age=55),
    UserRecord(id="2", name="Mark", email="mark.zuckerberg@facebook.com"),
    UserRecord(id="3", name="Elon", email="elon.musk@tesla.com"),
]

SEED_POSTS = [
    PostRecord(
        id="10",
        title="GraphQL 101",
        body="Welcome to GraphQL course",
        published=True,
        author="1",
    ),
    PostRecord(
        id="11",
        title="Node.js 101",
        body="Welcome to Node.js course",
        published=True,
        author="1",
    ),
    PostRecord(id="12", title="Angular 101", body="", published=False, author="2"),
]

SEED_COMMENTS = [
    CommentRecord(
        id="102",
        text="She's got a smile that it seems to me...Reminds me of childhood memories..",
        author="1",
        post="10",
    ),
    CommentRecord(
        id="103",
        text="Maybe I'm too busy being yours to fall for somebody new...",
        author="1",
        post="10",
    ),
    CommentRecord(
        id="104",
        text="I used to love her...But I had to kill her...",
        author="2",
        post="11",
    ),
    CommentRecord(
        id="105",
        text="But life still goes on...I want to break free...",
        author="3",
        post="12",
    ),
]


def seed_store(store: EntityStore) -> EntityStore:
    """
    Load the sample users, posts and comments into ``store``.

    Records are appended parents first so every foreign key resolves.
    """
    with store.transaction():
        for record in [*SEED_USERS, *SEED_POSTS, *SEED_COMMENTS]:
            store.append(record)

    logger.info("Store seeded", **store.counts())
    return store
