from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import ConflictError
from ...logging import get_logger
from ...store import UserRecord, generate_record_id
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..mutations.root import CreateUserInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

# Placeholder returned by the `me` query; not backed by the store.
ME_PLACEHOLDER = UserRecord(id="123abc", name="John", email="john@doe.com")


def to_user_type(record: UserRecord) -> User:
    """Convert a store record to the GraphQL User type."""
    from ..types.user import User as UserType

    return UserType(
        id=strawberry.ID(record.id),
        name=record.name,
        email=record.email,
        age=record.age,
    )


def matches_query(value: str, query: str) -> bool:
    """Case-insensitive substring match."""
    return query.lower() in value.lower()


# Query resolvers
async def resolve_users(info: strawberry.Info, query: str | None = None) -> list[User]:
    """
    Resolve all users, or those whose name contains ``query``.

    An empty query is treated the same as no query.
    """
    store = get_store_from_info(info)

    if not query:
        records = store.users.all()
    else:
        records = store.users.filter(lambda user: matches_query(user.name, query))

    return [to_user_type(record) for record in records]


async def resolve_current_user(info: strawberry.Info) -> User:
    _ = info
    return to_user_type(ME_PLACEHOLDER)


# Field resolvers
async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    """Resolve posts whose author is this user."""
    from .post import to_post_type

    store = get_store_from_info(info)
    records = store.posts.filter(lambda post: post.author == user.id)
    return [to_post_type(record) for record in records]


async def resolve_user_comments(user: User, info: strawberry.Info) -> list[Comment]:
    """Resolve comments whose author is this user."""
    from .comment import to_comment_type

    store = get_store_from_info(info)
    records = store.comments.filter(lambda comment: comment.author == user.id)
    return [to_comment_type(record) for record in records]


# Mutation resolvers
async def create_user(info: strawberry.Info, data: CreateUserInput) -> User:
    """
    Create a new user.

    The name is stored as given: an empty string is accepted, since the only
    write-time failures are a taken email (CONFLICT) and a missing reference
    (NOT_FOUND). Email equality is exact.

    Raises:
        ConflictError: If another user already has the same email
    """
    store = get_store_from_info(info)

    with store.transaction():
        taken_by = store.users.filter(lambda user: user.email == data.email)
        if taken_by:
            logger.info("User creation rejected: email taken", existing_user_id=taken_by[0].id)
            raise ConflictError("Email taken")

        record = UserRecord(
            id=generate_record_id(),
            name=data.name,
            email=data.email,
            age=data.age,
        )
        store.append(record)

    logger.info("User created", user_id=record.id)

    return to_user_type(record)
