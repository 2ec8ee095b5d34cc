from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import PostRecord, generate_record_id
from ..context import get_store_from_info
from .user import ME_PLACEHOLDER, matches_query, to_user_type

if TYPE_CHECKING:
    from ..mutations.root import CreatePostInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

# Placeholder returned by the `post` query; not backed by the store.
POST_PLACEHOLDER = PostRecord(
    id="q2ewqw",
    title="GraphQL 101",
    body="Welcome",
    published=True,
    author=ME_PLACEHOLDER.id,
)


def to_post_type(record: PostRecord) -> Post:
    """Convert a store record to the GraphQL Post type."""
    from ..types.post import Post as PostType

    return PostType(
        id=strawberry.ID(record.id),
        title=record.title,
        body=record.body,
        published=record.published,
        author_id=record.author,
    )


# Query resolvers
async def resolve_posts(info: strawberry.Info, query: str | None = None) -> list[Post]:
    """
    Resolve all posts, or those whose title or body contains ``query``.

    Unpublished posts are included.
    """
    store = get_store_from_info(info)

    if not query:
        records = store.posts.all()
    else:
        records = store.posts.filter(
            lambda post: matches_query(post.title, query) or matches_query(post.body, query)
        )

    return [to_post_type(record) for record in records]


async def resolve_example_post(info: strawberry.Info) -> Post:
    _ = info
    return to_post_type(POST_PLACEHOLDER)


# Field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> User:
    """Resolve the user who wrote this post.

    The example post is written by the example user; neither is in the store.
    """
    if post.id == POST_PLACEHOLDER.id:
        return to_user_type(ME_PLACEHOLDER)

    store = get_store_from_info(info)

    author = store.users.get(post.author_id)
    if not author:
        logger.error("Post author not found", post_id=post.id, author_id=post.author_id)
        raise RuntimeError("Post author not found")

    return to_user_type(author)


async def resolve_post_comments(post: Post, info: strawberry.Info) -> list[Comment]:
    """Resolve comments left on this post."""
    from .comment import to_comment_type

    store = get_store_from_info(info)
    records = store.comments.filter(lambda comment: comment.post == post.id)
    return [to_comment_type(record) for record in records]


# Mutation resolvers
async def create_post(info: strawberry.Info, data: CreatePostInput) -> Post:
    """
    Create a new post.

    Raises:
        NotFoundError: If the author does not exist
    """
    store = get_store_from_info(info)
    author_id = str(data.author)

    with store.transaction():
        if store.users.get(author_id) is None:
            logger.info("Post creation rejected: author not found", author_id=author_id)
            raise NotFoundError("User not found")

        record = PostRecord(
            id=generate_record_id(),
            title=data.title,
            body=data.body,
            published=data.published,
            author=author_id,
        )
        store.append(record)

    logger.info("Post created", post_id=record.id, author_id=author_id, title=record.title)

    return to_post_type(record)
