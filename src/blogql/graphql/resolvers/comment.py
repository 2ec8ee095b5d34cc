from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import CommentRecord, generate_record_id
from ..context import get_store_from_info
from .post import to_post_type
from .user import to_user_type

if TYPE_CHECKING:
    from ..mutations.root import CreateCommentInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


def to_comment_type(record: CommentRecord) -> Comment:
    """Convert a store record to the GraphQL Comment type."""
    from ..types.comment import Comment as CommentType

    return CommentType(
        id=strawberry.ID(record.id),
        text=record.text,
        author_id=record.author,
        post_id=record.post,
    )


# Query resolvers
async def resolve_comments(info: strawberry.Info) -> list[Comment]:
    """Resolve every comment in insertion order."""
    store = get_store_from_info(info)
    return [to_comment_type(record) for record in store.comments.all()]


# Field resolvers
async def resolve_comment_author(comment: Comment, info: strawberry.Info) -> User:
    """Resolve the user who wrote this comment."""
    store = get_store_from_info(info)

    author = store.users.get(comment.author_id)
    if not author:
        logger.error(
            "Comment author not found", comment_id=comment.id, author_id=comment.author_id
        )
        raise RuntimeError("Comment author not found")

    return to_user_type(author)


async def resolve_comment_post(comment: Comment, info: strawberry.Info) -> Post:
    """Resolve the post this comment belongs to."""
    store = get_store_from_info(info)

    post = store.posts.get(comment.post_id)
    if not post:
        logger.error("Comment post not found", comment_id=comment.id, post_id=comment.post_id)
        raise RuntimeError("Comment post not found")

    return to_post_type(post)


# Mutation resolvers
async def create_comment(info: strawberry.Info, data: CreateCommentInput) -> Comment:
    """
    Create a new comment on a published post.

    Raises:
        NotFoundError: If the author is missing, or the post is missing or
            unpublished. The two causes are reported with one message.
    """
    store = get_store_from_info(info)
    author_id = str(data.author)
    post_id = str(data.post)

    with store.transaction():
        author_exists = store.users.get(author_id) is not None
        post = store.posts.get(post_id)
        post_open = post is not None and post.published

        if not author_exists or not post_open:
            logger.info(
                "Comment creation rejected: author or post invalid",
                author_id=author_id,
                post_id=post_id,
                author_exists=author_exists,
                post_open=post_open,
            )
            raise NotFoundError("Unable to find user and post")

        record = CommentRecord(
            id=generate_record_id(),
            text=data.text,
            author=author_id,
            post=post_id,
        )
        store.append(record)

    logger.info("Comment created", comment_id=record.id, author_id=author_id, post_id=post_id)

    return to_comment_type(record)
