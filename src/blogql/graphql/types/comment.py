"""
Comment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .post import Post
    from .user import User


@strawberry.type
class Comment:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    text: str
    author_id: strawberry.Private[str]
    post_id: strawberry.Private[str]

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")]:
        """Get the author of this comment."""
        from ..resolvers.comment import resolve_comment_author

        return await resolve_comment_author(self, info)

    @strawberry.field
    async def post(self, info: strawberry.Info) -> Annotated["Post", strawberry.lazy(".post")]:
        """Get the post this comment belongs to."""
        from ..resolvers.comment import resolve_comment_post

        return await resolve_comment_post(self, info)
