"""
Root GraphQL query definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def users(self, info: strawberry.Info, query: str | None = None) -> list[User]:
        """Get users, optionally filtered by a case-insensitive name match."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info, query)

    @strawberry.field
    async def posts(self, info: strawberry.Info, query: str | None = None) -> list[Post]:
        """Get posts, optionally filtered by a case-insensitive title or body match."""
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info, query)

    @strawberry.field
    async def comments(self, info: strawberry.Info) -> list[Comment]:
        """Get all comments."""
        from ..resolvers.comment import resolve_comments

        return await resolve_comments(info)

    @strawberry.field
    async def me(self, info: strawberry.Info) -> User:
        """Get an example user."""
        from ..resolvers.user import resolve_current_user

        return await resolve_current_user(info)

    @strawberry.field
    async def post(self, info: strawberry.Info) -> Post:
        """Get an example post."""
        from ..resolvers.post import resolve_example_post

        return await resolve_example_post(info)
