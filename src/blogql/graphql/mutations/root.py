"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


# Input types for mutations
@strawberry.input
class CreateUserInput:
    """Input for creating a new user."""

    name: str
    email: str
    age: int | None = None


@strawberry.input
class CreatePostInput:
    """Input for creating a new post."""

    title: str
    body: str
    published: bool
    author: strawberry.ID


@strawberry.input
class CreateCommentInput:
    """Input for creating a new comment."""

    text: str
    author: strawberry.ID
    post: strawberry.ID


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, data: CreateUserInput) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, data)

    @strawberry.mutation(name="createPost")
    async def create_post(self, info: strawberry.Info, data: CreatePostInput) -> Post:
        """Create a new post."""
        from ..resolvers.post import create_post

        return await create_post(info, data)

    @strawberry.mutation(name="createComment")
    async def create_comment(self, info: strawberry.Info, data: CreateCommentInput) -> Comment:
        """Create a new comment on a published post."""
        from ..resolvers.comment import create_comment

        return await create_comment(info, data)
