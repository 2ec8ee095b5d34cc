"""
Error kinds raised by mutation resolvers.

graphql-core copies the ``extensions`` mapping of the original exception onto
the GraphQL error it builds, so clients receive ``extensions.code``.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Closed set of failure kinds a mutation can report."""

    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"


class BlogError(Exception):
    """Base class for write-time invariant violations."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.kind.value}


class ConflictError(BlogError):
    """A uniqueness constraint was violated."""

    kind = ErrorKind.CONFLICT


class NotFoundError(BlogError):
    """A referenced record does not exist (or is not eligible)."""

    kind = ErrorKind.NOT_FOUND
