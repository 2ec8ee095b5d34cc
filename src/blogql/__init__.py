"""
blogql
GraphQL blog API over an in-memory relational store
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
