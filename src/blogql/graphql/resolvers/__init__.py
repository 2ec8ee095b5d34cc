"""Resolver package for GraphQL schema.

Resolver functions referenced by the GraphQL types, queries and mutations.
Each one reads the entity store from the GraphQL context and converts store
records into GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.
