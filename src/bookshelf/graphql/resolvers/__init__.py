"""Resolver package for GraphQL schema.

Resolver functions referenced by the GraphQL types, queries and mutations.
Each one reads or appends to the record store carried in the GraphQL context.
"""

# Intentionally empty; functions are defined in sibling modules.
