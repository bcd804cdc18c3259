"""
GraphQL API layer.

This package contains:
- types.py: Strawberry type definitions built from the pydantic schemas
- schema.py: Query and Mutation resolvers, the combined schema and the
  FastAPI router that serves it
"""

from .schema import build_graphql_router, schema

__all__ = ["build_graphql_router", "schema"]
