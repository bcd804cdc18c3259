"""
API package containing versioned REST routes.

A version subpackage exposes a top-level ``router`` which includes all
of its endpoints.  The GraphQL endpoint lives in ``app.graphql`` and is
mounted separately.
"""
