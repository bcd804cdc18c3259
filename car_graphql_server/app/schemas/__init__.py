"""
Pydantic schema definitions for API payloads.

Cars are stored in the repository as the ``Car`` model defined here;
the REST endpoints use the same models for request and response
bodies.  GraphQL types in ``app.graphql`` are built from them.
"""
