"""
Application package initializer.

This package contains the main entrypoint for the server and all of its
submodules.  Domain logic (license plate generation, the in-memory car
repository and the owner roster) lives in ``services``; pydantic models
in ``schemas``; the Strawberry GraphQL schema in ``graphql``; and the
REST routes under ``api/<version>/``.
"""

from .main import app  # noqa: F401
