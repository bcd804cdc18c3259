"""
Top-level package for the Car GraphQL Server.

This file makes ``car_graphql_server`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``car_graphql_server.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
