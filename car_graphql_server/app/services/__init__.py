"""
Service layer abstraction.

Each service encapsulates the business logic for one concern.  Services
are plain objects constructed by ``create_app`` and handed to the
GraphQL and REST layers, so the API handlers never reach for module
level state.
"""
