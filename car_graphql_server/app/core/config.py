"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the demo server runs
without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Car GraphQL Server")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Which field(s) make a car unique in the repository: ``id`` or
    # ``brand_model``.
    car_unique_key: str = os.getenv("CAR_UNIQUE_KEY", "id")

    # Serve the GraphiQL IDE on GET /graphql.
    graphiql: bool = os.getenv("GRAPHIQL", "true").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
