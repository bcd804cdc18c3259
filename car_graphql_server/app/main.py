"""
Main entrypoint for the Car GraphQL Server.

This module assembles the FastAPI application: it sets up logging,
builds the license plate generator, the car repository and the owner
service, and mounts both the GraphQL endpoint and the versioned REST
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn car_graphql_server.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .graphql import build_graphql_router
from .services.car_service import CarRepository, UniquenessPolicy
from .services.license_plate_service import SwedishLicensePlateGenerator
from .services.owner_service import OwnerService


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The service objects
        are available as ``app.state.car_repository``,
        ``app.state.plate_generator`` and ``app.state.owner_service``.
    """
    app_settings = app_settings or settings
    # Logging first so that the repository seeding below is logged.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    plate_generator = SwedishLicensePlateGenerator()
    car_repository = CarRepository(
        plate_generator,
        policy=UniquenessPolicy(app_settings.car_unique_key),
    )
    owner_service = OwnerService()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        car_repository.log_contents()
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.car_repository = car_repository
    app.state.plate_generator = plate_generator
    app.state.owner_service = owner_service

    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(
        build_graphql_router(car_repository, plate_generator, owner_service, graphiql=app_settings.graphiql),
        prefix="/graphql",
    )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
