"""
Top-level router for version 1 of the REST API.
"""

from fastapi import APIRouter

from .endpoints import cars, license_plates

router = APIRouter()

router.include_router(cars.router, prefix="/cars", tags=["cars"])
router.include_router(license_plates.router, prefix="/license-plates", tags=["license-plates"])
