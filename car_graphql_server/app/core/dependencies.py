"""
FastAPI dependencies for the REST endpoints.

``create_app`` stores the service objects on ``app.state``; these
helpers hand them to route handlers via ``Depends``.
"""

from fastapi import Request

from ..services.car_service import CarRepository
from ..services.license_plate_service import LicensePlateGenerator


def get_car_repository(request: Request) -> CarRepository:
    return request.app.state.car_repository


def get_plate_generator(request: Request) -> LicensePlateGenerator:
    return request.app.state.plate_generator
