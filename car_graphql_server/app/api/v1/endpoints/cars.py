"""
Car endpoints for API v1.

These routes mirror the GraphQL ``cars``, ``carByBrand``, ``carById``
and ``addCar`` operations.  The server generates the license plate of
every added car; clients only supply id, brand, model and year.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from car_graphql_server.app.core.dependencies import get_car_repository, get_plate_generator
from car_graphql_server.app.schemas.car import Car, NewCar
from car_graphql_server.app.services.car_service import (
    CarRepository,
    DuplicateCarError,
    build_car,
)
from car_graphql_server.app.services.license_plate_service import LicensePlateGenerator

router = APIRouter()


@router.get("/", response_model=List[Car])
async def list_cars(
    brand: Optional[str] = Query(None, description="Only return cars of this brand"),
    repository: CarRepository = Depends(get_car_repository),
) -> List[Car]:
    """Return all cars in insertion order, optionally filtered by brand."""
    if brand is not None:
        return repository.find(brand)
    return repository.all()


@router.get("/{car_id}", response_model=Car)
async def get_car(
    car_id: UUID,
    repository: CarRepository = Depends(get_car_repository),
) -> Car:
    """Retrieve a single car by ID.

    Returns HTTP 404 if the car is not found.
    """
    car = repository.get(car_id)
    if car is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found")
    return car


@router.post("/", response_model=Car, status_code=status.HTTP_201_CREATED)
async def create_car(
    car_in: NewCar,
    repository: CarRepository = Depends(get_car_repository),
    plate_generator: LicensePlateGenerator = Depends(get_plate_generator),
) -> Car:
    """Add a car with a freshly generated license plate.

    Returns HTTP 409 if a car with the same key already exists.
    """
    try:
        return repository.add(build_car(car_in, plate_generator))
    except DuplicateCarError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
