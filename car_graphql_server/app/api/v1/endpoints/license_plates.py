"""License plate endpoints for API v1."""

from fastapi import APIRouter, Depends

from car_graphql_server.app.core.dependencies import get_plate_generator
from car_graphql_server.app.schemas.car import LicensePlate
from car_graphql_server.app.services.license_plate_service import LicensePlateGenerator

router = APIRouter()


@router.get("/generate", response_model=LicensePlate)
async def generate_license_plate(
    plate_generator: LicensePlateGenerator = Depends(get_plate_generator),
) -> LicensePlate:
    """Return a random license plate.  Plates are not reserved."""
    return LicensePlate(value=plate_generator.generate())
