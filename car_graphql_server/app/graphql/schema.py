"""
Query and Mutation resolvers and the Strawberry schema.

Resolvers read their collaborators from ``info.context``:

* ``car_repository`` - the ``CarRepository`` owned by the application;
* ``plate_generator`` - the ``LicensePlateGenerator`` used for new cars;
* ``owner_service`` - the ``OwnerService`` behind ``Car.owners``.

``build_graphql_router`` returns a FastAPI router whose context getter
supplies those objects, so the schema itself holds no state.

A ``DuplicateCarError`` raised by ``addCar`` propagates to Strawberry,
which reports its message in the ``errors`` list of the response.
"""

import datetime
import logging
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from ..services.car_service import CarRepository, build_car
from ..services.license_plate_service import LicensePlateGenerator
from ..services.owner_service import OwnerService
from .types import Car, LicensePlate, NewCar, UUIDThing


@strawberry.type
class Query:
    @strawberry.field
    def cars(self, info: Info) -> List[Car]:
        return [Car.from_schema(car) for car in info.context["car_repository"].all()]

    @strawberry.field
    def car_by_brand(self, info: Info, brand: str) -> List[Car]:
        return [Car.from_schema(car) for car in info.context["car_repository"].find(brand)]

    @strawberry.field
    def car_by_id(self, info: Info, id: UUID) -> Optional[Car]:
        car = info.context["car_repository"].get(id)
        return Car.from_schema(car) if car is not None else None

    @strawberry.field
    def generate_license_plate(self, info: Info) -> LicensePlate:
        return LicensePlate(value=info.context["plate_generator"].generate())

    @strawberry.field
    def generate_car_id(self) -> UUID:
        return uuid4()

    @strawberry.field
    def uuid_thing(self) -> UUIDThing:
        return UUIDThing(
            uuid=uuid4(),
            name="Foo",
            date=datetime.date.today(),
            date_time=datetime.datetime.now(datetime.timezone.utc),
        )


@strawberry.type
class Mutation:
    @strawberry.mutation
    def add_car(self, info: Info, new_car: NewCar) -> Car:
        logger = logging.getLogger(__name__)
        logger.info("addCar %s %s %s", new_car.id, new_car.brand, new_car.model)
        car = build_car(new_car.to_schema(), info.context["plate_generator"])
        return Car.from_schema(info.context["car_repository"].add(car))


schema = strawberry.Schema(query=Query, mutation=Mutation)


def build_graphql_router(
    car_repository: CarRepository,
    plate_generator: LicensePlateGenerator,
    owner_service: OwnerService,
    graphiql: bool = True,
) -> GraphQLRouter:
    """Create a router serving ``schema`` with the given collaborators."""

    async def get_context() -> Dict[str, Any]:
        return {
            "car_repository": car_repository,
            "plate_generator": plate_generator,
            "owner_service": owner_service,
        }

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
