"""
Strawberry types exposed by the GraphQL schema.

Field names are converted to camelCase by Strawberry, so
``license_plate`` is served as ``licensePlate``.  ``UUID``,
``datetime.date`` and ``datetime.datetime`` map to the built-in
``UUID``, ``Date`` and ``DateTime`` scalars, which serialize to and
parse from their ISO string forms.
"""

import datetime
from uuid import UUID
from typing import List, Optional

import strawberry
from strawberry.types import Info

from ..schemas import car as car_schemas
from ..schemas.person import Person as PersonSchema


@strawberry.type
class LicensePlate:
    value: str


@strawberry.type
class Person:
    id: strawberry.ID
    name: str

    @classmethod
    def from_schema(cls, person: PersonSchema) -> "Person":
        return cls(id=strawberry.ID(person.id), name=person.name)


@strawberry.type
class Car:
    id: UUID
    license_plate: LicensePlate
    brand: str
    model: str
    year: Optional[str]

    @strawberry.field(description="Only resolved when the query asks for it.")
    def owners(self, info: Info) -> List[Person]:
        owner_service = info.context["owner_service"]
        return [Person.from_schema(p) for p in owner_service.random_owners(self.id)]

    @classmethod
    def from_schema(cls, car: car_schemas.Car) -> "Car":
        return cls(
            id=car.id,
            license_plate=LicensePlate(value=car.license_plate),
            brand=car.brand,
            model=car.model,
            year=car.year,
        )


@strawberry.input
class NewCar:
    id: UUID
    brand: str
    model: str
    year: Optional[str] = None

    def to_schema(self) -> car_schemas.NewCar:
        return car_schemas.NewCar(id=self.id, brand=self.brand, model=self.model, year=self.year)


@strawberry.type
class UUIDThing:
    uuid: UUID
    name: str
    date: datetime.date
    date_time: datetime.datetime
