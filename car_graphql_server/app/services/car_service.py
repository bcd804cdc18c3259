"""
In-memory car repository.

The ``CarRepository`` keeps cars in a plain list standing in for a
database table.  It is seeded with three cars on construction and grows
through ``add``; nothing is ever updated or deleted, and everything is
lost when the process exits.

A single lock guards the list so one repository can be shared between
threads.  Lookups are linear scans.

Which fields make two cars "the same" is decided by a
``UniquenessPolicy``; ``add`` rejects a car whose key is already
present with ``DuplicateCarError``.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Hashable, List, Optional
from uuid import UUID, uuid4

from ..schemas.car import Car, NewCar
from .license_plate_service import LicensePlateGenerator

# Brand, model and year of the cars every repository starts with.
SEED_CARS = (
    ("Porsche", "911", "1969"),
    ("Volvo", "V60", "2019"),
    ("Volvo", "142", "1971"),
)


class CarServiceError(Exception):
    """Base class for car service errors."""


class DuplicateCarError(CarServiceError):
    """Raised when adding a car whose uniqueness key is already stored."""

    def __init__(self, car: Car, key_description: str) -> None:
        super().__init__(f"A car with {key_description} already exists")
        self.car = car
        self.key_description = key_description


class UniquenessPolicy(str, Enum):
    """Fields compared when checking a new car for duplicates."""

    ID = "id"
    BRAND_MODEL = "brand_model"

    def key(self, car: Car) -> Hashable:
        if self is UniquenessPolicy.BRAND_MODEL:
            return (car.brand, car.model)
        return car.id

    def describe(self, car: Car) -> str:
        """Human readable form of ``car``'s key, used in error messages."""
        if self is UniquenessPolicy.BRAND_MODEL:
            return f"brand {car.brand} and model {car.model}"
        return f"id {car.id}"


def build_car(new_car: NewCar, plate_generator: LicensePlateGenerator) -> Car:
    """Turn client input into a car with a freshly generated plate."""
    return Car(
        id=new_car.id,
        license_plate=plate_generator.generate(),
        brand=new_car.brand,
        model=new_car.model,
        year=new_car.year,
    )


class CarRepository:
    """Mutable, lock-guarded collection of cars.

    Parameters
    ----------
    plate_generator : LicensePlateGenerator
        Used to give the seeded cars their plates.
    policy : UniquenessPolicy
        Key used by ``add`` to detect duplicates.
    seed : bool
        Start with the three demo cars.  Pass ``False`` for an empty
        repository.
    """

    def __init__(
        self,
        plate_generator: LicensePlateGenerator,
        policy: UniquenessPolicy = UniquenessPolicy.ID,
        seed: bool = True,
    ) -> None:
        self.policy = policy
        self._lock = threading.Lock()
        self._cars: List[Car] = []
        if seed:
            for brand, model, year in SEED_CARS:
                self._cars.append(
                    Car(
                        id=uuid4(),
                        license_plate=plate_generator.generate(),
                        brand=brand,
                        model=model,
                        year=year,
                    )
                )

    def all(self) -> List[Car]:
        """Return a snapshot of every stored car in insertion order."""
        with self._lock:
            return list(self._cars)

    def find(self, brand: str) -> List[Car]:
        """Return the cars of the given brand, in insertion order."""
        with self._lock:
            return [car for car in self._cars if car.brand == brand]

    def get(self, car_id: UUID) -> Optional[Car]:
        with self._lock:
            return next((car for car in self._cars if car.id == car_id), None)

    def add(self, car: Car) -> Car:
        """Store ``car`` and return it.

        Raises ``DuplicateCarError`` if a stored car has the same key
        under the repository's policy; the repository is left unchanged.
        """
        logger = logging.getLogger(__name__)
        key = self.policy.key(car)
        with self._lock:
            if any(self.policy.key(existing) == key for existing in self._cars):
                logger.warning("Rejected duplicate car %s (%s)", car.id, self.policy.describe(car))
                raise DuplicateCarError(car, self.policy.describe(car))
            self._cars.append(car)
        logger.info("Added car %s: %s %s [%s]", car.id, car.brand, car.model, car.license_plate)
        return car

    def log_contents(self) -> None:
        """Log every stored car, one per line."""
        logger = logging.getLogger(__name__)
        lines = "\n".join(
            f"{car.id} {car.license_plate} {car.brand} {car.model} {car.year or ''}".rstrip()
            for car in self.all()
        )
        logger.info("Randomized cars:\n%s", lines)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cars)
