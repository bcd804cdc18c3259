"""
Owners of cars.

There is no ownership data; every lookup draws a random pair from a
fixed roster of people.
"""

import logging
import random
from typing import List, Optional
from uuid import UUID

from ..schemas.person import Person

PERSONS = (
    Person(id="1", name="Keith Richards"),
    Person(id="2", name="Steven Tyler"),
    Person(id="3", name="Samantha Fox"),
    Person(id="4", name="Bonnie Raitt"),
)


class OwnerService:
    """Hand out owners for cars."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def random_owners(self, car_id: Optional[UUID] = None, count: int = 2) -> List[Person]:
        """Return ``count`` distinct people from the roster in random order."""
        logger = logging.getLogger(__name__)
        if car_id is not None:
            logger.info("Fetching owners for car %s", car_id)
        return self._rng.sample(PERSONS, count)
