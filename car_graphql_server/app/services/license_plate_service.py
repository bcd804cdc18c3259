"""
License plate generation.

Plates follow the Swedish format introduced in 2019: three letters, a
space, two digits and a final character.  The final position excludes
letters that are easy to confuse with digits or with each other
(I, O, Q, V) as well as Å, Ä and Ö.  See
https://opus.se/nyheter/nyheter/2019-01-16-nytt-format-for-registreringsnummer

The generator does not guarantee distinct plates and is not meant to be
cryptographically secure.
"""

import random
from typing import Optional

FIRST_CHARACTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZÅÄÖ"
LAST_CHARACTERS = "ABCDEFGHJKLMNPRSTUWXYZ"
DIGITS = "0123456789"


class LicensePlateGenerator:
    """Interface for license plate generators."""

    def generate(self) -> str:
        """Return a generated license plate."""
        raise NotImplementedError


class SwedishLicensePlateGenerator(LicensePlateGenerator):
    """Generate plates of the form ``LLL DDL``.

    Parameters
    ----------
    rng : Optional[random.Random]
        Source of randomness.  Pass a seeded instance to get a
        reproducible sequence of plates.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def generate(self) -> str:
        return f"{self._first_part()} {self._second_part()}"

    def _first_part(self) -> str:
        return self._randomize(FIRST_CHARACTERS, 3)

    def _second_part(self) -> str:
        return self._randomize(DIGITS, 2) + self._randomize(LAST_CHARACTERS, 1)

    def _randomize(self, source: str, length: int) -> str:
        return "".join(self._rng.choice(source) for _ in range(length))
