"""Tests for license plate generation."""

import random

from car_graphql_server.app.services.license_plate_service import (
    DIGITS,
    FIRST_CHARACTERS,
    LAST_CHARACTERS,
    SwedishLicensePlateGenerator,
)


class TestSwedishLicensePlateGenerator:
    """Tests for SwedishLicensePlateGenerator."""

    def test_format(self):
        """Every plate is three letters, a space, two digits and a letter."""
        generator = SwedishLicensePlateGenerator()
        for _ in range(500):
            plate = generator.generate()
            assert len(plate) == 7
            assert all(c in FIRST_CHARACTERS for c in plate[:3])
            assert plate[3] == " "
            assert all(c in DIGITS for c in plate[4:6])
            assert plate[6] in LAST_CHARACTERS

    def test_last_character_excludes_confusable_letters(self):
        generator = SwedishLicensePlateGenerator(random.Random(7))
        last = {generator.generate()[6] for _ in range(2000)}
        assert last.isdisjoint(set("IOQVÅÄÖ"))

    def test_first_part_uses_extended_alphabet(self):
        """Accented letters show up in the first three positions."""
        generator = SwedishLicensePlateGenerator(random.Random(7))
        first = set()
        for _ in range(2000):
            first.update(generator.generate()[:3])
        assert first == set(FIRST_CHARACTERS)

    def test_seeded_generators_agree(self):
        a = SwedishLicensePlateGenerator(random.Random(42))
        b = SwedishLicensePlateGenerator(random.Random(42))
        assert [a.generate() for _ in range(10)] == [b.generate() for _ in range(10)]
