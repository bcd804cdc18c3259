"""Shared fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from car_graphql_server.app.core.config import Settings
from car_graphql_server.app.main import create_app
from car_graphql_server.app.services.car_service import CarRepository, UniquenessPolicy
from car_graphql_server.app.services.license_plate_service import SwedishLicensePlateGenerator


@pytest.fixture
def plate_generator():
    return SwedishLicensePlateGenerator(random.Random(1234))


@pytest.fixture
def empty_repository(plate_generator):
    return CarRepository(plate_generator, seed=False)


@pytest.fixture
def repository(plate_generator):
    return CarRepository(plate_generator)


@pytest.fixture
def brand_model_repository(plate_generator):
    return CarRepository(plate_generator, policy=UniquenessPolicy.BRAND_MODEL)


@pytest.fixture
def client():
    app = create_app(Settings())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def brand_model_client():
    app = create_app(Settings(car_unique_key="brand_model"))
    with TestClient(app) as test_client:
        yield test_client
