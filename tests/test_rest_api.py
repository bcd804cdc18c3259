"""Tests for the v1 REST endpoints."""

import uuid


class TestCarsEndpoints:
    """Tests for /api/v1/cars."""

    def test_list(self, client):
        response = client.get("/api/v1/cars/")
        assert response.status_code == 200
        assert [c["brand"] for c in response.json()] == ["Porsche", "Volvo", "Volvo"]

    def test_filter_by_brand(self, client):
        response = client.get("/api/v1/cars/", params={"brand": "Porsche"})
        assert [c["model"] for c in response.json()] == ["911"]

    def test_get(self, client):
        car = client.app.state.car_repository.all()[0]
        response = client.get(f"/api/v1/cars/{car.id}")
        assert response.status_code == 200
        assert response.json()["license_plate"] == car.license_plate

    def test_get_missing(self, client):
        response = client.get(f"/api/v1/cars/{uuid.uuid4()}")
        assert response.status_code == 404

    def test_get_malformed_id(self, client):
        response = client.get("/api/v1/cars/not-a-uuid")
        assert response.status_code == 422

    def test_create(self, client):
        car_id = str(uuid.uuid4())
        response = client.post(
            "/api/v1/cars/",
            json={"id": car_id, "brand": "Saab", "model": "900", "year": "1987"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == car_id
        assert len(body["license_plate"]) == 7
        assert client.get(f"/api/v1/cars/{car_id}").json() == body

    def test_create_duplicate(self, client):
        existing = client.app.state.car_repository.all()[0]
        response = client.post(
            "/api/v1/cars/",
            json={"id": str(existing.id), "brand": "Saab", "model": "900"},
        )
        assert response.status_code == 409
        assert str(existing.id) in response.json()["detail"]
        assert len(client.get("/api/v1/cars/").json()) == 3


class TestLicensePlateEndpoint:
    def test_generate(self, client):
        response = client.get("/api/v1/license-plates/generate")
        assert response.status_code == 200
        assert len(response.json()["value"]) == 7
