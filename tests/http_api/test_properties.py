# tests/http_api/test_properties.py

from decimal import Decimal

import pytest


@pytest.fixture
def apartment(client):
    response = client.post(
        "/api/properties",
        json={
            "name": "Harbour View Apartment",
            "address": "12 Quay Street",
            "type": "APARTMENT",
            "price": "420000.00",
            "area": 78.5,
            "rooms": 3,
            "parkingSpaces": 1,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_get(client, apartment) -> None:
    assert apartment["status"] == "AVAILABLE"
    assert apartment["parkingSpaces"] == 1
    assert Decimal(str(apartment["price"])) == Decimal("420000")

    fetched = client.get(f"/api/properties/{apartment['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Harbour View Apartment"


def test_get_unknown_is_404(client) -> None:
    response = client.get("/api/properties/404")

    assert response.status_code == 404
    assert response.json()["code"] == 404


def test_validation_error_is_422(client) -> None:
    response = client.post("/api/properties", json={"name": "No address", "type": "LAND", "price": 1})
    assert response.status_code == 422


def test_partial_update(client, apartment) -> None:
    response = client.put(f"/api/properties/{apartment['id']}", json={"status": "RENTED"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "RENTED"
    assert body["name"] == "Harbour View Apartment"
    assert body["rooms"] == 3


def test_search_routes(client, apartment) -> None:
    client.post(
        "/api/properties",
        json={"name": "Maple Lane House", "address": "4 Maple Lane", "type": "HOUSE", "price": 685000, "area": 165},
    )

    assert [p["id"] for p in client.get("/api/properties/search", params={"query": "quay"}).json()] == [
        apartment["id"]
    ]
    criteria = client.get(
        "/api/properties/search/criteria",
        params={"type": "HOUSE", "minPrice": 500000, "maxArea": 200},
    ).json()
    assert [p["name"] for p in criteria] == ["Maple Lane House"]
    assert len(client.get("/api/properties/type/APARTMENT").json()) == 1
    assert len(client.get("/api/properties/status/AVAILABLE").json()) == 2
    assert len(client.get("/api/properties").json()) == 2


def test_delete(client, apartment) -> None:
    url = f"/api/properties/{apartment['id']}"

    assert client.delete(url).status_code == 204
    assert client.get(url).status_code == 404
    assert client.delete(url).status_code == 404
