# tests/http_api/test_timestamps.py

import pytest


@pytest.fixture
def created(client):
    response = client.post(
        "/api/timestamps",
        json={
            "documentId": 5,
            "documentType": "CONTRACT",
            "timestampCertificate": "MIIC-cert",
            "timestampAuthority": "Example TSA",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_fetch(client, created) -> None:
    assert created["status"] == "ACTIVE"
    assert created["expiresAt"] > created["timestampAt"]

    fetched = client.get(f"/api/timestamps/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["timestampHash"] == created["timestampHash"]


def test_create_rejects_unknown_document_type(client) -> None:
    response = client.post(
        "/api/timestamps",
        json={
            "documentId": 5,
            "documentType": "INVOICE",
            "timestampCertificate": "c",
            "timestampAuthority": "a",
        },
    )
    assert response.status_code == 422


def test_listings(client, created) -> None:
    assert [t["id"] for t in client.get("/api/timestamps").json()] == [created["id"]]
    assert [t["id"] for t in client.get("/api/timestamps/document/5").json()] == [created["id"]]
    assert [t["id"] for t in client.get("/api/timestamps/type/CONTRACT").json()] == [created["id"]]
    assert client.get("/api/timestamps/type/BIOMETRIC").json() == []
    assert [t["id"] for t in client.get("/api/timestamps/authority/Example TSA").json()] == [created["id"]]
    assert [t["id"] for t in client.get("/api/timestamps/status/ACTIVE").json()] == [created["id"]]


def test_verify_status_change_and_delete(client, created) -> None:
    url = f"/api/timestamps/{created['id']}"

    assert client.post(f"{url}/verify").json()["valid"] is True

    changed = client.put(f"{url}/status", json={"status": "REVOKED"})
    assert changed.json()["success"] is True
    assert client.post(f"{url}/verify").json()["valid"] is False

    deleted = client.delete(url)
    assert deleted.status_code == 200
    assert deleted.json()["success"] is True
    assert client.get(url).status_code == 404
    assert client.delete(url).json()["success"] is False


def test_create_with_utc_designator_expiry(client) -> None:
    response = client.post(
        "/api/timestamps",
        json={
            "documentId": 6,
            "documentType": "CONTRACT",
            "timestampCertificate": "MIIC-cert",
            "timestampAuthority": "Example TSA",
            "expiresAt": "2035-01-01T00:00:00Z",
        },
    )
    assert response.status_code == 201, response.text
    assert response.json()["expiresAt"].startswith("2035-01-01T00:00:00")


def test_create_with_past_offset_expiry_is_bad_request(client) -> None:
    response = client.post(
        "/api/timestamps",
        json={
            "documentId": 6,
            "documentType": "CONTRACT",
            "timestampCertificate": "MIIC-cert",
            "timestampAuthority": "Example TSA",
            "expiresAt": "2020-01-01T00:00:00+00:00",
        },
    )
    assert response.status_code == 400
    assert response.json() == {"status": "error", "code": 400, "message": "Bad request"}
