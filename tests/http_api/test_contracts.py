# tests/http_api/test_contracts.py

import pytest


@pytest.fixture
def parties(client):
    prop = client.post(
        "/api/properties",
        json={"name": "Central Office Suite", "address": "200 Market Avenue", "type": "OFFICE", "price": 950000},
    ).json()
    tenant = client.post(
        "/api/clients",
        json={"firstName": "Hana", "lastName": "Sato", "email": "hana@example.com", "type": "TENANT"},
    ).json()
    return prop, tenant


@pytest.fixture
def contract(client, parties):
    prop, tenant = parties
    response = client.post(
        "/api/contracts",
        json={
            "contractNumber": "LEASE-7",
            "propertyId": prop["id"],
            "clientId": tenant["id"],
            "type": "LEASE",
            "status": "ACTIVE",
            "amount": 120000,
            "monthlyRent": 10000,
            "startDate": "2025-01-01T00:00:00",
            "endDate": "2025-12-31T00:00:00",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_client_duplicate_email_is_conflict(client, parties) -> None:
    response = client.post(
        "/api/clients",
        json={"firstName": "H", "lastName": "S", "email": "HANA@example.com", "type": "BUYER"},
    )
    assert response.status_code == 409
    assert response.json()["status"] == "error"


def test_client_search_routes(client, parties) -> None:
    _, tenant = parties

    assert tenant["fullName"] == "Hana Sato"
    assert [c["id"] for c in client.get("/api/clients/search", params={"query": "sato"}).json()] == [tenant["id"]]
    advanced = client.get("/api/clients/search/advanced", params={"name": "hana", "type": "TENANT"}).json()
    assert [c["id"] for c in advanced] == [tenant["id"]]
    assert client.get("/api/clients/type/BUYER").json() == []


def test_contract_read_includes_names(contract) -> None:
    assert contract["propertyName"] == "Central Office Suite"
    assert contract["clientName"] == "Hana Sato"
    assert contract["status"] == "ACTIVE"


def test_contract_with_missing_client_is_bad_request(client, parties) -> None:
    prop, _ = parties
    response = client.post(
        "/api/contracts",
        json={
            "contractNumber": "LEASE-8",
            "propertyId": prop["id"],
            "clientId": 999,
            "type": "LEASE",
            "amount": 1,
            "startDate": "2025-01-01T00:00:00",
        },
    )
    assert response.status_code == 400


def test_contract_filter_routes(client, parties, contract) -> None:
    prop, tenant = parties

    assert [c["id"] for c in client.get(f"/api/contracts/property/{prop['id']}").json()] == [contract["id"]]
    assert [c["id"] for c in client.get(f"/api/contracts/client/{tenant['id']}").json()] == [contract["id"]]
    assert [c["id"] for c in client.get("/api/contracts/type/LEASE").json()] == [contract["id"]]
    assert [c["id"] for c in client.get("/api/contracts/status/ACTIVE").json()] == [contract["id"]]

    expiring = client.get("/api/contracts/expiring", params={"before": "2026-01-01T00:00:00"}).json()
    assert [c["id"] for c in expiring] == [contract["id"]]
    assert client.get("/api/contracts/expiring", params={"before": "2025-06-01T00:00:00"}).json() == []


def test_contract_update_and_delete(client, contract) -> None:
    url = f"/api/contracts/{contract['id']}"

    updated = client.put(url, json={"status": "TERMINATED", "terms": "Ended early by mutual consent."})
    assert updated.status_code == 200
    assert updated.json()["status"] == "TERMINATED"
    assert updated.json()["contractNumber"] == "LEASE-7"

    assert client.delete(url).status_code == 204
    assert client.get(url).status_code == 404


def test_transactions_crud(client, contract) -> None:
    created = client.post(
        "/api/transactions",
        json={
            "contractId": contract["id"],
            "type": "PAYMENT",
            "amount": 10000,
            "transactionDate": "2025-01-05T09:30:00",
            "description": "January rent",
        },
    )
    assert created.status_code == 201, created.text
    tx = created.json()
    assert tx["status"] == "PENDING"

    url = f"/api/transactions/{tx['id']}"
    assert client.put(url, json={"status": "COMPLETED"}).json()["status"] == "COMPLETED"
    assert [t["id"] for t in client.get(f"/api/transactions/contract/{contract['id']}").json()] == [tx["id"]]
    assert [t["id"] for t in client.get("/api/transactions/status/COMPLETED").json()] == [tx["id"]]
    assert [t["id"] for t in client.get("/api/transactions/type/PAYMENT").json()] == [tx["id"]]

    assert client.delete(url).status_code == 204
    assert client.get(url).status_code == 404


def test_transaction_for_unknown_contract_is_bad_request(client) -> None:
    response = client.post(
        "/api/transactions",
        json={"contractId": 404, "type": "TAX", "amount": 5, "transactionDate": "2025-01-05T09:30:00"},
    )
    assert response.status_code == 400


def test_contract_update_accepts_offset_aware_end_date(client, contract) -> None:
    url = f"/api/contracts/{contract['id']}"

    response = client.put(url, json={"endDate": "2026-06-30T00:00:00Z"})
    assert response.status_code == 200, response.text
    assert response.json()["endDate"].startswith("2026-06-30T00:00:00")

    # 23:00 at UTC-2 is 01:00 UTC on the start date
    shifted = client.put(url, json={"endDate": "2024-12-31T23:00:00-02:00"})
    assert shifted.status_code == 200, shifted.text
    assert shifted.json()["endDate"].startswith("2025-01-01T01:00:00")

    early = client.put(url, json={"endDate": "2024-12-31T20:00:00+00:00"})
    assert early.status_code == 400
    assert early.json()["message"] == "end_date must not precede start_date."


def test_transaction_with_offset_aware_date(client, contract) -> None:
    response = client.post(
        "/api/transactions",
        json={
            "contractId": contract["id"],
            "type": "PAYMENT",
            "amount": 20000,
            "transactionDate": "2025-01-02T10:00:00+01:00",
        },
    )
    assert response.status_code == 201, response.text
    assert response.json()["transactionDate"].startswith("2025-01-02T09:00:00")


def test_expiring_contracts_accept_offset_aware_cutoff(client, contract) -> None:
    response = client.get("/api/contracts/expiring", params={"before": "2026-01-01T00:00:00+00:00"})

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [contract["id"]]
