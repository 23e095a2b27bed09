from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from ..core.dependencies import get_ledger_service
from ..main import app
from ..services import LedgerService

@pytest.fixture
def client() -> TestClient:
    service = LedgerService()
    app.dependency_overrides[get_ledger_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _create(client: TestClient, cpf: str = "111", name: str = "Ana") -> None:
    response = client.post("/account", json={"cpf": cpf, "name": name})
    assert response.status_code == 201


def test_deposit_withdraw_and_insufficient_funds(client: TestClient) -> None:
    response = client.post("/account", json={"cpf": "111", "name": "Ana"})
    assert response.status_code == 201
    assert response.content == b""

    deposit = client.post(
        "/deposit",
        json={"description": "salary", "amount": 1000},
        headers={"cpf": "111"},
    )
    assert deposit.status_code == 201

    withdraw = client.post("/withdraw", json={"amount": 300}, headers={"cpf": "111"})
    assert withdraw.status_code == 201

    balance = client.get("/balance", headers={"cpf": "111"})
    assert balance.status_code == 200
    assert balance.json() == 700

    rejected = client.post("/withdraw", json={"amount": 1000}, headers={"cpf": "111"})
    assert rejected.status_code == 400
    assert rejected.json() == {"error": "Insufficient funds!"}
    assert client.get("/balance", headers={"cpf": "111"}).json() == 700


def test_get_unknown_account_returns_404(client: TestClient) -> None:
    response = client.get("/account", headers={"cpf": "999"})
    assert response.status_code == 404
    assert response.json() == {"error": "Customer not found."}


def test_missing_cpf_header_is_not_found(client: TestClient) -> None:
    _create(client)
    response = client.get("/statement")
    assert response.status_code == 404
    assert response.json() == {"error": "Customer not found."}


def test_duplicate_cpf_is_rejected(client: TestClient) -> None:
    _create(client, name="Ana")
    response = client.post("/account", json={"cpf": "111", "name": "Other"})
    assert response.status_code == 400
    assert response.json() == {"error": "Customer already exists!"}
    assert client.get("/account", headers={"cpf": "111"}).json()["name"] == "Ana"


def test_get_account_includes_history(client: TestClient) -> None:
    _create(client)
    client.post("/deposit", json={"description": "gift", "amount": 50}, headers={"cpf": "111"})

    account = client.get("/account", headers={"cpf": "111"}).json()
    assert account["cpf"] == "111"
    assert account["name"] == "Ana"
    assert account["id"]
    assert [entry["type"] for entry in account["statement"]] == ["credit"]
    assert account["statement"][0]["description"] == "gift"


def test_update_account_name(client: TestClient) -> None:
    _create(client)
    response = client.put("/account", json={"name": "Ana Maria"}, headers={"cpf": "111"})
    assert response.status_code == 201
    assert client.get("/account", headers={"cpf": "111"}).json()["name"] == "Ana Maria"

    missing = client.put("/account", json={"name": "Nobody"}, headers={"cpf": "222"})
    assert missing.status_code == 404


def test_delete_account_returns_remaining(client: TestClient) -> None:
    _create(client, cpf="111", name="Ana")
    _create(client, cpf="222", name="Bruno")

    response = client.delete("/account", headers={"cpf": "111"})
    assert response.status_code == 200
    remaining = response.json()
    assert [account["cpf"] for account in remaining] == ["222"]

    assert client.get("/account", headers={"cpf": "111"}).status_code == 404
    assert client.delete("/account", headers={"cpf": "111"}).status_code == 404


def test_statement_lists_operations_in_order(client: TestClient) -> None:
    _create(client)
    client.post("/deposit", json={"description": "salary", "amount": 1000}, headers={"cpf": "111"})
    client.post("/withdraw", json={"amount": 250}, headers={"cpf": "111"})

    response = client.get("/statement", headers={"cpf": "111"})
    assert response.status_code == 200
    items = response.json()
    assert [(entry["type"], entry["amount"]) for entry in items] == [
        ("credit", 1000),
        ("debit", 250),
    ]
    # debits carry no description
    assert "description" not in items[1]


def test_statement_by_date(client: TestClient) -> None:
    _create(client)
    client.post("/deposit", json={"description": "salary", "amount": 10}, headers={"cpf": "111"})

    created_at = client.get("/statement", headers={"cpf": "111"}).json()[0]["created_at"]
    day = datetime.fromisoformat(created_at).astimezone().date()
    response = client.get(
        "/statement/date",
        params={"date": day.isoformat()},
        headers={"cpf": "111"},
    )
    assert response.status_code == 200
    assert len(response.json()) == 1

    other_day = client.get(
        "/statement/date",
        params={"date": (day - timedelta(days=3)).isoformat()},
        headers={"cpf": "111"},
    )
    assert other_day.json() == []


@pytest.mark.parametrize("path", ["/deposit", "/withdraw"])
@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_amount_is_rejected(client: TestClient, path: str, token: str) -> None:
    _create(client)
    client.post("/deposit", json={"description": "salary", "amount": 100}, headers={"cpf": "111"})
    before = client.get("/statement", headers={"cpf": "111"}).json()

    response = client.post(
        path,
        content=f'{{"description": "x", "amount": {token}}}',
        headers={"cpf": "111", "content-type": "application/json"},
    )
    assert response.status_code == 422

    assert client.get("/statement", headers={"cpf": "111"}).json() == before
    assert client.get("/balance", headers={"cpf": "111"}).json() == 100
    overdraft = client.post("/withdraw", json={"amount": 1000}, headers={"cpf": "111"})
    assert overdraft.status_code == 400


def test_operations_on_unknown_account(client: TestClient) -> None:
    headers = {"cpf": "404"}
    assert client.post("/deposit", json={"description": "x", "amount": 1}, headers=headers).status_code == 404
    assert client.post("/withdraw", json={"amount": 1}, headers=headers).status_code == 404
    assert client.get("/balance", headers=headers).status_code == 404
    assert client.get(
        "/statement/date", params={"date": "2024-01-01"}, headers=headers
    ).status_code == 404


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
