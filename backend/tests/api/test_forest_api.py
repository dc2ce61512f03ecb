import pytest
from fastapi.testclient import TestClient

from forestledger.api.deps import get_forest
from forestledger.api.main import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("FORESTLEDGER_REPORTS_DIR", str(tmp_path))
    monkeypatch.setenv("FORESTLEDGER_ACCOUNTS_FILE", str(tmp_path / "no_accounts.txt"))
    get_forest.cache_clear()
    yield TestClient(app)
    get_forest.cache_clear()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_create_account_and_get(client):
    r = client.post("/accounts", json={"number": " 100 ", "description": "Cash"})
    assert r.status_code == 201, r.text
    assert r.json() == {
        "number": "100",
        "description": "Cash",
        "balance": "0",
        "parent": None,
        "children": [],
        "transactions_count": 0,
    }

    r = client.get("/accounts/100")
    assert r.status_code == 200
    assert r.json()["transactions"] == []


def test_create_account_errors(client):
    assert client.post("/accounts", json={"number": "100", "description": "Cash"}).status_code == 201

    r = client.post("/accounts", json={"number": "100", "description": "Again"})
    assert r.status_code == 409
    assert r.json()["detail"] == "Account already exists."

    assert client.post("/accounts", json={"number": "12a", "description": "X"}).status_code == 422
    assert client.post("/accounts", json={"number": "1", "description": ""}).status_code == 422
    assert client.get("/accounts/999").status_code == 404


def test_child_accounts(client):
    client.post("/accounts", json={"number": "1", "description": "Assets"})

    r = client.post("/accounts/1/children", json={"number": "11", "description": "Bank"})
    assert r.status_code == 201, r.text
    assert r.json()["parent"] == "1"

    assert client.post("/accounts/9/children", json={"number": "12", "description": "X"}).status_code == 404
    assert client.get("/accounts/1").json()["children"] == ["11"]

    roots = client.get("/accounts", params={"roots_only": True}).json()
    assert [a["number"] for a in roots] == ["1"]
    assert [a["number"] for a in client.get("/accounts").json()] == ["1", "11"]


def test_transactions_lifecycle(client):
    client.post("/accounts", json={"number": "100", "description": "Cash"})

    r = client.post("/accounts/100/transactions", json={"amount": "50", "direction": "D"})
    assert r.status_code == 201, r.text
    assert r.json() == {
        "index": 0,
        "account_number": "100",
        "amount": "50",
        "direction": "D",
        "type": "Debit",
    }

    r = client.post("/accounts/100/transactions", json={"amount": "12.50", "direction": "C"})
    assert r.json()["index"] == 1
    assert client.get("/accounts/100").json()["balance"] == "37.5"

    assert client.delete("/accounts/100/transactions/5").status_code == 404
    assert client.delete("/accounts/100/transactions/0").status_code == 204

    items = client.get("/accounts/100/transactions").json()
    assert [(t["index"], t["amount"], t["type"]) for t in items] == [(0, "12.5", "Credit")]
    assert client.get("/accounts/100").json()["balance"] == "-12.5"


def test_transaction_validation(client):
    client.post("/accounts", json={"number": "100", "description": "Cash"})

    assert client.post("/accounts/100/transactions", json={"amount": "-1", "direction": "D"}).status_code == 422
    assert client.post("/accounts/100/transactions", json={"amount": "abc", "direction": "D"}).status_code == 422
    assert client.post("/accounts/100/transactions", json={"amount": "1", "direction": "X"}).status_code == 422
    assert client.post("/accounts/999/transactions", json={"amount": "1", "direction": "D"}).status_code == 404
    assert client.get("/accounts/100").json()["transactions_count"] == 0


def test_reports(client, tmp_path):
    client.post("/accounts", json={"number": "100", "description": "Cash"})
    client.post("/accounts/100/transactions", json={"amount": "50", "direction": "D"})

    r = client.get("/reports/forest")
    assert r.status_code == 200
    assert r.text == (
        "100 - Cash (Balance: $50)\n"
        "    Transactions:\n"
        "        Account: 100, Amount: 50, Type: Debit\n"
    )

    r = client.get("/reports/accounts/100")
    assert r.text.startswith("Account Number: 100\nDescription: Cash\nBalance: $50\n")
    assert client.get("/reports/accounts/999").status_code == 404

    r = client.post("/reports/forest/file", json={"filename": "tree.txt"})
    assert r.status_code == 201, r.text
    assert (tmp_path / "tree.txt").read_text(encoding="utf-8").startswith("100 - Cash")

    r = client.post("/reports/accounts/999/file", json={"filename": "missing.txt"})
    assert r.status_code == 201
    assert (tmp_path / "missing.txt").read_text(encoding="utf-8") == "Error: Account not found.\n"

    assert client.post("/reports/forest/file", json={"filename": "a/b.txt"}).status_code == 422
