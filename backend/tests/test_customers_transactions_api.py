import pytest


@pytest.fixture()
def customer(client, auth_headers):
    resp = client.post(
        "/api/customers",
        json={"customerId": "CUST002", "firstName": "Jane", "lastName": "Smith", "email": "jane.smith@example.com"},
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_customer_returns_camel_case(customer):
    assert customer["customerId"] == "CUST002"
    assert customer["firstName"] == "Jane"
    assert "createdAt" in customer and "updatedAt" in customer


def test_create_customer_conflict(client, auth_headers, customer):
    resp = client.post(
        "/api/customers",
        json={"customerId": "CUST002", "firstName": "Other", "lastName": "Person"},
        headers=auth_headers,
    )
    assert resp.status_code == 409
    assert resp.json()["detail"]["error"]["code"] == "CONFLICT"


def test_create_customer_missing_fields(client, auth_headers):
    resp = client.post("/api/customers", json={"customerId": "CUST003"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_get_customer(client, auth_headers, customer):
    resp = client.get("/api/customers/CUST002", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["lastName"] == "Smith"
    assert client.get("/api/customers/CUST404", headers=auth_headers).status_code == 404


def test_create_transaction_stamps_points(client, auth_headers, customer):
    resp = client.post(
        "/api/transactions",
        json={"customerId": "CUST002", "amount": 150.00, "description": "Home Improvement"},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["pointsEarned"] == 150
    assert body["amount"] == 150.0
    assert body["transactionId"].startswith("TXN")
    assert body["description"] == "Home Improvement"


def test_create_transaction_default_description(client, auth_headers, customer):
    body = client.post(
        "/api/transactions",
        json={"customerId": "CUST002", "amount": 50.00},
        headers=auth_headers,
    ).json()
    assert body["description"] == "Manual transaction"
    assert body["pointsEarned"] == 0


@pytest.mark.parametrize("amount", [0, -5, None])
def test_create_transaction_rejects_non_positive_amount(client, auth_headers, customer, amount):
    resp = client.post(
        "/api/transactions",
        json={"customerId": "CUST002", "amount": amount},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_transaction_unknown_customer(client, auth_headers):
    resp = client.post(
        "/api/transactions",
        json={"customerId": "CUST404", "amount": 10},
        headers=auth_headers,
    )
    assert resp.status_code == 404


def test_list_transactions_paginated_newest_first(client, auth_headers, customer):
    for day, amount in [("01", 60), ("02", 70), ("03", 80)]:
        client.post(
            "/api/transactions",
            json={"customerId": "CUST002", "amount": amount, "transactionDate": f"2024-05-{day}T12:00:00"},
            headers=auth_headers,
        )

    resp = client.get("/api/transactions/customer/CUST002?page=0&size=2", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert body["size"] == 2
    assert [t["amount"] for t in body["transactions"]] == [80.0, 70.0]

    second = client.get("/api/transactions/customer/CUST002?page=1&size=2", headers=auth_headers).json()
    assert [t["amount"] for t in second["transactions"]] == [60.0]


def test_list_transactions_unknown_customer(client, auth_headers):
    resp = client.get("/api/transactions/customer/CUST404", headers=auth_headers)
    assert resp.status_code == 404
