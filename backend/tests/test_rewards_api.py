import pytest

CUSTOMER = {
    "customerId": "CUST001",
    "firstName": "John",
    "lastName": "Doe",
    "email": "john.doe@example.com",
}


@pytest.fixture()
def customer_with_history(client, auth_headers):
    resp = client.post("/api/customers", json=CUSTOMER, headers=auth_headers)
    assert resp.status_code == 201, resp.text
    for amount, when in [
        (120.00, "2024-09-05T10:00:00"),
        (75.00, "2024-10-15T18:30:00"),
        (45.00, "2024-11-01T09:00:00"),
    ]:
        resp = client.post(
            "/api/transactions",
            json={"customerId": "CUST001", "amount": amount, "transactionDate": when},
            headers=auth_headers,
        )
        assert resp.status_code == 201, resp.text
    return "CUST001"


def test_total_rewards(client, auth_headers, customer_with_history):
    resp = client.get(f"/api/customers/{customer_with_history}/rewards", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {
        "customerId": "CUST001",
        "customerName": "John Doe",
        "totalPoints": 115,
        "monthlyPoints": {"2024-09": 90, "2024-10": 25, "2024-11": 0},
        "period": "All time",
    }


def test_total_rewards_without_transactions(client, auth_headers):
    client.post("/api/customers", json=CUSTOMER, headers=auth_headers)
    body = client.get("/api/customers/CUST001/rewards", headers=auth_headers).json()
    assert body["totalPoints"] == 0
    assert body["monthlyPoints"] == {}
    assert body["period"] == "No transactions found"


def test_monthly_rewards(client, auth_headers, customer_with_history):
    resp = client.get("/api/customers/CUST001/rewards/2024-09", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["monthlyPoints"] == {"2024-09": 90}
    assert body["totalPoints"] == 90
    assert body["period"] == "Month: 2024-09"


def test_monthly_rewards_empty_month_keeps_key(client, auth_headers, customer_with_history):
    body = client.get("/api/customers/CUST001/rewards/2023-01", headers=auth_headers).json()
    assert body["monthlyPoints"] == {"2023-01": 0}
    assert body["totalPoints"] == 0


@pytest.mark.parametrize("month", ["2024-9", "abcd-ef", "202409", "２０２４-09", "٢٠٢٤-٠٩"])
def test_monthly_rewards_bad_format(client, auth_headers, customer_with_history, month):
    resp = client.get(f"/api/customers/CUST001/rewards/{month}", headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"]["error"]["code"] == "VALIDATION_ERROR"


def test_monthly_rewards_impossible_month(client, auth_headers, customer_with_history):
    resp = client.get("/api/customers/CUST001/rewards/2024-13", headers=auth_headers)
    assert resp.status_code == 400


def test_recent_rewards_includes_new_purchase(client, auth_headers, customer_with_history):
    resp = client.post(
        "/api/transactions",
        json={"customerId": "CUST001", "amount": 200.00, "description": "Department Store"},
        headers=auth_headers,
    )
    assert resp.status_code == 201

    body = client.get("/api/customers/CUST001/rewards/recent?months=1", headers=auth_headers).json()
    assert body["totalPoints"] == 250
    assert sum(body["monthlyPoints"].values()) == 250
    assert body["period"] == "Last 1 months"


def test_recent_rewards_defaults_to_three_months(client, auth_headers, customer_with_history):
    # history is from 2024, well outside the default window
    body = client.get("/api/customers/CUST001/rewards/recent", headers=auth_headers).json()
    assert body["totalPoints"] == 0
    assert body["monthlyPoints"] == {}
    assert body["period"] == "No transactions in last 3 months"


@pytest.mark.parametrize("months", [0, 37])
def test_recent_rewards_out_of_range(client, auth_headers, customer_with_history, months):
    resp = client.get(f"/api/customers/CUST001/rewards/recent?months={months}", headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"]["error"]["details"] == {"months": months}


def test_recent_rewards_non_numeric(client, auth_headers, customer_with_history):
    resp = client.get("/api/customers/CUST001/rewards/recent?months=abc", headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize(
    "path",
    [
        "/api/customers/CUST404/rewards",
        "/api/customers/CUST404/rewards/2024-09",
        "/api/customers/CUST404/rewards/recent?months=3",
    ],
)
def test_unknown_customer(client, auth_headers, path):
    resp = client.get(path, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"]["code"] == "NOT_FOUND"
