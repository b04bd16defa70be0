"""
Integration tests for customer login.

Login compares the submitted password with the stored string directly,
so only a password set through PUT (stored raw) can log in.
"""

import pytest


@pytest.fixture
async def customer_with_raw_password(client, customer_payload):
    """Create a customer, then replace it so the stored password is plain text."""
    created = (await client.post("/api/customers", json=customer_payload)).json()
    response = await client.put(f"/api/customers/{created['customer_id']}", json=customer_payload)
    assert response.status_code == 200
    return created["customer_id"]


@pytest.mark.asyncio
async def test_login_success(client, customer_payload, customer_with_raw_password):
    response = await client.post("/api/customers/login", json={
        "phone": customer_payload["phone"],
        "password": customer_payload["password"],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["customer_id"] == customer_with_raw_password
    assert data["username"] == "ravi"
    assert data["customer_type"] == "cab_service_customer"
    assert data["account_status"] == "active"
    assert "password" not in data


@pytest.mark.asyncio
async def test_login_with_numeric_phone(client, customer_payload, customer_with_raw_password):
    response = await client.post("/api/customers/login", json={
        "phone": int(customer_payload["phone"]),
        "password": customer_payload["password"],
    })

    assert response.status_code == 200
    assert response.json()["customer_id"] == customer_with_raw_password


@pytest.mark.asyncio
async def test_login_against_hashed_password_fails(client, customer_payload):
    """A freshly created customer holds a hash, which never equals the plain password."""
    await client.post("/api/customers", json=customer_payload)

    response = await client.post("/api/customers/login", json={
        "phone": customer_payload["phone"],
        "password": customer_payload["password"],
    })

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_wrong_password(client, customer_payload, customer_with_raw_password):
    response = await client.post("/api/customers/login", json={
        "phone": customer_payload["phone"],
        "password": "not-it",
    })

    assert response.status_code == 401
    assert response.json() == {"message": "Incorrect password"}


@pytest.mark.asyncio
async def test_login_unknown_phone(client):
    response = await client.post("/api/customers/login", json={
        "phone": "0000000",
        "password": "whatever",
    })

    assert response.status_code == 404
    assert response.json() == {"message": "Customer not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {"password": "s3cret"},
    {"phone": "5550001"},
    {"phone": "", "password": "s3cret"},
    {"phone": "5550001", "password": ""},
    {},
])
async def test_login_requires_phone_and_password(client, body):
    response = await client.post("/api/customers/login", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "Phone number and password are required"}
