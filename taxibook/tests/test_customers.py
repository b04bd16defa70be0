"""
Integration tests for customer CRUD.

Covers type coercion, account status defaulting, password storage and
the 404/204 mapping.
"""

import bcrypt
import pytest
from sqlalchemy import select

from taxibook.app.models.customer import Customer


async def _stored(db_session, customer_id):
    result = await db_session.execute(select(Customer).where(Customer.customer_id == customer_id))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_create_customer_success(client, db_session, customer_payload):
    response = await client.post("/api/customers", json=customer_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["customer_id"] > 0
    assert data["customer_type"] == "cab_service_customer"
    assert data["username"] == "ravi"
    assert data["account_status"] == "active"
    assert "password" not in data

    stored = await _stored(db_session, data["customer_id"])
    assert stored.password != "s3cret"
    assert bcrypt.checkpw(b"s3cret", stored.password.encode())


@pytest.mark.asyncio
@pytest.mark.parametrize("customer_type", ["vip", "", None, 42, "NORMAL_CUSTOMER"])
async def test_unknown_customer_type_becomes_normal(client, db_session, customer_payload, customer_type):
    customer_payload["customer_type"] = customer_type

    response = await client.post("/api/customers", json=customer_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["customer_type"] == "normal_customer"
    stored = await _stored(db_session, data["customer_id"])
    assert stored.customer_type == "normal_customer"


@pytest.mark.asyncio
async def test_missing_customer_type_becomes_normal(client, customer_payload):
    del customer_payload["customer_type"]

    response = await client.post("/api/customers", json=customer_payload)

    assert response.status_code == 201
    assert response.json()["customer_type"] == "normal_customer"


@pytest.mark.asyncio
@pytest.mark.parametrize("drop", [True, False])
async def test_account_status_defaults_to_active(client, db_session, customer_payload, drop):
    if drop:
        del customer_payload["account_status"]
    else:
        customer_payload["account_status"] = None

    response = await client.post("/api/customers", json=customer_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["account_status"] == "active"
    stored = await _stored(db_session, data["customer_id"])
    assert stored.account_status == "active"


@pytest.mark.asyncio
async def test_create_customer_missing_password(client, customer_payload):
    del customer_payload["password"]

    response = await client.post("/api/customers", json=customer_payload)

    assert response.status_code == 400
    assert "message" in response.json()


@pytest.mark.asyncio
async def test_list_customers(client, customer_payload):
    response = await client.get("/api/customers")
    assert response.status_code == 200
    assert response.json() == []

    await client.post("/api/customers", json=customer_payload)
    customer_payload["phone"] = "5550002"
    await client.post("/api/customers", json=customer_payload)

    response = await client.get("/api/customers")
    assert response.status_code == 200
    rows = response.json()
    assert [row["phone"] for row in rows] == ["5550001", "5550002"]


@pytest.mark.asyncio
async def test_get_customer(client, customer_payload):
    created = (await client.post("/api/customers", json=customer_payload)).json()

    response = await client.get(f"/api/customers/{created['customer_id']}")

    assert response.status_code == 200
    row = response.json()
    assert row["customer_id"] == created["customer_id"]
    assert row["email"] == "ravi@example.com"


@pytest.mark.asyncio
async def test_get_customer_not_found(client):
    response = await client.get("/api/customers/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Customer not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("customer_id", ["abc", "1.5", "99999999999999999999"])
async def test_customer_id_that_names_no_row(client, customer_payload, customer_id):
    url = f"/api/customers/{customer_id}"

    for response in (
        await client.get(url),
        await client.put(url, json=customer_payload),
        await client.delete(url),
    ):
        assert response.status_code == 404
        assert response.json() == {"message": "Customer not found"}


@pytest.mark.asyncio
async def test_create_customer_with_long_password(client, db_session, customer_payload):
    """Only the first 72 bytes of a password are hashed."""
    customer_payload["password"] = "p" * 80

    response = await client.post("/api/customers", json=customer_payload)

    assert response.status_code == 201
    stored = await _stored(db_session, response.json()["customer_id"])
    assert bcrypt.checkpw(b"p" * 72, stored.password.encode())


@pytest.mark.asyncio
async def test_create_customer_with_numeric_phone(client, customer_payload):
    customer_payload["phone"] = 5550001

    response = await client.post("/api/customers", json=customer_payload)

    assert response.status_code == 201
    assert response.json()["phone"] == "5550001"


@pytest.mark.asyncio
async def test_update_customer_full_replace(client, db_session, customer_payload):
    created = (await client.post("/api/customers", json=customer_payload)).json()
    customer_id = created["customer_id"]

    replacement = {
        "customer_type": "something-else",
        "username": "ravi k",
        "phone": "5559999",
        "password": "plain-new",
        "email": "ravi.k@example.com",
        "account_status": "suspended",
        "customer_id": 12345,
    }
    response = await client.put(f"/api/customers/{customer_id}", json=replacement)

    assert response.status_code == 200
    data = response.json()
    assert data == {
        "customer_id": customer_id,
        "customer_type": "normal_customer",
        "username": "ravi k",
        "phone": "5559999",
        "email": "ravi.k@example.com",
        "account_status": "suspended",
    }

    # Update stores the submitted password without hashing it
    stored = await _stored(db_session, customer_id)
    assert stored.password == "plain-new"
    assert stored.account_status == "suspended"


@pytest.mark.asyncio
async def test_update_customer_requires_account_status(client, customer_payload):
    created = (await client.post("/api/customers", json=customer_payload)).json()
    del customer_payload["account_status"]

    response = await client.put(f"/api/customers/{created['customer_id']}", json=customer_payload)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_customer_not_found(client, customer_payload):
    response = await client.put("/api/customers/999", json=customer_payload)

    assert response.status_code == 404
    assert response.json()["message"] == "Customer not found"


@pytest.mark.asyncio
async def test_delete_customer(client, customer_payload):
    created = (await client.post("/api/customers", json=customer_payload)).json()
    customer_id = created["customer_id"]

    response = await client.delete(f"/api/customers/{customer_id}")
    assert response.status_code == 204
    assert response.content == b""

    response = await client.get(f"/api/customers/{customer_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_customer_not_found(client):
    response = await client.delete("/api/customers/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Customer not found"}
