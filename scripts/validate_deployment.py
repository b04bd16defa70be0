"""
Pre-Deploy and Smoke Test Script.

Runs the application in-process against the configured database and
walks every route group:
1. Health and liveness
2. Customer create -> fetch -> delete
3. Trip create -> driver lookup -> confirm -> delete
"""

import sys
import uuid

from fastapi.testclient import TestClient
from taxibook.app.main import app


def print_step(step, msg):
    print(f"[{step}] {msg}")


def fail(msg):
    print(f"❌ FAILURE: {msg}")
    sys.exit(1)


def success(msg):
    print(f"✅ {msg}")


def expect(response, status_code, what):
    if response.status_code != status_code:
        fail(f"{what}: expected {status_code}, got {response.status_code} {response.text}")
    return response


def main():
    print("🚀 Starting Deployment Validation...")
    tag = uuid.uuid4().hex[:8]

    # Entering the context runs the lifespan (tables, pool, logging)
    with TestClient(app) as client:
        print_step("PRE-DEPLOY", "Checking /health and /api/trips-test...")
        expect(client.get("/health"), 200, "health")
        expect(client.get("/api/trips-test"), 200, "trips liveness")
        success("Service reachable")

        print_step("SMOKE", "Customer flow...")
        customer = expect(client.post("/api/customers", json={
            "username": f"smoke_{tag}",
            "phone": f"smoke-{tag}",
            "password": "smoke-pass",
            "email": f"smoke_{tag}@example.com",
        }), 201, "create customer").json()
        customer_id = customer["customer_id"]
        expect(client.get(f"/api/customers/{customer_id}"), 200, "fetch customer")
        expect(client.delete(f"/api/customers/{customer_id}"), 204, "delete customer")
        expect(client.get(f"/api/customers/{customer_id}"), 404, "fetch deleted customer")
        success(f"Customer {customer_id} round trip OK")

        print_step("SMOKE", "Trip flow...")
        driver = f"smoke-driver-{tag}"
        trip = expect(client.post("/api/trips", json={
            "pickup_location": "A",
            "dropoff_location": "B",
            "trip_date": "2024-01-01",
            "trip_time": "10:00",
            "vehicle_type": "sedan",
            "passengers": 2,
            "contact_number1": "555",
            "driver_name": driver,
        }), 201, "create trip").json()
        trip_id = trip["trip_id"]
        if trip["confirmation_status"] is not False:
            fail("new trip should be unconfirmed")

        rows = expect(client.get(f"/api/trips/driver/{driver}"), 200, "driver lookup").json()
        if [row["trip_id"] for row in rows] != [trip_id]:
            fail(f"driver lookup returned {rows}")

        confirmed = expect(
            client.patch(f"/api/trips/{trip_id}/confirm", json={"confirmation_status": True}),
            200, "confirm trip",
        ).json()
        if confirmed["confirmation_status"] is not True:
            fail("confirm did not stick")

        expect(client.delete(f"/api/trips/{trip_id}"), 204, "delete trip")
        success(f"Trip {trip_id} round trip OK")

    success("Deployment Validation Passed!")


if __name__ == "__main__":
    main()
