import time
import subprocess
import httpx
import sys
import os
import signal

BASE_URL = "http://127.0.0.1:8000"
API_PREFIX = "/api"
UVICORN = [sys.executable, "-m", "uvicorn", "taxibook.app.main:app", "--host", "127.0.0.1", "--port", "8000"]

CUSTOMER = {
    "customer_type": "normal_customer",
    "username": "persist_rider",
    "phone": "5557770",
    "password": "securePassword123",
    "email": "persist_rider@test.com",
}


def wait_for_server(retries=10, delay=2):
    url = f"{BASE_URL}/health"
    print(f"Waiting for server at {url}...")
    for _ in range(retries):
        try:
            resp = httpx.get(url)
            if resp.status_code == 200:
                print("✅ Server is up!")
                return True
        except httpx.TransportError:
            pass
        time.sleep(delay)
    print("❌ Server failed to start.")
    return False


def stop(proc):
    proc.send_signal(signal.SIGTERM)
    proc.wait()


def run_verification():
    # 1. Start Server (First Run)
    print("\n--- [Step 1] Starting Server (Initial) ---")
    proc = subprocess.Popen(
        UVICORN,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env={**os.environ, "DB_ECHO": "True"}  # Enable echo to see SQL
    )

    try:
        if not wait_for_server():
            server_logs = proc.communicate(timeout=2)
            print("Server Stdout:", server_logs[0].decode())
            print("Server Stderr:", server_logs[1].decode())
            raise RuntimeError("Server start failed")

        # 2. Create the customer, then replace it so login can match the stored password
        print("\n--- [Step 2] Creating Customer (Persistence Test) ---")
        resp = httpx.post(f"{BASE_URL}{API_PREFIX}/customers", json=CUSTOMER)
        if resp.status_code != 201:
            print(f"❌ Create Failed: {resp.status_code} {resp.text}")
            raise RuntimeError("Create failed")
        customer_id = resp.json()["customer_id"]
        print(f"✅ Customer {customer_id} created")

        resp = httpx.put(
            f"{BASE_URL}{API_PREFIX}/customers/{customer_id}",
            json={**CUSTOMER, "account_status": "active"},
        )
        if resp.status_code != 200:
            raise RuntimeError(f"Replace failed: {resp.status_code} {resp.text}")
        print("✅ Customer replaced")
    finally:
        print("\n--- [Step 3] Stopping Server ---")
        stop(proc)

    time.sleep(2)  # Wait for port release

    # 3. Restart Server
    print("\n--- [Step 4] Restarting Server (Verification) ---")
    proc2 = subprocess.Popen(UVICORN, stdout=subprocess.PIPE, stderr=subprocess.PIPE)

    try:
        if not wait_for_server():
            raise RuntimeError("Server restart failed")

        # 4. Login
        print("\n--- [Step 5] Logging In (Post-Restart) ---")
        resp = httpx.post(
            f"{BASE_URL}{API_PREFIX}/customers/login",
            json={"phone": CUSTOMER["phone"], "password": CUSTOMER["password"]},
        )
        if resp.status_code != 200:
            print(f"❌ Login Failed (Persistence Issue?): {resp.status_code} {resp.text}")
            raise RuntimeError("Login failed after restart")
        print("✅ Login Successful (Customer Persisted!)")

        # 5. Clean up
        print("\n--- [Step 6] Deleting Customer ---")
        resp = httpx.delete(f"{BASE_URL}{API_PREFIX}/customers/{resp.json()['customer_id']}")
        print("✅ Deleted" if resp.status_code == 204 else f"⚠️ Delete returned {resp.status_code}")
    finally:
        print("\n--- [Step 7] Stopping Server ---")
        stop(proc2)


if __name__ == "__main__":
    run_verification()
