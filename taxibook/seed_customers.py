"""
Database seeding script for demo customers and trips.

Creates one customer of each type and a couple of trips for local
development. Run this script after the database is reachable.
"""

import asyncio
import sys
from datetime import date, time, datetime, timezone
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from taxibook.app.db.session import AsyncSessionLocal, engine, Base, close_engine
from taxibook.app.models.customer import Customer
from taxibook.app.models.trip import Trip
from taxibook.app.models.enums import CustomerType
from taxibook.app.core.security import get_password_hash
from sqlalchemy import select


async def seed():
    """
    Seed demo data.

    Creates:
    - 1 normal customer
    - 1 cab service customer
    - 2 trips (one assigned to a driver, one confirmed)
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        print("🌱 Starting seeding...")

        result = await db.execute(select(Customer).where(Customer.phone == "5550100"))
        if result.scalar_one_or_none():
            print("ℹ️  Demo customers already exist, skipping seeding")
            return

        db.add(Customer(
            customer_type=CustomerType.NORMAL_CUSTOMER.value,
            username="asha",
            phone="5550100",
            password=get_password_hash("asha123"),
            email="asha@taxibook.local",
            account_status="active",
        ))
        db.add(Customer(
            customer_type=CustomerType.CAB_SERVICE_CUSTOMER.value,
            username="citycabs",
            phone="5550200",
            password=get_password_hash("citycabs123"),
            email="ops@citycabs.local",
            account_status="active",
        ))

        now = datetime.now(timezone.utc)
        db.add(Trip(
            customer_name="asha",
            pickup_location="Central Station",
            dropoff_location="Airport T2",
            trip_date=date(2024, 1, 1),
            trip_time=time(10, 0),
            vehicle_type="sedan",
            passengers=2,
            contact_number1="5550100",
            driver_name="sam",
            confirmation_status=False,
            created_at=now,
        ))
        db.add(Trip(
            customer_name="citycabs",
            pickup_location="Harbour Road",
            dropoff_location="Tech Park",
            trip_date=date(2024, 1, 2),
            trip_time=time(8, 30),
            vehicle_type="van",
            passengers=6,
            contact_number1="5550200",
            contact_number2="5550201",
            description="Team pickup",
            confirmation_status=True,
            created_at=now,
        ))

        await db.commit()

        print("\n🎉 Seeding completed successfully!")
        print("\nSeeded customers (passwords are hashed, log in after a PUT):")
        print("  - normal_customer:      5550100 / asha123")
        print("  - cab_service_customer: 5550200 / citycabs123")


async def main():
    try:
        await seed()
    finally:
        await close_engine()


if __name__ == "__main__":
    asyncio.run(main())
