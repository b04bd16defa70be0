"""
Trip persistence gateway.

Single-statement helpers over the `trip` table.
"""

from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from taxibook.app.core.reliability import persistence_guard
from taxibook.app.models.trip import Trip


@persistence_guard("Error creating trip")
async def insert_trip(db: AsyncSession, values: dict) -> Trip:
    trip = Trip(**values)
    db.add(trip)
    await db.commit()
    await db.refresh(trip)
    return trip


@persistence_guard("Error fetching trips")
async def list_trips(db: AsyncSession) -> List[Trip]:
    result = await db.execute(select(Trip))
    return list(result.scalars().all())


@persistence_guard("Error fetching trips by driver")
async def list_trips_by_driver(db: AsyncSession, driver_name: str) -> List[Trip]:
    result = await db.execute(select(Trip).where(Trip.driver_name == driver_name))
    return list(result.scalars().all())


@persistence_guard("Error fetching trip")
async def get_trip(db: AsyncSession, trip_id: int) -> Optional[Trip]:
    result = await db.execute(select(Trip).where(Trip.trip_id == trip_id))
    return result.scalar_one_or_none()


@persistence_guard("Error updating trip")
async def trip_exists(db: AsyncSession, trip_id: int) -> bool:
    result = await db.execute(select(Trip.trip_id).where(Trip.trip_id == trip_id))
    return result.first() is not None


@persistence_guard("Error updating trip")
async def replace_trip(db: AsyncSession, trip_id: int, values: dict) -> int:
    """Overwrite every submitted column of one trip. Returns affected rows."""
    result = await db.execute(
        update(Trip)
        .where(Trip.trip_id == trip_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount


@persistence_guard("Error confirming trip")
async def set_confirmation_status(db: AsyncSession, trip_id: int, confirmed: bool) -> int:
    result = await db.execute(
        update(Trip)
        .where(Trip.trip_id == trip_id)
        .values(confirmation_status=confirmed)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount


@persistence_guard("Error deleting trip")
async def delete_trip(db: AsyncSession, trip_id: int) -> int:
    result = await db.execute(
        delete(Trip)
        .where(Trip.trip_id == trip_id)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount
