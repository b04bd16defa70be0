"""
Trip API Endpoints.

Book, list, replace, delete and confirm trips, plus the driver lookup.

Route priority: literal paths (`/trips/driver/...`) are declared before
the `{trip_id}` routes, so a literal segment is never read as an id. Ids
that are not integers resolve to "Trip not found".
"""

import logging
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from taxibook.app.db.session import get_db
from taxibook.app.core.dependencies import trip_id_path
from taxibook.app.schemas.trip import (
    TripCreate,
    TripUpdate,
    TripConfirm,
    TripResponse,
    TripRecord,
    TripConfirmResponse,
)
from taxibook.app.services import trips as trip_store

logger = logging.getLogger("taxibook.trips")

router = APIRouter(tags=["Trips"])

TRIP_NOT_FOUND = "Trip not found"


@router.get("/trips-test")
async def trips_liveness():
    """Liveness check for the trips API."""
    return {"message": "Trips API is working"}


@router.post("/trips", response_model=TripRecord, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip: TripCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Book a trip.

    Validates:
    - pickup/dropoff, date, time, vehicle type, passengers and the first
      contact number are present
    - passengers is at least 1

    New trips are unconfirmed and stamped with the server time.
    """
    values = trip.model_dump()
    values["confirmation_status"] = False
    values["created_at"] = datetime.now(timezone.utc)

    created = await trip_store.insert_trip(db, values)
    logger.info("Created trip %s for %s passenger(s)", created.trip_id, created.passengers)

    return TripRecord(trip_id=created.trip_id, **values)


@router.get("/trips/driver/{driver_name}", response_model=List[TripRecord])
async def list_trips_by_driver(
    driver_name: str = Path(..., description="Exact driver name"),
    db: AsyncSession = Depends(get_db)
):
    """Get the trips assigned to a driver (exact name match)."""
    return await trip_store.list_trips_by_driver(db, driver_name)


@router.get("/trips", response_model=List[TripRecord])
async def list_trips(db: AsyncSession = Depends(get_db)):
    """Get every trip row, in store order."""
    return await trip_store.list_trips(db)


@router.get("/trips/{trip_id}", response_model=TripRecord)
async def get_trip(
    trip_id: int = Depends(trip_id_path),
    db: AsyncSession = Depends(get_db)
):
    """Get a specific trip by ID."""
    trip = await trip_store.get_trip(db, trip_id)

    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=TRIP_NOT_FOUND
        )

    return trip


@router.put("/trips/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_update: TripUpdate,
    trip_id: int = Depends(trip_id_path),
    db: AsyncSession = Depends(get_db)
):
    """
    Replace a trip.

    Full replace: an omitted `confirmation_status` resets the trip to
    unconfirmed.
    """
    if not await trip_store.trip_exists(db, trip_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=TRIP_NOT_FOUND
        )

    values = trip_update.model_dump()
    await trip_store.replace_trip(db, trip_id, values)

    return TripResponse(trip_id=trip_id, **values)


@router.delete("/trips/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: int = Depends(trip_id_path),
    db: AsyncSession = Depends(get_db)
):
    """Delete a trip."""
    deleted = await trip_store.delete_trip(db, trip_id)

    if deleted == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=TRIP_NOT_FOUND
        )

    logger.info("Deleted trip %s", trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/trips/{trip_id}/confirm", response_model=TripConfirmResponse)
async def confirm_trip(
    body: TripConfirm,
    trip_id: int = Depends(trip_id_path),
    db: AsyncSession = Depends(get_db)
):
    """
    Set a trip's confirmation flag.

    Either value may be set from either state.
    """
    if body.confirmation_status is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="confirmation_status is required"
        )

    updated = await trip_store.set_confirmation_status(db, trip_id, body.confirmation_status)

    if updated == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=TRIP_NOT_FOUND
        )

    logger.info("Trip %s confirmation_status=%s", trip_id, body.confirmation_status)
    return TripConfirmResponse(trip_id=trip_id, confirmation_status=body.confirmation_status)
