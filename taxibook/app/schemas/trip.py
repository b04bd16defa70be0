"""
Trip schemas.

Schemas for trip booking, replacement, confirmation and visibility.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date, time, datetime


class TripBase(BaseModel):
    """Fields submitted on create and full replace."""
    # Phone numbers often arrive as JSON numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    customer_name: Optional[str] = None
    pickup_location: str = Field(..., min_length=1)
    dropoff_location: str = Field(..., min_length=1)
    trip_date: date
    trip_time: time
    vehicle_type: str = Field(..., min_length=1)
    passengers: int = Field(..., gt=0, description="Must be at least 1")
    contact_number1: str = Field(..., min_length=1)
    contact_number2: Optional[str] = None
    description: Optional[str] = None
    driver_name: Optional[str] = None


class TripCreate(TripBase):
    """Schema for booking a trip. New trips always start unconfirmed."""
    pass


class TripUpdate(TripBase):
    """Schema for replacing a trip. An omitted flag resets to unconfirmed."""
    confirmation_status: bool = False

    @field_validator("confirmation_status", mode="before")
    @classmethod
    def default_confirmation_status(cls, value):
        return False if value is None else value


class TripConfirm(BaseModel):
    """Body of the confirm operation. Presence is checked by the endpoint."""
    confirmation_status: Optional[bool] = None


class TripResponse(BaseModel):
    """Trip state echoed after a full replace."""
    trip_id: int
    customer_name: Optional[str] = None
    pickup_location: str
    dropoff_location: str
    trip_date: date
    trip_time: time
    vehicle_type: str
    passengers: int
    contact_number1: str
    contact_number2: Optional[str] = None
    description: Optional[str] = None
    driver_name: Optional[str] = None
    confirmation_status: bool

    class Config:
        from_attributes = True


class TripRecord(TripResponse):
    """A full `trip` row, as created, listed and fetched."""
    created_at: datetime


class TripConfirmResponse(BaseModel):
    """Response after changing the confirmation flag."""
    message: str = "Trip confirmation status updated"
    trip_id: int
    confirmation_status: bool
