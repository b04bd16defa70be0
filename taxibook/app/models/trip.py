"""
Trip database model.

Maps the `trip` table. No foreign keys: `customer_name` and `driver_name`
are free text.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, Date, Time, DateTime
from taxibook.app.db.session import Base


class Trip(Base):
    """Trip booking model."""
    __tablename__ = "trip"

    trip_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    customer_name = Column(String(100), nullable=True)

    # Route
    pickup_location = Column(String(255), nullable=False)
    dropoff_location = Column(String(255), nullable=False)
    trip_date = Column(Date, nullable=False)
    trip_time = Column(Time, nullable=False)

    # Booking details
    vehicle_type = Column(String(50), nullable=False)
    passengers = Column(Integer, nullable=False)
    contact_number1 = Column(String(32), nullable=False)
    contact_number2 = Column(String(32), nullable=True)
    description = Column(Text, nullable=True)
    driver_name = Column(String(100), index=True, nullable=True)

    confirmation_status = Column(Boolean, default=False, nullable=False)

    # Assigned by the service, not the store
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Trip(trip_id={self.trip_id}, trip_date='{self.trip_date}', confirmed={self.confirmation_status})>"
