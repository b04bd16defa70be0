"""
API Router.

Aggregates the customer and trip endpoints under the API prefix.
"""

from fastapi import APIRouter
from taxibook.app.api.endpoints import customers, trips

router = APIRouter()

# Customer endpoints
router.include_router(customers.router)

# Trip endpoints (includes /trips-test)
router.include_router(trips.router)
