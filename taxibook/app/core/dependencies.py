"""
Path dependencies shared by the resource routers.

Ids arrive as text. Anything that cannot name a row (not an integer, or
outside the store's integer range) is reported as not found, the same as
an id with no matching row.
"""

from fastapi import HTTPException, Path, status

# Store ids are signed 32-bit integers
MAX_ID = 2**31 - 1


def parse_resource_id(raw: str, resource: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        value = None

    if value is None or not -MAX_ID - 1 <= value <= MAX_ID:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found"
        )
    return value


async def customer_id_path(customer_id: str = Path(..., description="Customer ID")) -> int:
    return parse_resource_id(customer_id, "Customer")


async def trip_id_path(trip_id: str = Path(..., description="Trip ID")) -> int:
    return parse_resource_id(trip_id, "Trip")
