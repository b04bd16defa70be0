"""
Customer API endpoints.

Create, read, replace, delete and log in customers.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from starlette.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from taxibook.app.db.session import get_db
from taxibook.app.core.dependencies import customer_id_path
from taxibook.app.core.security import get_password_hash
from taxibook.app.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerLogin,
    CustomerResponse,
    CustomerRecord,
    CustomerLoginResponse,
)
from taxibook.app.services import customers as customer_store

logger = logging.getLogger("taxibook.customers")

router = APIRouter(prefix="/customers", tags=["Customers"])

CUSTOMER_NOT_FOUND = "Customer not found"


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer: CustomerCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a new customer.

    The password is stored as a bcrypt hash and never echoed back.
    """
    values = customer.model_dump()
    values["customer_type"] = customer.customer_type.value
    # CPU bound: hash in the threadpool
    values["password"] = await run_in_threadpool(get_password_hash, customer.password)

    customer_id = await customer_store.insert_customer(db, values)
    logger.info("Created customer %s (%s)", customer_id, values["customer_type"])

    return CustomerResponse(
        customer_id=customer_id,
        customer_type=customer.customer_type,
        username=customer.username,
        phone=customer.phone,
        email=customer.email,
        account_status=customer.account_status,
    )


@router.get("", response_model=List[CustomerRecord])
async def list_customers(db: AsyncSession = Depends(get_db)):
    """Get every customer row, in store order."""
    return await customer_store.list_customers(db)


# Declared ahead of the `{customer_id}` routes so the literal segment wins.
@router.post("/login", response_model=CustomerLoginResponse)
async def login(
    credentials: CustomerLogin,
    db: AsyncSession = Depends(get_db)
):
    """
    Log a customer in by phone number.

    The submitted password is compared to the stored value as-is.
    """
    if not credentials.phone or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Phone number and password are required"
        )

    customer = await customer_store.find_customer_by_phone(db, credentials.phone)
    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_NOT_FOUND
        )

    if customer.password != credentials.password:
        logger.warning("Failed login for customer %s", customer.customer_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password"
        )

    return CustomerLoginResponse.model_validate(customer)


@router.get("/{customer_id}", response_model=CustomerRecord)
async def get_customer(
    customer_id: int = Depends(customer_id_path),
    db: AsyncSession = Depends(get_db)
):
    """Get a specific customer by ID."""
    customer = await customer_store.get_customer(db, customer_id)

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_NOT_FOUND
        )

    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_update: CustomerUpdate,
    customer_id: int = Depends(customer_id_path),
    db: AsyncSession = Depends(get_db)
):
    """
    Replace a customer.

    Every field is overwritten, the password with the raw submitted value.
    """
    if not await customer_store.customer_exists(db, customer_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_NOT_FOUND
        )

    values = customer_update.model_dump()
    values["customer_type"] = customer_update.customer_type.value
    await customer_store.replace_customer(db, customer_id, values)

    return CustomerResponse(customer_id=customer_id, **customer_update.model_dump(exclude={"password"}))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: int = Depends(customer_id_path),
    db: AsyncSession = Depends(get_db)
):
    """Delete a customer."""
    deleted = await customer_store.delete_customer(db, customer_id)

    if deleted == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=CUSTOMER_NOT_FOUND
        )

    logger.info("Deleted customer %s", customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
