"""
Customer persistence gateway.

Each function issues a single statement against the `Customer` table and
returns rows, the inserted id or the affected-row count.
"""

from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from taxibook.app.core.reliability import persistence_guard
from taxibook.app.models.customer import Customer


@persistence_guard("Error creating customer")
async def insert_customer(db: AsyncSession, values: dict) -> int:
    customer = Customer(**values)
    db.add(customer)
    await db.commit()
    await db.refresh(customer)
    return customer.customer_id


@persistence_guard("Error fetching customers")
async def list_customers(db: AsyncSession) -> List[Customer]:
    result = await db.execute(select(Customer))
    return list(result.scalars().all())


@persistence_guard("Error fetching customer")
async def get_customer(db: AsyncSession, customer_id: int) -> Optional[Customer]:
    result = await db.execute(select(Customer).where(Customer.customer_id == customer_id))
    return result.scalar_one_or_none()


@persistence_guard("Error updating customer")
async def customer_exists(db: AsyncSession, customer_id: int) -> bool:
    result = await db.execute(
        select(Customer.customer_id).where(Customer.customer_id == customer_id)
    )
    return result.first() is not None


@persistence_guard("Error updating customer")
async def replace_customer(db: AsyncSession, customer_id: int, values: dict) -> int:
    """Overwrite every column of one customer. Returns affected rows."""
    result = await db.execute(
        update(Customer)
        .where(Customer.customer_id == customer_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount


@persistence_guard("Error deleting customer")
async def delete_customer(db: AsyncSession, customer_id: int) -> int:
    result = await db.execute(
        delete(Customer)
        .where(Customer.customer_id == customer_id)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount


@persistence_guard("Error during login")
async def find_customer_by_phone(db: AsyncSession, phone: str) -> Optional[Customer]:
    # Phone is not unique; the first match wins
    result = await db.execute(select(Customer).where(Customer.phone == phone).limit(1))
    return result.scalars().first()
