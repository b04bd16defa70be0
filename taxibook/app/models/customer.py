"""
Customer database model.

Maps the `Customer` table.
"""

from sqlalchemy import Column, Integer, String
from taxibook.app.db.session import Base
from taxibook.app.models.enums import CustomerType, DEFAULT_ACCOUNT_STATUS


class Customer(Base):
    """
    Customer model.

    `password` holds a bcrypt hash after creation, but whatever string was
    last submitted after an update.
    """
    __tablename__ = "Customer"

    customer_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    customer_type = Column(String(32), default=CustomerType.NORMAL_CUSTOMER.value, nullable=False)
    username = Column(String(100), nullable=False)
    phone = Column(String(32), index=True, nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    account_status = Column(String(32), default=DEFAULT_ACCOUNT_STATUS, nullable=False)

    def __repr__(self):
        return f"<Customer(customer_id={self.customer_id}, username='{self.username}', phone='{self.phone}')>"
