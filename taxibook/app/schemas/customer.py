"""
Customer Pydantic schemas.

Defines request and response models for customer management and login.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from taxibook.app.models.enums import CustomerType, DEFAULT_ACCOUNT_STATUS


class CustomerCreate(BaseModel):
    """
    Schema for creating a customer.

    `customer_type` never fails validation: anything other than a known
    type (including null) becomes `normal_customer`. A missing or null
    `account_status` becomes `"active"`.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    customer_type: CustomerType = Field(default=CustomerType.NORMAL_CUSTOMER)
    username: str
    phone: str
    password: str
    email: str
    account_status: str = Field(default=DEFAULT_ACCOUNT_STATUS)

    @field_validator("customer_type", mode="before")
    @classmethod
    def coerce_customer_type(cls, value):
        return CustomerType.coerce(value)

    @field_validator("account_status", mode="before")
    @classmethod
    def default_account_status(cls, value):
        return DEFAULT_ACCOUNT_STATUS if value is None else value


class CustomerUpdate(BaseModel):
    """
    Schema for replacing a customer.

    Every field is resubmitted; `account_status` has no default here.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    customer_type: CustomerType = Field(default=CustomerType.NORMAL_CUSTOMER)
    username: str
    phone: str
    password: str
    email: str
    account_status: str

    @field_validator("customer_type", mode="before")
    @classmethod
    def coerce_customer_type(cls, value):
        return CustomerType.coerce(value)


class CustomerLogin(BaseModel):
    """Schema for customer login. Presence is checked by the endpoint."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    phone: Optional[str] = None
    password: Optional[str] = None


class CustomerResponse(BaseModel):
    """Customer state echoed after create/update (no password)."""
    customer_id: int
    customer_type: CustomerType
    username: str
    phone: str
    email: str
    account_status: str

    class Config:
        from_attributes = True


class CustomerRecord(CustomerResponse):
    """A full `Customer` row, as listed and fetched."""
    password: str


class CustomerLoginResponse(CustomerResponse):
    """Successful login."""
    message: str = "Login successful"
