"""
Customer enumerations.
"""

import enum


class CustomerType(str, enum.Enum):
    """
    Customer type enumeration.

    Types:
        NORMAL_CUSTOMER: Individual rider (default for anything unrecognised)
        CAB_SERVICE_CUSTOMER: Cab service operator booking on behalf of riders
    """
    NORMAL_CUSTOMER = "normal_customer"
    CAB_SERVICE_CUSTOMER = "cab_service_customer"

    @classmethod
    def coerce(cls, value) -> "CustomerType":
        """Return the matching type, or NORMAL_CUSTOMER for any other input."""
        for member in cls:
            if value == member.value:
                return member
        return cls.NORMAL_CUSTOMER


DEFAULT_ACCOUNT_STATUS = "active"
