"""
Password hashing primitive.

Customers get a bcrypt hash at creation time. No verification helper is
exposed: login compares the stored value as-is.
"""

import bcrypt

from taxibook.app.core.config import settings

# bcrypt only reads this many bytes of the secret
BCRYPT_MAX_BYTES = 72


def get_password_hash(password: str) -> str:
    """
    Return a bcrypt hash of `password` using the configured work factor.

    Bytes past the 72nd are ignored rather than rejected.
    """
    secret = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(secret, salt).decode("utf-8")
