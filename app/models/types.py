"""Column types shared by the entity models."""

from sqlalchemy import BigInteger, Integer

# BIGINT identity on PostgreSQL; SQLite only auto-increments INTEGER keys.
IdentityKey = BigInteger().with_variant(Integer(), "sqlite")

# Range of a signed 64-bit key; ids outside it can never match a row.
KEY_MIN = -(2**63)
KEY_MAX = 2**63 - 1
