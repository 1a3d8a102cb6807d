"""
Bounds of the store's integer columns.
"""

DB_INT_MIN = -(2 ** 63)
DB_INT_MAX = 2 ** 63 - 1


def fits_db_integer(value: int) -> bool:
    """True when value can be bound to a 64-bit INTEGER column."""
    return DB_INT_MIN <= value <= DB_INT_MAX
