"""Enumerations for msgengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so catalog bindings such as
``{"cardinal": "count"}`` compare equal to ``PluralType.CARDINAL``.

Python 3.13+.
"""

from enum import StrEnum


class PluralType(StrEnum):
    """CLDR plural rule type used by a plural query.

    StrEnum provides automatic string conversion: str(PluralType.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Quantity plurals: 1 item, 2 items"""

    ORDINAL = "ordinal"
    """Ordering plurals: 1st, 2nd, 3rd, 4th"""


class PluralCategory(StrEnum):
    """CLDR plural category names.

    Cardinal rules may yield any member; ordinal rules yield ONE, TWO, FEW
    or OTHER (MANY and ZERO occur in a handful of languages).
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


__all__ = [
    "PluralCategory",
    "PluralType",
]
