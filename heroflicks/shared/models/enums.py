"""
Enums used across the application.
"""

from enum import Enum


class Editorial(str, Enum):
    """Publisher of a comic. Values are stored and returned verbatim."""

    MARVEL = "Marvel"
    DC = "DC"
    OTROS = "Otros"


class ListType(str, Enum):
    """Kind of a user-defined list."""

    PENDING = "pending"
    LIKED = "liked"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """values_callable for SQLEnum columns so the database holds values, not member names."""
    return [member.value for member in enum_cls]
