"""
Value objects and enum parsing for request inputs.

Query strings arrive as plain text; parse_enum turns them into enum
members or raises UnknownValueError with a caller-supplied message.
"""

import enum
from typing import Type, TypeVar

from task_distribution.domain.errors import UnknownValueError

E = TypeVar("E", bound=enum.Enum)


class SortDirection(str, enum.Enum):
    """Ordering applied to the employee listing (by full name)"""
    ASC = "ASC"
    DESC = "DESC"


def parse_enum(enum_cls: Type[E], value: str, error_message: str) -> E:
    """
    Parse a string into an enum member by exact (case-sensitive) name.

    Args:
        enum_cls: Enum class to parse against
        value: Raw string from the request
        error_message: Message for the UnknownValueError raised on failure

    Returns:
        The matching enum member

    Raises:
        UnknownValueError: If value is not a member name of enum_cls
    """
    try:
        return enum_cls[value]
    except (KeyError, TypeError):
        raise UnknownValueError(error_message, value=value) from None


def parse_sort_direction(value: str) -> SortDirection:
    """Parse "ASC"/"DESC", raising UnknownValueError("Unknown sort direction: ...") otherwise."""
    return parse_enum(SortDirection, value, f"Unknown sort direction: {value}")
