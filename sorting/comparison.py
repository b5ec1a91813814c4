"""Orderable value comparison.

Every comparison answers one question: does the left value sort before the
right one? The answer is three-valued:

    True  - left sorts before right
    False - left sorts after right
    None  - the values are equal; this comparison has no preference and
            the caller should fall through to the next rule

Booleans order False < True. Enum members order by their raw value.
"""

from enum import Enum
from operator import attrgetter
from typing import Any, Callable, TypeVar

import config
from enums import SortOrder

T = TypeVar("T")

Comparator = Callable[[T, T], bool | None]


def orderable_value(value: Any) -> Any:
    """Unwrap enum members to their raw value so they compare by it."""
    if isinstance(value, Enum):
        return value.value
    return value


def compare_values(
    lhs: Any,
    rhs: Any,
    order: SortOrder = config.DEFAULT_SORT_ORDER,
) -> bool | None:
    """Compare two values of the same orderable type.

    Args:
        lhs: Left value
        rhs: Right value
        order: ASCENDING tests lhs < rhs, DESCENDING tests rhs < lhs

    Returns:
        None if the values are equal, otherwise whether lhs sorts first.

    Examples:
        >>> compare_values(1, 2)
        True
        >>> compare_values(1, 2, SortOrder.DESCENDING)
        False
        >>> compare_values(True, True) is None
        True
    """
    left = orderable_value(lhs)
    right = orderable_value(rhs)
    if left == right:
        return None
    if order == SortOrder.ASCENDING:
        return left < right
    return right < left


def compare_records(
    lhs: T,
    rhs: T,
    field: str,
    order: SortOrder = config.DEFAULT_SORT_ORDER,
) -> bool | None:
    """Compare two records by one named field.

    Args:
        lhs: Left record
        rhs: Right record
        field: Attribute name, dotted paths allowed ("routing.metric")
        order: Sort direction

    Returns:
        Same three-valued result as compare_values().
    """
    read = attrgetter(field)
    return compare_values(read(lhs), read(rhs), order)
