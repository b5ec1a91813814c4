"""Type-safe enumerations for sortable.

All categorical values use enum types for type safety and consistency.
"""

from enum import Enum


class SortOrder(str, Enum):
    """Sort direction for a single criterion.

    ASCENDING: smaller values first
    DESCENDING: larger values first
    """

    ASCENDING = "asc"
    DESCENDING = "desc"
