"""Sorting package for sortable.

Provides value comparison, sort criteria and in-place collection sorting.
"""

from .comparison import Comparator, compare_records, compare_values, orderable_value
from .sortable import (
    Sortable,
    find_by_field,
    find_by_label,
    registered_sorters,
    sort_by_field,
    sort_by_label,
    sort_by_sorter,
    sort_using,
    sorter_cmp,
)
from .sorter import Sorter

__all__ = [
    # Comparison
    "Comparator",
    "compare_values",
    "compare_records",
    "orderable_value",
    # Criteria
    "Sorter",
    # Collections
    "Sortable",
    "registered_sorters",
    "find_by_label",
    "find_by_field",
    "sort_by_label",
    "sort_by_field",
    "sort_by_sorter",
    "sort_using",
    "sorter_cmp",
]
