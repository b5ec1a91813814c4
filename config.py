"""Configuration constants for sortable.

Single source of truth for defaults shared by the sorting core and export.
"""

from enums import SortOrder

# Sorting defaults
DEFAULT_SORT_ORDER: SortOrder = SortOrder.ASCENDING

# Accepted spellings when decoding a sort order from text (lowercase keys)
SORT_ORDER_ALIASES: dict[str, SortOrder] = {
    "asc": SortOrder.ASCENDING,
    "ascending": SortOrder.ASCENDING,
    "desc": SortOrder.DESCENDING,
    "descending": SortOrder.DESCENDING,
}

# JSON export
JSON_INDENT: int = 2

# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "sortable"
