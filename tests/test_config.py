"""Tests for config.py and enums.py.

Tests configuration constants and the SortOrder enumeration.
"""

import json

from config import DEFAULT_SORT_ORDER, JSON_INDENT, SORT_ORDER_ALIASES, TOOL_NAME, VERSION
from enums import SortOrder


class TestSortOrder:
    """Tests for SortOrder enum."""

    def test_all_orders_defined(self):
        """Test both directions exist with their wire values."""
        assert SortOrder.ASCENDING == "asc"
        assert SortOrder.DESCENDING == "desc"
        assert len(SortOrder) == 2

    def test_decodes_from_value(self):
        """Test members round-trip through their string value."""
        for order in SortOrder:
            assert SortOrder(order.value) is order

    def test_json_serializable(self):
        """Test str-based members encode directly as JSON strings."""
        assert json.dumps({"order": SortOrder.DESCENDING}) == '{"order": "desc"}'


class TestSortingDefaults:
    """Tests for sorting configuration."""

    def test_default_order_is_ascending(self):
        """Test criteria default to ascending order."""
        assert DEFAULT_SORT_ORDER is SortOrder.ASCENDING

    def test_aliases_are_lowercase(self):
        """Test alias keys are lowercase (for case-insensitive matching)."""
        for alias in SORT_ORDER_ALIASES:
            assert alias == alias.lower()

    def test_aliases_cover_values_and_names(self):
        """Test every member is reachable by value and by name."""
        for order in SortOrder:
            assert SORT_ORDER_ALIASES[order.value] is order
            assert SORT_ORDER_ALIASES[order.name.lower()] is order


class TestMetadata:
    """Tests for tool metadata constants."""

    def test_tool_name(self):
        """Test tool name used for the package logger and exports."""
        assert TOOL_NAME == "sortable"

    def test_version_format(self):
        """Test version is dotted numeric."""
        assert all(part.isdigit() for part in VERSION.split("."))

    def test_json_indent_positive(self):
        """Test JSON indent is a positive int."""
        assert isinstance(JSON_INDENT, int) and JSON_INDENT > 0
