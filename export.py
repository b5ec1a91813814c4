"""JSON export and import for sortable records.

Records are plain dataclasses, so they serialize field by field; enum
members are written as their values. The sorting core never touches
serialized data: this module is the encode/decode boundary for callers
that persist or transmit sorted collections.
"""

import dataclasses
import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, get_type_hints

import config
from enums import SortOrder
from sorting import Sorter


def parse_sort_order(text: str) -> SortOrder:
    """Decode a sort order from text.

    Args:
        text: "asc", "desc", "ascending", "descending" or a member name
            (case-insensitive, surrounding whitespace ignored)

    Returns:
        Matching SortOrder.

    Raises:
        ValueError: If text names no sort order.
    """
    key = text.strip().lower()
    if key in config.SORT_ORDER_ALIASES:
        return config.SORT_ORDER_ALIASES[key]
    raise ValueError(f"Unknown sort order: {text!r}")


def record_to_dict(record: Any) -> dict[str, Any]:
    """Convert a dataclass record to a JSON-compatible dictionary.

    Nested dataclasses become nested dictionaries.

    Raises:
        ValueError: If record is not a dataclass instance.
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise ValueError(f"Not a dataclass record: {type(record).__name__}")
    return dataclasses.asdict(record, dict_factory=_json_dict)


def sorter_to_dict(sorter: Sorter) -> dict[str, Any]:
    """Describe a sort criterion (the priority comparator is not serializable)."""
    return {
        "field": sorter.field,
        "order": sorter.order.value,
        "label": sorter.label,
        "has_priority": sorter.priority is not None,
    }


def export_to_json(
    records: list[Any],
    sorter: Sorter | None = None,
    indent: int = config.JSON_INDENT,
) -> str:
    """Export records to JSON format with metadata.

    Args:
        records: Dataclass records, typically already sorted
        sorter: Criterion the records were sorted by, if any
        indent: JSON indentation (default from config)

    Returns:
        JSON string with metadata and record data.
    """
    metadata = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "record_count": len(records),
        "record_type": type(records[0]).__name__ if records else None,
        "tool": config.TOOL_NAME,
        "version": config.VERSION,
        "sort": sorter_to_dict(sorter) if sorter is not None else None,
    }

    output = {
        "metadata": metadata,
        "records": [record_to_dict(r) for r in records],
    }

    # label may be any hashable token; fall back to str() for non-JSON ones
    return json.dumps(output, indent=indent, default=str)


def load_records(data: str | list[dict[str, Any]] | dict[str, Any], record_type: type) -> list[Any]:
    """Decode records back into instances of record_type.

    Args:
        data: JSON text, an exported document, or a list of record dicts
        record_type: Dataclass to build; enum fields are rebuilt from values

    Returns:
        List of record_type instances in document order.

    Raises:
        ValueError: If record_type is not a dataclass or the data is malformed.
    """
    if not dataclasses.is_dataclass(record_type):
        raise ValueError(f"Not a dataclass type: {record_type!r}")

    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}") from e
    if isinstance(data, dict):
        data = data.get("records")
    if not isinstance(data, list):
        raise ValueError("Expected a list of records")

    return [_build_record(record_type, item) for item in data]


def _json_dict(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in items}


def _build_record(record_type: type, item: Any) -> Any:
    if not isinstance(item, dict):
        raise ValueError(f"Expected an object for {record_type.__name__}, got {item!r}")

    hints = get_type_hints(record_type)
    kwargs = {}
    for f in dataclasses.fields(record_type):
        if not f.init or f.name not in item:
            continue
        kwargs[f.name] = _decode_value(hints.get(f.name, f.type), item[f.name])

    try:
        return record_type(**kwargs)
    except TypeError as e:
        raise ValueError(f"Cannot build {record_type.__name__}: {e}") from e


def _decode_value(field_type: Any, value: Any) -> Any:
    if isinstance(field_type, type):
        if issubclass(field_type, Enum):
            return field_type(value)
        if dataclasses.is_dataclass(field_type) and isinstance(value, dict):
            return _build_record(field_type, value)
    return value
