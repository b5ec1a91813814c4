"""Sortable records and in-place collection sorting.

A record type opts in by subclassing Sortable and declaring its criteria:

    @dataclass
    class Person(Sortable):
        name: str
        age: int

        sorters = (
            Sorter("name", label="by-name"),
            Sorter("age", SortOrder.DESCENDING, label="oldest-first"),
        )

The criteria tuple is per-type metadata, defined once and never mutated.
Collections are then reordered in place by label, by field or by an
explicit Sorter. A label or field that no criterion matches leaves the
collection untouched; the miss is only visible in DEBUG logs.
"""

from collections.abc import Hashable
from functools import cmp_to_key
from typing import Any, Callable, ClassVar

from logging_config import get_logger

from .sorter import Sorter

logger = get_logger(__name__)


class Sortable:
    """Capability marker for record types with registered sort criteria."""

    sorters: ClassVar[tuple[Sorter, ...]] = ()


def registered_sorters(record_type: type) -> tuple[Sorter, ...]:
    """Return the criteria a record type declares (empty if none)."""
    return tuple(getattr(record_type, "sorters", ()))


def find_by_label(record_type: type, label: Hashable) -> Sorter | None:
    """Find the first registered criterion whose label equals label."""
    return next(
        (s for s in registered_sorters(record_type) if s.label == label),
        None,
    )


def find_by_field(record_type: type, field: str) -> Sorter | None:
    """Find the first registered criterion that reads the given field."""
    return next(
        (s for s in registered_sorters(record_type) if s.field == field),
        None,
    )


def sort_by_label(
    records: list[Any],
    label: Hashable,
    record_type: type | None = None,
) -> None:
    """Sort records in place using the criterion registered under label.

    Args:
        records: Collection to reorder
        label: Label of a criterion declared on the record type
        record_type: Type whose criteria to search (default: type of the
            first record)
    """
    record_type = _resolve_record_type(records, record_type)
    if record_type is None:
        return
    sorter = find_by_label(record_type, label)
    if sorter is None:
        logger.debug("No sorter labelled %r on %s", label, record_type.__name__)
    sort_by_sorter(records, sorter)


def sort_by_field(
    records: list[Any],
    field: str,
    record_type: type | None = None,
) -> None:
    """Sort records in place using the criterion registered for field.

    A field that exists on the record but was never registered as a
    criterion is a no-op.

    Args:
        records: Collection to reorder
        field: Field identifier of a criterion declared on the record type
        record_type: Type whose criteria to search (default: type of the
            first record)
    """
    record_type = _resolve_record_type(records, record_type)
    if record_type is None:
        return
    sorter = find_by_field(record_type, field)
    if sorter is None:
        logger.debug("No sorter for field %r on %s", field, record_type.__name__)
    sort_by_sorter(records, sorter)


def sort_by_sorter(records: list[Any], sorter: Sorter | None) -> None:
    """Sort records in place with sorter, or do nothing if it is None."""
    if sorter is None:
        return
    sort_using(records, sorter)


def sort_using(records: list[Any], sorter: Sorter) -> None:
    """Sort records in place with an explicit criterion.

    Each pair is ordered by the priority comparator (asked both ways),
    then the field comparison. Pairs neither rule can tell apart have no
    guaranteed relative order.
    """
    logger.debug(
        "Sorting %d records by %r (%s, label=%r)",
        len(records),
        sorter.field,
        sorter.order.value,
        sorter.label,
    )
    records.sort(key=cmp_to_key(sorter_cmp(sorter)))


def sorter_cmp(sorter: Sorter) -> Callable[[Any, Any], int]:
    """Build a cmp-style function (-1/0/1) from a sorter.

    The priority comparator is asked about both orderings of a pair before
    the field comparison, so a one-sided override such as
    "flagged before unflagged" (True one way, None the other) still wins
    over the field. A decisive False only blocks its own direction.
    """

    def cmp(lhs: Any, rhs: Any) -> int:
        forward = backward = None
        if sorter.priority is not None:
            forward = sorter.priority(lhs, rhs)
            if forward:
                return -1
            backward = sorter.priority(rhs, lhs)
            if backward:
                return 1
        decided = sorter.comparison(lhs, rhs)
        if decided is True and forward is None:
            return -1
        if decided is False and backward is None:
            return 1
        return 0

    return cmp


def _resolve_record_type(records: list[Any], record_type: type | None) -> type | None:
    if record_type is not None:
        return record_type
    if not records:
        return None
    return type(records[0])
