"""Sort criterion definition.

A Sorter bundles the field to read, the direction, an optional lookup label
and an optional priority comparator. Sorters are declared once per record
type and shared by every sort that uses them, so they are frozen.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field as dataclass_field
from functools import partial
from typing import Generic

import config
from enums import SortOrder

from .comparison import Comparator, T, compare_records


@dataclass(frozen=True)
class Sorter(Generic[T]):
    """One reusable ordering rule for records of type T.

    Attributes:
        field: Name of the record attribute to compare (also the lookup key)
        order: ASCENDING or DESCENDING, fixed at construction
        label: Optional hashable token for lookup by name
        priority: Optional comparator consulted before the field comparison;
            returning None defers to the field comparison
        comparison: Field comparison derived from field and order
    """

    field: str
    order: SortOrder = config.DEFAULT_SORT_ORDER
    label: Hashable | None = None
    priority: Comparator | None = None
    comparison: Comparator = dataclass_field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to bind the derived comparison once
        object.__setattr__(
            self,
            "comparison",
            partial(compare_records, field=self.field, order=self.order),
        )

    def precedes(self, lhs: T, rhs: T) -> bool:
        """Decide whether lhs sorts strictly before rhs.

        The priority comparator wins when it is decisive, then the field
        comparison. If neither has a preference the answer is False.
        """
        if self.priority is not None:
            decided = self.priority(lhs, rhs)
            if decided is not None:
                return decided
        decided = self.comparison(lhs, rhs)
        if decided is not None:
            return decided
        return False

