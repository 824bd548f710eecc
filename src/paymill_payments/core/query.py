"""
Fluent filter and order builders for list calls.

Resources subclass :class:`Filter` and :class:`Order` and add one ``by_*``
method per filterable or sortable attribute. Builders mutate in place and
return ``self``; they are meant to be owned by a single caller.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from .errors import InvalidArgumentError

__all__ = [
    "Comparison",
    "DateRange",
    "Direction",
    "Filter",
    "Order",
]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _epoch(value: datetime) -> int:
    return int(value.timestamp())


@dataclass(frozen=True)
class DateRange:
    """
    Exact date or inclusive ``start``..``end`` range for a date filter.

    Bounds are stored as aware UTC datetimes; naive input is read as UTC.
    Encodes to ``"<start>"`` or ``"<start>_<end>"`` in epoch seconds.
    """

    start: datetime
    end: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.start is None:
            raise InvalidArgumentError("A date filter needs a start date")
        object.__setattr__(self, "start", _as_utc(self.start))
        if self.end is None:
            return
        object.__setattr__(self, "end", _as_utc(self.end))
        if self.end < self.start:
            raise InvalidArgumentError(
                f"Date range end {self.end.isoformat()} is before start {self.start.isoformat()}"
            )

    def encode(self) -> str:
        if self.end is None:
            return str(_epoch(self.start))
        return f"{_epoch(self.start)}_{_epoch(self.end)}"


class Comparison(enum.Enum):
    EQ = ""
    GT = ">"
    LT = "<"


class Direction(enum.Enum):
    ASC = "asc"
    DESC = "desc"


class Filter:
    """Sparse ``wire key -> predicate`` mapping built through ``by_*`` calls."""

    def __init__(self) -> None:
        self._params: Dict[str, str] = {}
        self._comparisons: Dict[str, Dict[Comparison, int]] = {}

    def _set(self, key: str, value: Any) -> "Filter":
        if value is None:
            self._params.pop(key, None)
        else:
            self._params[key] = str(value)
        return self

    def _set_dates(self, key: str, date: Optional[datetime], end_date: Optional[datetime]) -> "Filter":
        if date is None:
            raise InvalidArgumentError(f"Filter on '{key}' needs a date")
        self._params[key] = DateRange(date, end_date).encode()
        return self

    def _compare(self, key: str, comparison: Comparison, value: int) -> "Filter":
        if value is None:
            raise InvalidArgumentError(f"Filter on '{key}' needs a value")
        slot = self._comparisons.setdefault(key, {})
        if comparison is Comparison.EQ:
            slot.clear()
        else:
            slot.pop(Comparison.EQ, None)
        slot[comparison] = int(value)
        return self

    def comparisons(self, key: str) -> Tuple[Tuple[Comparison, int], ...]:
        slot = self._comparisons.get(key, {})
        return tuple((comparison, slot[comparison]) for comparison in Comparison if comparison in slot)

    def to_params(self) -> Dict[str, Any]:
        """
        Query parameters for the predicates that were set.

        A key holding both a lower and an upper bound maps to a list rather
        than two separate keys; requests sends it as two repeated query
        parameters under the same name.
        """
        params: Dict[str, Any] = dict(self._params)
        for key in self._comparisons:
            tokens: List[str] = [f"{op.value}{value}" for op, value in self.comparisons(key)]
            if not tokens:
                continue
            params[key] = tokens[0] if len(tokens) == 1 else tokens
        return params

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_params()!r})"


class Order:
    """
    Single sort field plus a direction, rendered as ``order=<field>_<dir>``.

    ``SORTABLE`` lists the wire names a subclass accepts. When no field was
    chosen, ``created_at`` is used if sortable, else the first entry.
    """

    SORTABLE: ClassVar[Tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._field: Optional[str] = None
        self._direction = Direction.ASC

    def by_field(self, name: str) -> "Order":
        if name not in self.SORTABLE:
            raise InvalidArgumentError(
                f"{type(self).__name__} cannot sort by '{name}'; expected one of {', '.join(self.SORTABLE)}"
            )
        self._field = name
        return self

    def asc(self) -> "Order":
        self._direction = Direction.ASC
        return self

    def desc(self) -> "Order":
        self._direction = Direction.DESC
        return self

    @property
    def sort_field(self) -> str:
        if self._field is not None:
            return self._field
        if not self.SORTABLE:
            raise InvalidArgumentError(f"{type(self).__name__} has no sortable fields")
        if "created_at" in self.SORTABLE:
            return "created_at"
        return self.SORTABLE[0]

    @property
    def direction(self) -> Direction:
        return self._direction

    def to_params(self) -> Dict[str, str]:
        return {"order": f"{self.sort_field}_{self.direction.value}"}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sort_field}_{self.direction.value})"
