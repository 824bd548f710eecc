"""
Billing interval of offers and subscriptions, e.g. ``"1 MONTH"`` or ``"2 WEEK,friday"``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..core.errors import InvalidArgumentError

__all__ = ["Interval", "IntervalUnit", "Weekday"]


class IntervalUnit(enum.Enum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class Weekday(enum.Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


@dataclass(frozen=True)
class Interval:
    count: int
    unit: IntervalUnit
    weekday: Optional[Weekday] = None

    def __post_init__(self) -> None:
        if self.count < 1:
            raise InvalidArgumentError(f"Interval count must be positive, got {self.count}")

    @classmethod
    def parse(cls, raw: str) -> "Interval":
        text = raw.strip()
        period, _, weekday = text.partition(",")
        parts = period.split()
        if len(parts) != 2:
            raise InvalidArgumentError(f"Cannot parse interval '{raw}'")
        try:
            count = int(parts[0])
            unit = IntervalUnit(parts[1].upper())
            day = Weekday(weekday.strip().lower()) if weekday.strip() else None
        except ValueError as exc:
            raise InvalidArgumentError(f"Cannot parse interval '{raw}'") from exc
        return cls(count, unit, day)

    def __str__(self) -> str:
        text = f"{self.count} {self.unit.value}"
        if self.weekday is not None:
            text += f",{self.weekday.value}"
        return text
