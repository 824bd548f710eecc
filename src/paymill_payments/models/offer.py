"""
Offers: recurring plans a client can subscribe to.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from ..core.fields import INTEGER, NESTED, TIMESTAMP, VALUE, WireField
from ..core.model import Model, Resource
from ..core.query import Comparison, Filter, Order
from .interval import Interval

__all__ = ["Offer", "OfferFilter", "OfferOrder", "SubscriptionCount"]


@dataclass
class SubscriptionCount(Model):
    active: Optional[int] = None
    inactive: Optional[int] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("active", kind=INTEGER),
        WireField("inactive", kind=INTEGER),
    )


class OfferFilter(Filter):
    def by_name(self, name: str) -> "OfferFilter":
        return self._set("name", name)

    def by_trial_period_days(self, trial_period_days: int) -> "OfferFilter":
        return self._set("trial_period_days", trial_period_days)

    def by_amount(self, amount: int) -> "OfferFilter":
        return self._compare("amount", Comparison.EQ, amount)

    def by_amount_greater_than(self, amount: int) -> "OfferFilter":
        return self._compare("amount", Comparison.GT, amount)

    def by_amount_less_than(self, amount: int) -> "OfferFilter":
        return self._compare("amount", Comparison.LT, amount)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "OfferFilter":
        """
        Filter on the creation date.

        Without ``end_date`` only offers created in that exact second match;
        otherwise the range ``date``..``end_date`` (both inclusive) is used.
        Raises :class:`~paymill_payments.core.errors.InvalidArgumentError`
        when ``date`` is ``None``.
        """
        return self._set_dates("created_at", date, end_date)

    def by_updated_at(self, date: datetime, end_date: Optional[datetime] = None) -> "OfferFilter":
        return self._set_dates("updated_at", date, end_date)


class OfferOrder(Order):
    SORTABLE = ("created_at", "interval", "amount", "trial_period_days")

    def by_interval(self) -> "OfferOrder":
        return self.by_field("interval")

    def by_amount(self) -> "OfferOrder":
        return self.by_field("amount")

    def by_created_at(self) -> "OfferOrder":
        return self.by_field("created_at")

    def by_trial_period_days(self) -> "OfferOrder":
        return self.by_field("trial_period_days")


@dataclass
class Offer(Resource):
    name: Optional[str] = None
    amount: Optional[int] = None
    interval: Optional[Interval] = None
    trial_period_days: Optional[int] = None
    currency: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    app_id: Optional[str] = None
    subscription_count: Optional[SubscriptionCount] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("name", updateable=True),
        WireField("amount", kind=INTEGER, updateable=True),
        WireField("interval", kind=VALUE, target=Interval, updateable=True),
        WireField("trial_period_days", kind=INTEGER),
        WireField("currency", updateable=True),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("app_id"),
        WireField("subscription_count", kind=NESTED, target=SubscriptionCount),
    )
    FILTER = OfferFilter
    ORDER = OfferOrder
