"""
Subscriptions: a client's recurring charges, usually following an offer.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..core.fields import BOOLEAN, ENUM, INTEGER, NESTED, TIMESTAMP, VALUE, WireField
from ..core.model import Resource
from ..core.query import Filter, Order
from .interval import Interval

if TYPE_CHECKING:
    from .client import Client
    from .offer import Offer
    from .payment import Payment

__all__ = [
    "Subscription",
    "SubscriptionFilter",
    "SubscriptionOrder",
    "SubscriptionStatus",
]


class SubscriptionStatus(enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    FAILED = "failed"
    UNDEFINED = "undefined"

    @classmethod
    def _missing_(cls, value):
        return cls.UNDEFINED


class SubscriptionFilter(Filter):
    def by_offer_id(self, offer_id: str) -> "SubscriptionFilter":
        return self._set("offer", offer_id)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "SubscriptionFilter":
        return self._set_dates("created_at", date, end_date)


class SubscriptionOrder(Order):
    SORTABLE = ("created_at", "offer", "canceled_at")

    def by_offer(self) -> "SubscriptionOrder":
        return self.by_field("offer")

    def by_canceled_at(self) -> "SubscriptionOrder":
        return self.by_field("canceled_at")

    def by_created_at(self) -> "SubscriptionOrder":
        return self.by_field("created_at")


@dataclass
class Subscription(Resource):
    offer: Optional["Offer"] = None
    livemode: Optional[bool] = None
    amount: Optional[int] = None
    temp_amount: Optional[int] = None
    currency: Optional[str] = None
    name: Optional[str] = None
    interval: Optional[Interval] = None
    period_of_validity: Optional[Interval] = None
    trial_start: Optional[datetime] = None
    trial_end: Optional[datetime] = None
    end_of_period: Optional[datetime] = None
    next_capture_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    payment: Optional["Payment"] = None
    client: Optional["Client"] = None
    status: Optional[SubscriptionStatus] = None
    canceled: Optional[bool] = None
    deleted: Optional[bool] = None
    app_id: Optional[str] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("offer", kind=NESTED, target="Offer", updateable=True),
        WireField("livemode", kind=BOOLEAN),
        WireField("amount", kind=INTEGER, updateable=True),
        WireField("temp_amount", kind=INTEGER),
        WireField("currency", updateable=True),
        WireField("name", updateable=True),
        WireField("interval", kind=VALUE, target=Interval, updateable=True),
        WireField("period_of_validity", kind=VALUE, target=Interval, updateable=True),
        WireField("trial_start", kind=TIMESTAMP),
        WireField("trial_end", kind=TIMESTAMP),
        WireField("end_of_period", kind=TIMESTAMP),
        WireField("next_capture_at", kind=TIMESTAMP),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("canceled_at", kind=TIMESTAMP),
        WireField("payment", kind=NESTED, target="Payment", updateable=True),
        WireField("client", kind=NESTED, target="Client"),
        WireField("status", kind=ENUM, target=SubscriptionStatus),
        WireField("canceled", wire="is_canceled", kind=BOOLEAN),
        WireField("deleted", wire="is_deleted", kind=BOOLEAN),
        WireField("app_id"),
    )
    FILTER = SubscriptionFilter
    ORDER = SubscriptionOrder
