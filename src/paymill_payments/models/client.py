"""
Clients: the customers payments, transactions and subscriptions belong to.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple

from ..core.fields import NESTED_LIST, TIMESTAMP, WireField
from ..core.model import Resource
from ..core.query import Comparison, Filter, Order

if TYPE_CHECKING:
    from .payment import Payment
    from .subscription import Subscription

__all__ = ["Client", "ClientFilter", "ClientOrder"]


class ClientFilter(Filter):
    def by_payment(self, payment_id: str) -> "ClientFilter":
        return self._set("payment", payment_id)

    def by_email(self, email: str) -> "ClientFilter":
        return self._set("email", email)

    def by_description(self, description: str) -> "ClientFilter":
        return self._set("description", description)

    def by_subscription(self, subscription_id: str) -> "ClientFilter":
        return self._set("subscription", subscription_id)

    def by_offer(self, offer_id: str) -> "ClientFilter":
        return self._set("offer", offer_id)

    def by_amount(self, amount: int) -> "ClientFilter":
        return self._compare("amount", Comparison.EQ, amount)

    def by_amount_greater_than(self, amount: int) -> "ClientFilter":
        return self._compare("amount", Comparison.GT, amount)

    def by_amount_less_than(self, amount: int) -> "ClientFilter":
        return self._compare("amount", Comparison.LT, amount)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "ClientFilter":
        return self._set_dates("created_at", date, end_date)

    def by_updated_at(self, date: datetime, end_date: Optional[datetime] = None) -> "ClientFilter":
        return self._set_dates("updated_at", date, end_date)


class ClientOrder(Order):
    SORTABLE = ("created_at", "email", "creditcard")

    def by_created_at(self) -> "ClientOrder":
        return self.by_field("created_at")

    def by_email(self) -> "ClientOrder":
        return self.by_field("email")

    def by_creditcard(self) -> "ClientOrder":
        return self.by_field("creditcard")


@dataclass
class Client(Resource):
    email: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    payments: Optional[List["Payment"]] = None
    subscriptions: Optional[List["Subscription"]] = None
    app_id: Optional[str] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("email", updateable=True),
        WireField("description", updateable=True),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("payments", wire="payment", kind=NESTED_LIST, target="Payment"),
        WireField("subscriptions", wire="subscription", kind=NESTED_LIST, target="Subscription"),
        WireField("app_id"),
    )
    FILTER = ClientFilter
    ORDER = ClientOrder
