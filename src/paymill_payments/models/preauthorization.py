"""
Preauthorizations: amounts reserved on a payment and captured later by a transaction.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..core.fields import BOOLEAN, ENUM, INTEGER, NESTED, TIMESTAMP, WireField
from ..core.model import Resource
from ..core.query import Comparison, Filter, Order

if TYPE_CHECKING:
    from .client import Client
    from .payment import Payment
    from .transaction import Transaction

__all__ = [
    "Preauthorization",
    "PreauthorizationFilter",
    "PreauthorizationOrder",
    "PreauthorizationStatus",
]


class PreauthorizationStatus(enum.Enum):
    OPEN = "open"
    PENDING = "pending"
    CLOSED = "closed"
    FAILED = "failed"
    DELETED = "deleted"
    PREAUTH = "preauth"
    UNDEFINED = "undefined"

    @classmethod
    def _missing_(cls, value):
        return cls.UNDEFINED


class PreauthorizationFilter(Filter):
    def by_client_id(self, client_id: str) -> "PreauthorizationFilter":
        return self._set("client", client_id)

    def by_payment_id(self, payment_id: str) -> "PreauthorizationFilter":
        return self._set("payment", payment_id)

    def by_amount(self, amount: int) -> "PreauthorizationFilter":
        return self._compare("amount", Comparison.EQ, amount)

    def by_amount_greater_than(self, amount: int) -> "PreauthorizationFilter":
        return self._compare("amount", Comparison.GT, amount)

    def by_amount_less_than(self, amount: int) -> "PreauthorizationFilter":
        return self._compare("amount", Comparison.LT, amount)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "PreauthorizationFilter":
        return self._set_dates("created_at", date, end_date)


class PreauthorizationOrder(Order):
    SORTABLE = ("created_at",)

    def by_created_at(self) -> "PreauthorizationOrder":
        return self.by_field("created_at")


@dataclass
class Preauthorization(Resource):
    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    status: Optional[PreauthorizationStatus] = None
    livemode: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    payment: Optional["Payment"] = None
    client: Optional["Client"] = None
    transaction: Optional["Transaction"] = None
    app_id: Optional[str] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("amount", kind=INTEGER),
        WireField("currency"),
        WireField("description"),
        WireField("status", kind=ENUM, target=PreauthorizationStatus),
        WireField("livemode", kind=BOOLEAN),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("payment", kind=NESTED, target="Payment"),
        WireField("client", kind=NESTED, target="Client"),
        WireField("transaction", kind=NESTED, target="Transaction"),
        WireField("app_id"),
    )
    FILTER = PreauthorizationFilter
    ORDER = PreauthorizationOrder
