"""
Refunds: full or partial reversals of a transaction.
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
    from .transaction import Transaction

__all__ = ["Refund", "RefundFilter", "RefundOrder", "RefundStatus"]


class RefundStatus(enum.Enum):
    OPEN = "open"
    PENDING = "pending"
    REFUNDED = "refunded"
    UNDEFINED = "undefined"

    @classmethod
    def _missing_(cls, value):
        return cls.UNDEFINED


class RefundFilter(Filter):
    def by_client_id(self, client_id: str) -> "RefundFilter":
        return self._set("client", client_id)

    def by_transaction_id(self, transaction_id: str) -> "RefundFilter":
        return self._set("transaction", transaction_id)

    def by_amount(self, amount: int) -> "RefundFilter":
        return self._compare("amount", Comparison.EQ, amount)

    def by_amount_greater_than(self, amount: int) -> "RefundFilter":
        return self._compare("amount", Comparison.GT, amount)

    def by_amount_less_than(self, amount: int) -> "RefundFilter":
        return self._compare("amount", Comparison.LT, amount)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "RefundFilter":
        return self._set_dates("created_at", date, end_date)


class RefundOrder(Order):
    SORTABLE = ("created_at", "amount", "transaction")

    def by_created_at(self) -> "RefundOrder":
        return self.by_field("created_at")

    def by_amount(self) -> "RefundOrder":
        return self.by_field("amount")

    def by_transaction(self) -> "RefundOrder":
        return self.by_field("transaction")


@dataclass
class Refund(Resource):
    transaction: Optional["Transaction"] = None
    amount: Optional[int] = None
    status: Optional[RefundStatus] = None
    description: Optional[str] = None
    livemode: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    response_code: Optional[int] = None
    app_id: Optional[str] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("transaction", kind=NESTED, target="Transaction"),
        WireField("amount", kind=INTEGER),
        WireField("status", kind=ENUM, target=RefundStatus),
        WireField("description"),
        WireField("livemode", kind=BOOLEAN),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("response_code", kind=INTEGER),
        WireField("app_id"),
    )
    FILTER = RefundFilter
    ORDER = RefundOrder
