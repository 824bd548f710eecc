"""
Transactions: charges against a payment, optionally backed by a preauthorization.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple

from ..core.fields import BOOLEAN, ENUM, INTEGER, NESTED, NESTED_LIST, PLAIN, TIMESTAMP, WireField
from ..core.model import Model, Resource
from ..core.query import Comparison, Filter, Order

if TYPE_CHECKING:
    from .client import Client
    from .payment import Payment
    from .preauthorization import Preauthorization
    from .refund import Refund

__all__ = [
    "Fee",
    "Transaction",
    "TransactionFilter",
    "TransactionOrder",
    "TransactionStatus",
]

# Response code reported for a successfully processed transaction.
SUCCESS_RESPONSE_CODE = 20000


class TransactionStatus(enum.Enum):
    OPEN = "open"
    PENDING = "pending"
    CLOSED = "closed"
    FAILED = "failed"
    PARTIAL_REFUNDED = "partial_refunded"
    REFUNDED = "refunded"
    PREAUTH = "preauth"
    CHARGEBACK = "chargeback"
    UNDEFINED = "undefined"

    @classmethod
    def _missing_(cls, value):
        return cls.UNDEFINED


@dataclass
class Fee(Model):
    """Application fee collected on top of a transaction."""

    type: Optional[str] = None
    application: Optional[str] = None
    payment: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    billed_at: Optional[datetime] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("type"),
        WireField("application"),
        WireField("payment"),
        WireField("amount", kind=INTEGER),
        WireField("currency"),
        WireField("billed_at", kind=TIMESTAMP),
    )


class TransactionFilter(Filter):
    def by_client_id(self, client_id: str) -> "TransactionFilter":
        return self._set("client", client_id)

    def by_payment_id(self, payment_id: str) -> "TransactionFilter":
        return self._set("payment", payment_id)

    def by_amount(self, amount: int) -> "TransactionFilter":
        return self._compare("amount", Comparison.EQ, amount)

    def by_amount_greater_than(self, amount: int) -> "TransactionFilter":
        return self._compare("amount", Comparison.GT, amount)

    def by_amount_less_than(self, amount: int) -> "TransactionFilter":
        return self._compare("amount", Comparison.LT, amount)

    def by_description(self, description: str) -> "TransactionFilter":
        return self._set("description", description)

    def by_status(self, status: TransactionStatus) -> "TransactionFilter":
        return self._set("status", None if status is None else status.value)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "TransactionFilter":
        return self._set_dates("created_at", date, end_date)

    def by_updated_at(self, date: datetime, end_date: Optional[datetime] = None) -> "TransactionFilter":
        return self._set_dates("updated_at", date, end_date)


class TransactionOrder(Order):
    SORTABLE = ("created_at", "amount", "status")

    def by_created_at(self) -> "TransactionOrder":
        return self.by_field("created_at")

    def by_amount(self) -> "TransactionOrder":
        return self.by_field("amount")

    def by_status(self) -> "TransactionOrder":
        return self.by_field("status")


@dataclass
class Transaction(Resource):
    amount: Optional[int] = None
    origin_amount: Optional[int] = None
    status: Optional[TransactionStatus] = None
    description: Optional[str] = None
    livemode: Optional[bool] = None
    refunds: Optional[List["Refund"]] = None
    currency: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    response_code: Optional[int] = None
    short_id: Optional[str] = None
    invoices: Optional[List[str]] = None
    payment: Optional["Payment"] = None
    client: Optional["Client"] = None
    preauthorization: Optional["Preauthorization"] = None
    fees: Optional[List[Fee]] = None
    app_id: Optional[str] = None
    fraud: Optional[bool] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("amount", kind=INTEGER),
        WireField("origin_amount", kind=INTEGER),
        WireField("status", kind=ENUM, target=TransactionStatus),
        WireField("description", updateable=True),
        WireField("livemode", kind=BOOLEAN),
        WireField("refunds", kind=NESTED_LIST, target="Refund"),
        WireField("currency"),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("response_code", kind=INTEGER),
        WireField("short_id"),
        WireField("invoices", kind=PLAIN),
        WireField("payment", kind=NESTED, target="Payment"),
        WireField("client", kind=NESTED, target="Client"),
        WireField("preauthorization", kind=NESTED, target="Preauthorization"),
        WireField("fees", kind=NESTED_LIST, target="Fee"),
        WireField("app_id"),
        WireField("fraud", wire="is_fraud", kind=BOOLEAN),
    )
    FILTER = TransactionFilter
    ORDER = TransactionOrder

    @property
    def successful(self) -> bool:
        return self.response_code == SUCCESS_RESPONSE_CODE
