"""
Payments: stored credit cards or direct debit accounts created from a token.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from ..core.fields import ENUM, INTEGER, TIMESTAMP, WireField
from ..core.model import Resource
from ..core.query import Filter, Order

__all__ = ["Payment", "PaymentFilter", "PaymentOrder", "PaymentType"]


class PaymentType(enum.Enum):
    CREDITCARD = "creditcard"
    DEBIT = "debit"
    UNDEFINED = "undefined"

    @classmethod
    def _missing_(cls, value):
        return cls.UNDEFINED


class PaymentFilter(Filter):
    def by_card_type(self, card_type: str) -> "PaymentFilter":
        return self._set("card_type", card_type)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "PaymentFilter":
        return self._set_dates("created_at", date, end_date)


class PaymentOrder(Order):
    SORTABLE = ("created_at", "expire_month", "expire_year")

    def by_created_at(self) -> "PaymentOrder":
        return self.by_field("created_at")

    def by_expire_month(self) -> "PaymentOrder":
        return self.by_field("expire_month")

    def by_expire_year(self) -> "PaymentOrder":
        return self.by_field("expire_year")


@dataclass
class Payment(Resource):
    type: Optional[PaymentType] = None
    client: Optional[str] = None
    card_type: Optional[str] = None
    country: Optional[str] = None
    expire_month: Optional[int] = None
    expire_year: Optional[int] = None
    card_holder: Optional[str] = None
    last4: Optional[str] = None
    code: Optional[str] = None
    account: Optional[str] = None
    holder: Optional[str] = None
    iban: Optional[str] = None
    bic: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    app_id: Optional[str] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("type", kind=ENUM, target=PaymentType),
        WireField("client"),
        WireField("card_type"),
        WireField("country"),
        WireField("expire_month", kind=INTEGER),
        WireField("expire_year", kind=INTEGER),
        WireField("card_holder"),
        WireField("last4"),
        WireField("code"),
        WireField("account"),
        WireField("holder"),
        WireField("iban"),
        WireField("bic"),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("app_id"),
    )
    FILTER = PaymentFilter
    ORDER = PaymentOrder
