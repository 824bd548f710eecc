"""
Webhooks: URLs or email addresses notified when selected events happen.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, List, Optional, Tuple

from ..core.fields import BOOLEAN, ENUM_LIST, TIMESTAMP, WireField
from ..core.model import Resource
from ..core.query import Filter, Order

__all__ = ["Webhook", "WebhookEventType", "WebhookFilter", "WebhookOrder"]


class WebhookEventType(enum.Enum):
    CHARGEBACK_EXECUTED = "chargeback.executed"
    TRANSACTION_CREATED = "transaction.created"
    TRANSACTION_SUCCEEDED = "transaction.succeeded"
    TRANSACTION_FAILED = "transaction.failed"
    CLIENT_UPDATED = "client.updated"
    SUBSCRIPTION_CREATED = "subscription.created"
    SUBSCRIPTION_UPDATED = "subscription.updated"
    SUBSCRIPTION_DELETED = "subscription.deleted"
    SUBSCRIPTION_SUCCEEDED = "subscription.succeeded"
    SUBSCRIPTION_FAILED = "subscription.failed"
    SUBSCRIPTION_EXPIRING = "subscription.expiring"
    SUBSCRIPTION_DEACTIVATED = "subscription.deactivated"
    SUBSCRIPTION_ACTIVATED = "subscription.activated"
    SUBSCRIPTION_CANCELED = "subscription.canceled"
    REFUND_CREATED = "refund.created"
    REFUND_SUCCEEDED = "refund.succeeded"
    REFUND_FAILED = "refund.failed"
    PAYOUT_TRANSFERRED = "payout.transferred"
    INVOICE_AVAILABLE = "invoice.available"
    APP_MERCHANT_ACTIVATED = "app.merchant.activated"
    APP_MERCHANT_DEACTIVATED = "app.merchant.deactivated"
    APP_MERCHANT_REJECTED = "app.merchant.rejected"
    APP_MERCHANT_LIVE_REQUESTS_ALLOWED = "app.merchant.live_requests_allowed"
    APP_MERCHANT_LIVE_REQUESTS_NOT_ALLOWED = "app.merchant.live_requests_not_allowed"
    APP_MERCHANT_APP_DISABLED = "app.merchant.app.disabled"
    PAYMENT_EXPIRED = "payment.expired"
    UNDEFINED = "undefined"

    @classmethod
    def _missing_(cls, value):
        return cls.UNDEFINED


class WebhookFilter(Filter):
    def by_url(self, url: str) -> "WebhookFilter":
        return self._set("url", url)

    def by_email(self, email: str) -> "WebhookFilter":
        return self._set("email", email)

    def by_created_at(self, date: datetime, end_date: Optional[datetime] = None) -> "WebhookFilter":
        return self._set_dates("created_at", date, end_date)


class WebhookOrder(Order):
    SORTABLE = ("created_at", "url", "email")

    def by_created_at(self) -> "WebhookOrder":
        return self.by_field("created_at")

    def by_url(self) -> "WebhookOrder":
        return self.by_field("url")

    def by_email(self) -> "WebhookOrder":
        return self.by_field("email")


@dataclass
class Webhook(Resource):
    """
    A URL or email address that receives event notifications.

    Exactly one of ``url`` and ``email`` is set. Each webhook listens to at
    least one :class:`WebhookEventType`.
    """

    url: Optional[str] = None
    email: Optional[str] = None
    livemode: Optional[bool] = None
    active: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    event_types: Optional[List[WebhookEventType]] = None
    app_id: Optional[str] = None

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = (
        WireField("id"),
        WireField("url", updateable=True),
        WireField("email", updateable=True),
        WireField("livemode", kind=BOOLEAN),
        WireField("active", kind=BOOLEAN, updateable=True),
        WireField("created_at", kind=TIMESTAMP),
        WireField("updated_at", kind=TIMESTAMP),
        WireField("event_types", kind=ENUM_LIST, target=WebhookEventType, updateable=True),
        WireField("app_id"),
    )
    FILTER = WebhookFilter
    ORDER = WebhookOrder
