"""
Resource models and their filter/order builders.

Importing this package registers every model so that nested references
between resources resolve.
"""

from .client import Client, ClientFilter, ClientOrder
from .interval import Interval, IntervalUnit, Weekday
from .offer import Offer, OfferFilter, OfferOrder, SubscriptionCount
from .payment import Payment, PaymentFilter, PaymentOrder, PaymentType
from .preauthorization import (
    Preauthorization,
    PreauthorizationFilter,
    PreauthorizationOrder,
    PreauthorizationStatus,
)
from .refund import Refund, RefundFilter, RefundOrder, RefundStatus
from .subscription import (
    Subscription,
    SubscriptionFilter,
    SubscriptionOrder,
    SubscriptionStatus,
)
from .transaction import (
    Fee,
    Transaction,
    TransactionFilter,
    TransactionOrder,
    TransactionStatus,
)
from .webhook import Webhook, WebhookEventType, WebhookFilter, WebhookOrder

__all__ = [
    "Client",
    "ClientFilter",
    "ClientOrder",
    "Fee",
    "Interval",
    "IntervalUnit",
    "Offer",
    "OfferFilter",
    "OfferOrder",
    "Payment",
    "PaymentFilter",
    "PaymentOrder",
    "PaymentType",
    "Preauthorization",
    "PreauthorizationFilter",
    "PreauthorizationOrder",
    "PreauthorizationStatus",
    "Refund",
    "RefundFilter",
    "RefundOrder",
    "RefundStatus",
    "Subscription",
    "SubscriptionCount",
    "SubscriptionFilter",
    "SubscriptionOrder",
    "SubscriptionStatus",
    "Transaction",
    "TransactionFilter",
    "TransactionOrder",
    "TransactionStatus",
    "Webhook",
    "WebhookEventType",
    "WebhookFilter",
    "WebhookOrder",
    "Weekday",
]
