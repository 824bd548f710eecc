"""
Public facade for the Paymill client package.

The most useful pieces are re-exported here so integrators can
``from paymill_payments import ...`` without navigating the package.
"""

from .api import create_context
from .context import PaymillContext
from .core import (
    ApiError,
    AuthenticationError,
    ConfigError,
    InvalidArgumentError,
    MissingIdentifierError,
    NotFoundError,
    PaymillClient,
    PaymillConfig,
    PaymillError,
    PaymillList,
    PaymillParameters,
    ServerError,
    TransportError,
    ValidationError,
    load_paymill_config,
)
from .models import (
    Client,
    Fee,
    Interval,
    IntervalUnit,
    Offer,
    Payment,
    PaymentType,
    Preauthorization,
    PreauthorizationStatus,
    Refund,
    RefundStatus,
    Subscription,
    SubscriptionStatus,
    Transaction,
    TransactionStatus,
    Webhook,
    WebhookEventType,
    Weekday,
)

__all__ = (
    "ApiError",
    "AuthenticationError",
    "Client",
    "ConfigError",
    "Fee",
    "Interval",
    "IntervalUnit",
    "InvalidArgumentError",
    "MissingIdentifierError",
    "NotFoundError",
    "Offer",
    "Payment",
    "PaymentType",
    "PaymillClient",
    "PaymillConfig",
    "PaymillContext",
    "PaymillError",
    "PaymillList",
    "PaymillParameters",
    "Preauthorization",
    "PreauthorizationStatus",
    "Refund",
    "RefundStatus",
    "ServerError",
    "Subscription",
    "SubscriptionStatus",
    "Transaction",
    "TransactionStatus",
    "TransportError",
    "ValidationError",
    "Webhook",
    "WebhookEventType",
    "Weekday",
    "create_context",
    "load_paymill_config",
)
