"""
One service per API endpoint, all built on
:class:`~paymill_payments.core.service.ResourceService`.
"""

from .clients import ClientService
from .offers import OfferService
from .payments import PaymentService
from .preauthorizations import PreauthorizationService
from .refunds import RefundService
from .subscriptions import SubscriptionService
from .transactions import TransactionService
from .webhooks import WebhookService

__all__ = [
    "ClientService",
    "OfferService",
    "PaymentService",
    "PreauthorizationService",
    "RefundService",
    "SubscriptionService",
    "TransactionService",
    "WebhookService",
]
