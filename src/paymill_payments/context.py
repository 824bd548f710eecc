"""
Entry point bundling one HTTP client with every resource service.
"""

from __future__ import annotations

from typing import Any, Optional

import requests

from .core.client import PaymillClient
from .core.config import PaymillConfig
from .services import (
    ClientService,
    OfferService,
    PaymentService,
    PreauthorizationService,
    RefundService,
    SubscriptionService,
    TransactionService,
    WebhookService,
)

__all__ = ["PaymillContext"]


class PaymillContext:
    """
    All services for one API key::

        context = PaymillContext(PaymillConfig(api_key="..."))
        payment = context.payments.create_with_token("098f6bcd4621d373cade4e832627b4f6")
        context.transactions.create_with_payment(payment, 4200, "EUR", "Test Transaction")
    """

    def __init__(
        self,
        config: PaymillConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.client = PaymillClient(config, session=session)
        self.clients = ClientService(self.client)
        self.offers = OfferService(self.client)
        self.payments = PaymentService(self.client)
        self.preauthorizations = PreauthorizationService(self.client)
        self.refunds = RefundService(self.client)
        self.subscriptions = SubscriptionService(self.client)
        self.transactions = TransactionService(self.client)
        self.webhooks = WebhookService(self.client)

    @property
    def config(self) -> PaymillConfig:
        return self.client.config

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "PaymillContext":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
