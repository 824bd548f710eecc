"""
Payment endpoint: ``/payments``.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.service import ResourceService, reference, require
from ..models.client import Client
from ..models.payment import Payment

__all__ = ["PaymentService"]


class PaymentService(ResourceService[Payment]):
    model = Payment
    path = "payments"

    def create_with_token(
        self,
        token: str,
        client: Optional[Union[Client, str]] = None,
    ) -> Payment:
        """Store the card or account behind a bridge token, optionally for ``client``."""
        require(token, "token")
        return self._create({"token": token, "client": reference(client)})

    def delete(self, payment: Union[Payment, str]) -> Payment:
        return self._delete(payment)
