"""
Preauthorization endpoint: ``/preauthorizations``.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Optional, Union

from ..core.errors import MissingIdentifierError
from ..core.service import ResourceService, reference, require, require_amount
from ..models.payment import Payment
from ..models.preauthorization import Preauthorization
from ..models.transaction import Transaction

__all__ = ["PreauthorizationService"]


class PreauthorizationService(ResourceService[Preauthorization]):
    model = Preauthorization
    path = "preauthorizations"

    def _decode(self, envelope: Mapping[str, Any]) -> Preauthorization:
        data = envelope.get("data") or {}
        if "preauthorization" not in data:
            return Preauthorization.from_wire(data)
        # Creation answers with the transaction wrapping the new preauthorization.
        transaction = Transaction.from_wire(data)
        preauthorization = transaction.preauthorization or Preauthorization()
        preauthorization.transaction = dataclasses.replace(
            transaction, preauthorization=Preauthorization(preauthorization.id)
        )
        return preauthorization

    def create_with_token(
        self,
        token: str,
        amount: int,
        currency: str,
        description: Optional[str] = None,
    ) -> Preauthorization:
        return self._create(
            {
                "token": require(token, "token"),
                "amount": require_amount(amount),
                "currency": require(currency, "currency"),
                "description": description,
            }
        )

    def create_with_payment(
        self,
        payment: Union[Payment, str],
        amount: int,
        currency: str,
        description: Optional[str] = None,
    ) -> Preauthorization:
        payment_id = reference(payment)
        if not payment_id:
            raise MissingIdentifierError("Cannot preauthorize a payment without an id")
        return self._create(
            {
                "payment": payment_id,
                "amount": require_amount(amount),
                "currency": require(currency, "currency"),
                "description": description,
            }
        )

    def delete(self, preauthorization: Union[Preauthorization, str]) -> Preauthorization:
        """Release the reserved amount."""
        return self._delete(preauthorization)
