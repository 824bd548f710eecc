"""
Transaction endpoint: ``/transactions``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from ..core.errors import MissingIdentifierError
from ..core.service import ResourceService, reference, require, require_amount
from ..models.client import Client
from ..models.payment import Payment
from ..models.preauthorization import Preauthorization
from ..models.transaction import Fee, Transaction

__all__ = ["TransactionService"]


def _fee_params(fee: Optional[Fee]) -> Dict[str, Any]:
    if fee is None:
        return {}
    return {
        "fee_amount": require_amount(fee.amount, "fee amount"),
        "fee_payment": require(fee.payment, "fee payment"),
        "fee_currency": fee.currency,
    }


class TransactionService(ResourceService[Transaction]):
    """
    Charges money. Transactions can be listed, fetched and have their
    description updated, but never deleted.
    """

    model = Transaction
    path = "transactions"

    def create_with_token(
        self,
        token: str,
        amount: int,
        currency: str,
        description: Optional[str] = None,
        fee: Optional[Fee] = None,
    ) -> Transaction:
        params: Dict[str, Any] = {
            "token": require(token, "token"),
            "amount": require_amount(amount),
            "currency": require(currency, "currency"),
            "description": description,
        }
        params.update(_fee_params(fee))
        return self._create(params)

    def create_with_payment(
        self,
        payment: Union[Payment, str],
        amount: int,
        currency: str,
        description: Optional[str] = None,
        client: Optional[Union[Client, str]] = None,
    ) -> Transaction:
        payment_id = reference(payment)
        if not payment_id:
            raise MissingIdentifierError("Cannot charge a payment without an id")
        return self._create(
            {
                "payment": payment_id,
                "amount": require_amount(amount),
                "currency": require(currency, "currency"),
                "description": description,
                "client": reference(client),
            }
        )

    def create_with_preauthorization(
        self,
        preauthorization: Union[Preauthorization, str],
        amount: int,
        currency: str,
        description: Optional[str] = None,
    ) -> Transaction:
        """Capture a previously reserved amount."""
        preauthorization_id = reference(preauthorization)
        if not preauthorization_id:
            raise MissingIdentifierError("Cannot capture a preauthorization without an id")
        return self._create(
            {
                "preauthorization": preauthorization_id,
                "amount": require_amount(amount),
                "currency": require(currency, "currency"),
                "description": description,
            }
        )

    def update(self, transaction: Transaction) -> Transaction:
        return self._update(transaction)
