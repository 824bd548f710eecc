"""
Refund endpoint: ``/refunds``.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.errors import MissingIdentifierError
from ..core.service import ResourceService, reference, require_amount
from ..models.refund import Refund
from ..models.transaction import Transaction

__all__ = ["RefundService"]


class RefundService(ResourceService[Refund]):
    model = Refund
    path = "refunds"

    def refund_transaction(
        self,
        transaction: Union[Transaction, str],
        amount: int,
        description: Optional[str] = None,
    ) -> Refund:
        """Refund ``amount`` cents of ``transaction``; partial refunds are allowed."""
        transaction_id = reference(transaction)
        if not transaction_id:
            raise MissingIdentifierError("Cannot refund a transaction without an id")
        return self._create(
            {"amount": require_amount(amount), "description": description},
            path=f"{self.path}/{transaction_id}",
        )
