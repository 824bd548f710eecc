"""
Subscription endpoint: ``/subscriptions``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from ..core.errors import MissingIdentifierError
from ..core.fields import to_epoch
from ..core.service import ResourceService, reference, require, require_amount
from ..models.client import Client
from ..models.interval import Interval
from ..models.offer import Offer
from ..models.payment import Payment
from ..models.subscription import Subscription

__all__ = ["SubscriptionService"]


def _interval_text(value: Union[Interval, str, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, Interval):
        return str(value)
    return str(Interval.parse(value))


class SubscriptionService(ResourceService[Subscription]):
    """
    Subscriptions either follow an offer or carry their own amount,
    currency and interval.
    """

    model = Subscription
    path = "subscriptions"

    def create(
        self,
        payment: Union[Payment, str],
        offer: Optional[Union[Offer, str]] = None,
        client: Optional[Union[Client, str]] = None,
        amount: Optional[int] = None,
        currency: Optional[str] = None,
        interval: Optional[Union[Interval, str]] = None,
        name: Optional[str] = None,
        start_at: Optional[datetime] = None,
        period_of_validity: Optional[Union[Interval, str]] = None,
    ) -> Subscription:
        payment_id = reference(payment)
        if not payment_id:
            raise MissingIdentifierError("A subscription needs a payment with an id")
        offer_id = reference(offer)
        if offer_id is None:
            require_amount(amount)
            require(currency, "currency")
            require(interval, "interval")
        elif amount is not None:
            require_amount(amount)
        return self._create(
            {
                "payment": payment_id,
                "offer": offer_id,
                "client": reference(client),
                "amount": amount,
                "currency": currency,
                "interval": _interval_text(interval),
                "name": name,
                "start_at": to_epoch(start_at),
                "period_of_validity": _interval_text(period_of_validity),
            }
        )

    def update(self, subscription: Subscription) -> Subscription:
        return self._update(subscription)

    def change_amount(
        self,
        subscription: Union[Subscription, str],
        amount: int,
        temporary: bool = False,
    ) -> Subscription:
        """Change the charged amount for the next period only, or for good."""
        return self._put(
            subscription,
            {"amount": require_amount(amount), "amount_change_type": 0 if temporary else 1},
        )

    def pause(self, subscription: Union[Subscription, str]) -> Subscription:
        return self._put(subscription, {"pause": True})

    def unpause(self, subscription: Union[Subscription, str]) -> Subscription:
        return self._put(subscription, {"pause": False})

    def cancel(self, subscription: Union[Subscription, str]) -> Subscription:
        """Stop charging but keep the subscription visible."""
        return self._delete(subscription, {"remove": False})

    def delete(self, subscription: Union[Subscription, str]) -> Subscription:
        return self._delete(subscription, {"remove": True})
