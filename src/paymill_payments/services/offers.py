"""
Offer endpoint: ``/offers``.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.service import ResourceService, require, require_amount
from ..models.interval import Interval
from ..models.offer import Offer

__all__ = ["OfferService"]


def _interval(value: Union[Interval, str, None]) -> Interval:
    require(value, "interval")
    if isinstance(value, Interval):
        return value
    return Interval.parse(value)


class OfferService(ResourceService[Offer]):
    model = Offer
    path = "offers"

    def create(
        self,
        amount: int,
        currency: str,
        interval: Union[Interval, str],
        name: str,
        trial_period_days: Optional[int] = None,
    ) -> Offer:
        if trial_period_days is not None and trial_period_days < 0:
            raise InvalidArgumentError("trial_period_days must not be negative")
        return self._create(
            {
                "amount": require_amount(amount),
                "currency": require(currency, "currency"),
                "interval": str(_interval(interval)),
                "name": require(name, "name"),
                "trial_period_days": trial_period_days,
            }
        )

    def update(self, offer: Offer, update_subscriptions: bool = False) -> Offer:
        """
        Change the offer. With ``update_subscriptions`` the change is also
        applied to every subscription following it.
        """
        extra = {"update_subscriptions": True} if update_subscriptions else None
        return self._update(offer, extra)

    def delete(self, offer: Union[Offer, str], remove_with_subscriptions: bool = False) -> Offer:
        return self._delete(offer, {"remove_with_subscriptions": remove_with_subscriptions})
