"""
Webhook endpoint: ``/webhooks``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Union

from ..core.errors import InvalidArgumentError
from ..core.service import ResourceService, require
from ..models.webhook import Webhook, WebhookEventType

__all__ = ["WebhookService"]


def _event_tokens(event_types: Iterable[WebhookEventType]) -> List[str]:
    tokens = [WebhookEventType(event).value for event in event_types or ()]
    if not tokens:
        raise InvalidArgumentError("A webhook needs at least one event type")
    if WebhookEventType.UNDEFINED.value in tokens:
        raise InvalidArgumentError("Cannot subscribe a webhook to undefined events")
    return tokens


class WebhookService(ResourceService[Webhook]):
    model = Webhook
    path = "webhooks"

    def _create_webhook(self, target: Dict[str, Any], event_types: Iterable[WebhookEventType]) -> Webhook:
        params = dict(target)
        params["event_types"] = _event_tokens(event_types)
        return self._create(params)

    def create_url_webhook(self, url: str, event_types: Iterable[WebhookEventType]) -> Webhook:
        return self._create_webhook({"url": require(url, "url")}, event_types)

    def create_email_webhook(self, email: str, event_types: Iterable[WebhookEventType]) -> Webhook:
        return self._create_webhook({"email": require(email, "email")}, event_types)

    def update(self, webhook: Webhook) -> Webhook:
        return self._update(webhook)

    def delete(self, webhook: Union[Webhook, str]) -> Webhook:
        return self._delete(webhook)
