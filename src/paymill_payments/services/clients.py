"""
Client endpoint: ``/clients``.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.service import ResourceService
from ..models.client import Client

__all__ = ["ClientService"]


class ClientService(ResourceService[Client]):
    model = Client
    path = "clients"

    def create(self, email: Optional[str] = None, description: Optional[str] = None) -> Client:
        return self._create({"email": email, "description": description})

    def update(self, client: Client) -> Client:
        return self._update(client)

    def delete(self, client: Union[Client, str]) -> Client:
        return self._delete(client)
