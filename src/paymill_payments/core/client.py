"""
HTTP transport for the Paymill REST API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .config import PaymillConfig
from .errors import TransportError, error_for_status

__all__ = ["PaymillClient"]


def _decode_body(response: requests.Response) -> Optional[Dict[str, Any]]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


class PaymillClient:
    """
    Thin wrapper around a :class:`requests.Session` bound to one API key.

    :meth:`request` returns the decoded JSON envelope and raises the matching
    :class:`~paymill_payments.core.errors.ApiError` for error statuses.
    """

    def __init__(
        self,
        config: PaymillConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = self.config.endpoint(path)
        logging.info("Sending %s %s", method, url)
        if params:
            logging.debug("Query parameters for %s: %s", url, dict(params))

        try:
            response = self.session.request(
                method,
                url,
                params=dict(params) if params else None,
                data=dict(data) if data else None,
                auth=(self.config.api_key, ""),
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        body = _decode_body(response)
        if response.status_code >= 400:
            error = error_for_status(response.status_code, body or {}, response.text)
            logging.warning("Paymill rejected %s %s: %s", method, url, error)
            raise error
        if body is None:
            raise TransportError(
                f"Failed to parse JSON from Paymill at {url}: {response.text}"
            )
        return body

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PaymillClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
