"""
Exception hierarchy shared by every part of the Paymill client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConfigError",
    "InvalidArgumentError",
    "MissingIdentifierError",
    "NotFoundError",
    "PaymillError",
    "ServerError",
    "TransportError",
    "ValidationError",
    "error_for_status",
]


class PaymillError(Exception):
    """Base class for everything raised by this package."""


class ConfigError(PaymillError):
    """Raised when the supplied configuration is invalid."""


class InvalidArgumentError(PaymillError, ValueError):
    """Raised before any request when caller input is unusable."""


class MissingIdentifierError(PaymillError, ValueError):
    """Raised when an operation needs a resource id and none is set."""


class TransportError(PaymillError):
    """Network-level failure or an unreadable response body."""


class ApiError(PaymillError):
    """
    The API answered with an error status.

    ``message`` and ``code`` are copied verbatim from the response body
    (``error`` and ``exception`` respectively).
    """

    def __init__(
        self,
        message: str,
        *,
        status: int,
        code: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.body = body or {}

    def __str__(self) -> str:
        if self.code:
            return f"{self.status} {self.code}: {self.message}"
        return f"{self.status}: {self.message}"


class ValidationError(ApiError):
    """The payload was rejected."""


class AuthenticationError(ApiError):
    """Bad or missing API key."""


class NotFoundError(ApiError):
    """No resource with the requested id."""


class ServerError(ApiError):
    """5xx from the API."""


def _extract_message(body: Dict[str, Any], fallback: str) -> str:
    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict):
        messages = error.get("messages")
        if isinstance(messages, dict) and messages:
            return "; ".join(f"{key}: {value}" for key, value in messages.items())
        if error.get("field"):
            return f"invalid field {error['field']}"
    return fallback


def error_for_status(status: int, body: Dict[str, Any], fallback: str = "") -> ApiError:
    """Build the :class:`ApiError` subclass matching ``status``."""
    message = _extract_message(body, fallback or f"HTTP {status}")
    code = body.get("exception")
    if status in (401, 403):
        cls = AuthenticationError
    elif status == 404:
        cls = NotFoundError
    elif status >= 500:
        cls = ServerError
    else:
        cls = ValidationError
    return cls(message, status=status, code=code, body=body)
