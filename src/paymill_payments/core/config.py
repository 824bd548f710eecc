"""
Configuration objects and helpers for the Paymill client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "ConfigError",
    "DEFAULT_API_URL",
    "PaymillConfig",
    "PaymillParameters",
    "load_paymill_config",
]

DEFAULT_API_URL = "https://api.paymill.com/v2.1"
DEFAULT_TIMEOUT_SECONDS = 30

_PARAMETER_TO_ENV_KEY = {
    "api_key": "PAYMILL_API_KEY",
    "api_url": "PAYMILL_API_URL",
    "timeout_seconds": "PAYMILL_TIMEOUT_SECONDS",
}


@dataclass(frozen=True)
class PaymillParameters:
    """
    Explicit parameter bundle for constructing :class:`PaymillConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_paymill_config`.
    """

    api_key: Optional[str] = None
    api_url: Optional[str] = None
    timeout_seconds: Optional[int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[PaymillParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown Paymill parameter '{key}'") from exc
        overrides[env_key] = str(value)
    return overrides


def _normalize_api_key(raw_key: Optional[str]) -> str:
    if raw_key is None:
        raise ConfigError("PAYMILL_API_KEY must be provided")
    key = raw_key.strip()
    if not key:
        raise ConfigError("PAYMILL_API_KEY must not be empty")
    return key


def _normalize_api_url(raw_url: str) -> str:
    url = raw_url.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        raise ConfigError(f"PAYMILL_API_URL must be an http(s) URL, got '{raw_url}'")
    return url


def _parse_timeout(raw_value: str) -> int:
    try:
        timeout = int(raw_value)
    except ValueError as exc:
        raise ConfigError(
            f"PAYMILL_TIMEOUT_SECONDS must be an integer, got '{raw_value}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PAYMILL_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class PaymillConfig:
    api_key: str
    api_url: str = DEFAULT_API_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    def endpoint(self, path: str) -> str:
        return f"{self.api_url}/{path.lstrip('/')}"

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "PaymillConfig":
        return cls(
            api_key=_normalize_api_key(values.get("PAYMILL_API_KEY")),
            api_url=_normalize_api_url(values.get("PAYMILL_API_URL", DEFAULT_API_URL)),
            timeout_seconds=_parse_timeout(
                values.get("PAYMILL_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            ),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[PaymillParameters] = None,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "PaymillConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "api_url": api_url,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_paymill_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[PaymillParameters] = None,
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> PaymillConfig:
    """
    Convenience wrapper that mirrors :meth:`PaymillConfig.from_env`.

    The configuration can come from environment variables, a ``.env`` file,
    direct keyword arguments, or any combination of the three.
    """
    return PaymillConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )
