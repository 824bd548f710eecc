"""
Public, high-level helpers for building a Paymill context.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .context import PaymillContext
from .core.config import PaymillConfig, PaymillParameters, load_paymill_config

__all__ = ["create_context"]


def create_context(
    *,
    config: Optional[PaymillConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[PaymillParameters] = None,
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> PaymillContext:
    """
    Construct a :class:`PaymillContext`.

    Callers can either supply a ready-made :class:`PaymillConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (overrides, base, parameters, api_key, api_url, timeout_seconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built PaymillConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_paymill_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            api_key=api_key,
            api_url=api_url,
            timeout_seconds=timeout_seconds,
        )
    return PaymillContext(cfg, session=session)
