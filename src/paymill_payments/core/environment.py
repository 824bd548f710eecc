"""
Utilities for building the environment used by the Paymill client.

The helpers understand .env files, let callers layer overrides, and return a
plain mapping that can be fed into
:class:`paymill_payments.core.config.PaymillConfig`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = _strip_quotes(value.strip())
    return values


@dataclass(frozen=True)
class PaymillEnvironment:
    """A resolved set of variables used to configure the client."""

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> PaymillEnvironment:
    """
    Assemble a :class:`PaymillEnvironment` from multiple sources.

    ``base`` defaults to :data:`os.environ`; ``env_file`` values only fill keys
    that ``base`` lacks; ``overrides`` always win. Pass ``env_file=None`` to
    skip file loading.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _parse_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return PaymillEnvironment(variables=merged)
