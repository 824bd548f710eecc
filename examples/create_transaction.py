"""
Minimal script that stores a card from a bridge token and charges it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Tuple

from paymill_payments import ConfigError, PaymillError, create_context, load_paymill_config


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Charge a card through the Paymill API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYMILL_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--api-key",
        help="Provide the private API key without relying on environment data",
    )
    parser.add_argument(
        "--token",
        default="098f6bcd4621d373cade4e832627b4f6",
        help="Bridge token identifying the card (default: Paymill test token)",
    )
    parser.add_argument("--amount", type=int, default=4200, help="Amount in cents")
    parser.add_argument("--currency", default="EUR")
    parser.add_argument("--description", default="Test Transaction")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_paymill_config(
            env_file=args.env_file,
            overrides=_build_overrides(args.set or ()),
            api_key=args.api_key,
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    with create_context(config=config) as context:
        try:
            payment = context.payments.create_with_token(args.token)
            transaction = context.transactions.create_with_payment(
                payment, args.amount, args.currency, args.description
            )
        except PaymillError as exc:
            logging.error("Charge failed: %s", exc)
            return 1

    if not transaction.successful:
        logging.error(
            "Transaction %s ended with response code %s",
            transaction.id,
            transaction.response_code,
        )
        return 1

    logging.info(
        "Charged %s %s with transaction %s (status %s)",
        transaction.amount,
        transaction.currency,
        transaction.id,
        transaction.status.value if transaction.status else None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
