"""
Command-line interface for inspecting and removing Paymill resources.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Iterable, Sequence, TextIO, Tuple

import requests

from .api import create_context
from .context import PaymillContext
from .core.config import load_paymill_config
from .core.errors import ConfigError, PaymillError

# Resources reachable from the CLI and whether their endpoint allows deletion.
RESOURCES: Dict[str, bool] = {
    "clients": True,
    "offers": True,
    "payments": True,
    "preauthorizations": True,
    "refunds": False,
    "subscriptions": True,
    "transactions": False,
    "webhooks": True,
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paymill-payments",
        description="List, fetch or delete resources of a Paymill account",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYMILL_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("resource", choices=sorted(RESOURCES))
    parser.add_argument("action", choices=("list", "get", "delete"))
    parser.add_argument("--id", dest="resource_id", help="Resource id for get and delete")
    parser.add_argument("--count", type=int, help="Page size for list")
    parser.add_argument("--offset", type=int, help="Page offset for list")
    parser.add_argument("--order", metavar="FIELD", help="Sort field for list")
    parser.add_argument(
        "--desc",
        action="store_true",
        help="Sort descending instead of ascending",
    )
    return parser


def _execute(context: PaymillContext, args: argparse.Namespace) -> Any:
    service = getattr(context, args.resource)
    if args.action == "list":
        order = None
        if args.order or args.desc:
            order = service.model.create_order()
            if args.order:
                order.by_field(args.order)
            if args.desc:
                order.desc()
        return service.list(order=order, count=args.count, offset=args.offset)
    if args.action == "get":
        return service.get(args.resource_id)
    if not RESOURCES[args.resource]:
        raise PaymillError(f"{args.resource} cannot be deleted")
    return service.delete(args.resource_id)


def _render(result: Any, out: TextIO) -> None:
    if hasattr(result, "data_count"):
        payload = {
            "data": [item.to_wire() for item in result],
            "data_count": result.data_count,
        }
    else:
        payload = {"data": result.to_wire()}
    json.dump(payload, out, indent=2, sort_keys=True)
    out.write("\n")


def run_cli(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_paymill_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    context = create_context(config=config, session=requests.Session())
    try:
        result = _execute(context, args)
    except PaymillError as exc:
        logging.error("%s %s failed: %s", args.resource, args.action, exc)
        return 1
    finally:
        context.close()

    _render(result, out or sys.stdout)
    return 0


def main() -> None:
    sys.exit(run_cli())
