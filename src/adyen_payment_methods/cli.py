"""
Command-line interface for looking up Adyen payment methods.

The session is described by a JSON document::

    {
      "token": "cart-token",
      "salesChannelId": "storefront",
      "currency": "EUR",
      "customer": {
        "id": "customer-1",
        "activeBillingAddress": {"country": {"iso": "DE"}},
        "activeShippingAddress": {"country": {"iso": "DE"}}
      },
      "cart": {"price": {"totalPrice": "49.99"}},
      "salesChannels": [
        {"id": "storefront", "language": {"locale": {"code": "de-DE"}}}
      ]
    }
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence, Tuple

import requests

from .api import ConfigError, create_payment_methods_service, load_adyen_config
from .core.context import (
    Cart,
    ContextError,
    InMemorySalesChannelRepository,
    SalesChannel,
    SalesChannelContext,
    StaticCartService,
)
from .core.service import SalesChannelNotFoundError


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


def _read_document(path: str) -> Mapping[str, Any]:
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ContextError(f"Cannot read context file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ContextError(f"Context file {path} is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ContextError("Context file must contain a JSON object")
    return document


def load_context_document(
    path: str,
) -> Tuple[SalesChannelContext, StaticCartService, InMemorySalesChannelRepository]:
    """Parse a context file into the session and its in-memory stores."""
    document = _read_document(path)
    context = SalesChannelContext.from_mapping(document)

    carts = {}
    if document.get("cart") is not None:
        carts[context.token] = Cart.from_mapping(context.token, document["cart"])

    channels = document.get("salesChannels") or []
    if not isinstance(channels, list):
        raise ContextError("'salesChannels' must be a list")

    return (
        context,
        StaticCartService(carts),
        InMemorySalesChannelRepository(SalesChannel.from_mapping(item) for item in channels),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adyen-payment-methods",
        description="Look up the Adyen payment methods available for a storefront session",
    )
    parser.add_argument(
        "--context",
        required=True,
        help="Path to a JSON file describing the session, cart and sales channels",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing ADYEN_* settings (default: .env)",
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
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation of the printed JSON response (default: 2)",
    )
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_adyen_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    try:
        context, cart_service, repository = load_context_document(args.context)
    except ContextError as exc:
        logging.error("Invalid context: %s", exc)
        return 1

    service = create_payment_methods_service(
        config=config,
        session=requests.Session(),
        cart_service=cart_service,
        sales_channel_repository=repository,
    )

    try:
        result = service.lookup(context)
    except SalesChannelNotFoundError as exc:
        logging.error("%s", exc)
        return 1

    if result.is_empty:
        logging.warning("No payment methods returned for this session")
    else:
        logging.info("Adyen returned %d payment methods", len(result.payment_methods))

    json.dump(result.raw, sys.stdout, indent=args.indent)
    sys.stdout.write("\n")
    return 0


def main() -> None:
    sys.exit(run_cli())
