"""
Minimal script that uses the public API to list the payment methods for a shopper.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal

from adyen_payment_methods import (
    Cart,
    ConfigError,
    Country,
    Customer,
    CustomerAddress,
    InMemorySalesChannelRepository,
    SalesChannel,
    SalesChannelContext,
    StaticCartService,
    create_payment_methods_service,
    load_adyen_config,
)
from adyen_payment_methods.core import CartPrice, Language, Locale


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List Adyen payment methods using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing ADYEN_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--api-key", help="Provide the API key without relying on environment data")
    parser.add_argument("--merchant-account", help="Override the merchant account")
    parser.add_argument("--amount", default="49.99", help="Cart total (default: 49.99)")
    parser.add_argument("--currency", default="EUR", help="ISO-4217 currency code (default: EUR)")
    parser.add_argument("--country", default="DE", help="Shopper billing country (default: DE)")
    parser.add_argument("--locale", default="de-DE", help="Shopper locale (default: de-DE)")
    parser.add_argument(
        "--shopper-reference",
        default="example-shopper",
        help="Stable identifier of the shopper",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_adyen_config(
            env_file=args.env_file,
            api_key=args.api_key,
            merchant_account=args.merchant_account,
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    token = "example-cart"
    context = SalesChannelContext(
        token=token,
        sales_channel_id="example-storefront",
        currency_iso_code=args.currency,
        customer=Customer(
            id=args.shopper_reference,
            active_billing_address=CustomerAddress(country=Country(iso=args.country)),
        ),
    )
    service = create_payment_methods_service(
        config=config,
        cart_service=StaticCartService(
            {token: Cart(token=token, price=CartPrice(total_price=Decimal(args.amount)))}
        ),
        sales_channel_repository=InMemorySalesChannelRepository(
            [
                SalesChannel(
                    id="example-storefront",
                    language=Language(locale=Locale(code=args.locale)),
                )
            ]
        ),
    )
    logging.info("Looking up payment methods at %s", config.checkout_url)

    result = service.lookup(context)
    if result.is_empty:
        logging.error("No payment methods returned; see the log above for details")
        return 1

    print(json.dumps(result.raw, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
