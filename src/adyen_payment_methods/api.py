"""
Public, high-level helpers for looking up Adyen payment methods.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .core.client import AdyenError, CheckoutClient
from .core.config import (
    AdyenConfig,
    AdyenParameters,
    ConfigError,
    load_adyen_config,
)
from .core.context import CartService, SalesChannelContext, SalesChannelRepository
from .core.currency import Currency
from .core.service import PaymentMethodsService

__all__ = [
    "AdyenConfig",
    "AdyenError",
    "AdyenParameters",
    "CheckoutClient",
    "ConfigError",
    "PaymentMethodsService",
    "create_checkout_client",
    "create_payment_methods_service",
    "get_payment_methods",
    "load_adyen_config",
]


def _resolve_config(
    config: Optional[AdyenConfig],
    *,
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    parameters: Optional[AdyenParameters],
    explicit: Dict[str, Any],
) -> AdyenConfig:
    if config is not None:
        extras = (overrides, base, parameters, *explicit.values())
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built AdyenConfig or individual parameters, not both."
            )
        return config
    return load_adyen_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        **explicit,
    )


def create_checkout_client(
    *,
    config: Optional[AdyenConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[AdyenParameters] = None,
    api_key: Optional[str] = None,
    merchant_account: Optional[str] = None,
    environment: Optional[str] = None,
    live_url_prefix: Optional[str] = None,
    api_version: Optional[str] = None,
    checkout_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> CheckoutClient:
    """
    Construct a :class:`CheckoutClient`.

    Callers can either supply a ready-made :class:`AdyenConfig` or let the
    helper assemble one from environment data.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        explicit={
            "api_key": api_key,
            "merchant_account": merchant_account,
            "environment": environment,
            "live_url_prefix": live_url_prefix,
            "api_version": api_version,
            "checkout_url": checkout_url,
            "timeout_seconds": timeout_seconds,
        },
    )
    return CheckoutClient(cfg, session=session)


def create_payment_methods_service(
    *,
    cart_service: CartService,
    sales_channel_repository: SalesChannelRepository,
    config: Optional[AdyenConfig] = None,
    session: Optional[requests.Session] = None,
    currency: Optional[Currency] = None,
    logger: Optional[logging.Logger] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[AdyenParameters] = None,
) -> PaymentMethodsService:
    """
    Wire a :class:`PaymentMethodsService` to a checkout client built from ``config``.

    The configuration doubles as the merchant-account source.
    """
    client = create_checkout_client(
        config=config,
        session=session,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
    )
    return PaymentMethodsService(
        checkout_client=client,
        configuration=client.config,
        cart_service=cart_service,
        sales_channel_repository=sales_channel_repository,
        currency=currency,
        logger=logger,
    )


def get_payment_methods(
    context: SalesChannelContext,
    *,
    cart_service: CartService,
    sales_channel_repository: SalesChannelRepository,
    config: Optional[AdyenConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[AdyenParameters] = None,
) -> Dict[str, Any]:
    """
    One-shot helper: build the service and return the payment methods for ``context``.
    """
    service = create_payment_methods_service(
        cart_service=cart_service,
        sales_channel_repository=sales_channel_repository,
        config=config,
        session=session,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
    )
    return service.get_payment_methods(context)
