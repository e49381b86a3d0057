"""
Public facade for the Adyen payment-methods package.

The most useful pieces are re-exported so integrators can
``from adyen_payment_methods import ...`` without navigating the package.
"""

from .api import (
    create_checkout_client,
    create_payment_methods_service,
    get_payment_methods,
)
from .core import (
    AdyenConfig,
    AdyenError,
    AdyenParameters,
    Cart,
    CheckoutClient,
    ConfigError,
    Currency,
    Customer,
    CustomerAddress,
    Country,
    InMemorySalesChannelRepository,
    PaymentMethodsRequest,
    PaymentMethodsResult,
    PaymentMethodsService,
    SalesChannel,
    SalesChannelContext,
    SalesChannelNotFoundError,
    StaticCartService,
    load_adyen_config,
)

__all__ = (
    "AdyenConfig",
    "AdyenError",
    "AdyenParameters",
    "Cart",
    "CheckoutClient",
    "ConfigError",
    "Country",
    "Currency",
    "Customer",
    "CustomerAddress",
    "InMemorySalesChannelRepository",
    "PaymentMethodsRequest",
    "PaymentMethodsResult",
    "PaymentMethodsService",
    "SalesChannel",
    "SalesChannelContext",
    "SalesChannelNotFoundError",
    "StaticCartService",
    "create_checkout_client",
    "create_payment_methods_service",
    "get_payment_methods",
    "load_adyen_config",
)
