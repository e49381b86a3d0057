"""
Core primitives for looking up Adyen payment methods.
"""

from .client import AdyenError, CheckoutClient, request_payment_methods
from .config import (
    AdyenConfig,
    AdyenParameters,
    ConfigError,
    load_adyen_config,
)
from .context import (
    Cart,
    CartPrice,
    ContextError,
    Country,
    Criteria,
    Customer,
    CustomerAddress,
    InMemorySalesChannelRepository,
    Language,
    Locale,
    SalesChannel,
    SalesChannelContext,
    StaticCartService,
)
from .currency import Currency
from .environment import AdyenEnvironment, build_environment, load_env_file
from .payloads import Amount, PaymentMethodsRequest
from .service import (
    PaymentMethodsResult,
    PaymentMethodsService,
    SalesChannelNotFoundError,
)

__all__ = [
    "AdyenConfig",
    "AdyenEnvironment",
    "AdyenError",
    "AdyenParameters",
    "Amount",
    "Cart",
    "CartPrice",
    "CheckoutClient",
    "ConfigError",
    "ContextError",
    "Country",
    "Criteria",
    "Currency",
    "Customer",
    "CustomerAddress",
    "InMemorySalesChannelRepository",
    "Language",
    "Locale",
    "PaymentMethodsRequest",
    "PaymentMethodsResult",
    "PaymentMethodsService",
    "SalesChannel",
    "SalesChannelContext",
    "SalesChannelNotFoundError",
    "StaticCartService",
    "build_environment",
    "load_adyen_config",
    "load_env_file",
    "request_payment_methods",
]
