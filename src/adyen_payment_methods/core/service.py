"""
Payment-methods lookup for a storefront session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from .client import AdyenError
from .context import (
    LOCALE_ASSOCIATION,
    CartService,
    ConfigurationService,
    Criteria,
    Customer,
    SalesChannelContext,
    SalesChannelRepository,
)
from .currency import Currency
from .payloads import Amount, PaymentMethodsRequest

__all__ = [
    "MISSING_MERCHANT_ACCOUNT_MESSAGE",
    "PaymentMethodsClient",
    "PaymentMethodsResult",
    "PaymentMethodsService",
    "SalesChannelNotFoundError",
]

MISSING_MERCHANT_ACCOUNT_MESSAGE = (
    "No Merchant Account has been configured. "
    "Go to the Adyen plugin configuration panel and finish the required setup."
)


class SalesChannelNotFoundError(LookupError):
    """Raised when the session's sales channel has no record or no locale."""


class PaymentMethodsClient(Protocol):
    def payment_methods(self, body: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PaymentMethodsResult:
    """Outcome of a lookup. Every failure collapses into an empty result."""

    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "PaymentMethodsResult":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.raw

    @property
    def payment_methods(self) -> List[Dict[str, Any]]:
        return list(self.raw.get("paymentMethods") or [])

    @property
    def stored_payment_methods(self) -> List[Dict[str, Any]]:
        return list(self.raw.get("storedPaymentMethods") or [])


def _country_code(customer: Customer) -> Optional[str]:
    billing = customer.active_billing_address
    if billing is not None and billing.country_iso:
        return billing.country_iso
    shipping = customer.active_shipping_address
    if shipping is None:
        return None
    return shipping.country_iso


class PaymentMethodsService:
    """
    Ask Adyen which payment methods are available for the session's cart.

    Collaborators are injected once and reused for every lookup; the service
    itself keeps no state between calls.
    """

    def __init__(
        self,
        *,
        checkout_client: PaymentMethodsClient,
        configuration: ConfigurationService,
        cart_service: CartService,
        sales_channel_repository: SalesChannelRepository,
        currency: Optional[Currency] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.checkout_client = checkout_client
        self.configuration = configuration
        self.cart_service = cart_service
        self.sales_channel_repository = sales_channel_repository
        self.currency = currency or Currency()
        self.logger = logger or logging.getLogger("adyen_payment_methods")

    def get_payment_methods(self, context: SalesChannelContext) -> Dict[str, Any]:
        """Return the provider response, or ``{}`` when nothing could be fetched."""
        return self.lookup(context).raw

    def lookup(self, context: SalesChannelContext) -> PaymentMethodsResult:
        request = self.build_request(context)
        if request is None:
            return PaymentMethodsResult.empty()

        try:
            response = self.checkout_client.payment_methods(request.to_payload())
        except AdyenError as exc:
            self.logger.error(str(exc))
            return PaymentMethodsResult.empty()
        return PaymentMethodsResult(raw=response)

    def build_request(self, context: SalesChannelContext) -> Optional[PaymentMethodsRequest]:
        """
        Read the session into a request, or return ``None`` when no lookup
        should be made (anonymous shopper or unconfigured merchant account).

        Raises :class:`SalesChannelNotFoundError` when the session's sales
        channel cannot be resolved to a locale.
        """
        customer = context.customer
        if customer is None:
            return None

        cart = self.cart_service.get_cart(context.token, context)
        merchant_account = self.configuration.get_merchant_account()
        if not merchant_account:
            self.logger.error(MISSING_MERCHANT_ACCOUNT_MESSAGE)
            return None

        shopper_locale = self._shopper_locale(context.sales_channel_id)
        currency = context.currency_iso_code
        value = self.currency.sanitize(cart.price.total_price, currency)

        return PaymentMethodsRequest(
            merchant_account=merchant_account,
            country_code=_country_code(customer),
            amount=Amount(currency=currency, value=value),
            shopper_reference=customer.id,
            shopper_locale=shopper_locale,
        )

    def _shopper_locale(self, sales_channel_id: str) -> str:
        criteria = Criteria(ids=(sales_channel_id,)).add_association(LOCALE_ASSOCIATION)
        matches = self.sales_channel_repository.search(criteria)
        if not matches:
            raise SalesChannelNotFoundError(
                f"Sales channel '{sales_channel_id}' does not exist"
            )
        language = matches[0].language
        if language is None:
            raise SalesChannelNotFoundError(
                f"Sales channel '{sales_channel_id}' has no language locale"
            )
        return language.locale.code
