from decimal import Decimal
from typing import Any, Dict, List, Optional

import pytest

from adyen_payment_methods.core import (
    AdyenConfig,
    AdyenError,
    Cart,
    CartPrice,
    Country,
    Customer,
    CustomerAddress,
    InMemorySalesChannelRepository,
    Language,
    Locale,
    PaymentMethodsService,
    SalesChannel,
    SalesChannelContext,
    StaticCartService,
)

ADYEN_KEYS = (
    "ADYEN_API_KEY",
    "ADYEN_MERCHANT_ACCOUNT",
    "ADYEN_ENVIRONMENT",
    "ADYEN_LIVE_URL_PREFIX",
    "ADYEN_CHECKOUT_API_VERSION",
    "ADYEN_CHECKOUT_URL",
    "ADYEN_REQUEST_TIMEOUT_SECONDS",
)

PAYMENT_METHODS_RESPONSE = {
    "paymentMethods": [
        {"name": "Credit Card", "type": "scheme", "brands": ["visa", "mc"]},
        {"name": "iDEAL", "type": "ideal"},
    ],
    "storedPaymentMethods": [
        {"id": "stored-1", "type": "scheme", "lastFour": "1111"},
    ],
}


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stands in for ``requests.Session`` and records every POST."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.headers: Dict[str, str] = {}
        self.response = response or FakeResponse(payload=PAYMENT_METHODS_RESPONSE)
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def post(self, url: str, json: Any = None, headers: Any = None, timeout: Any = None) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


class RecordingCheckoutClient:
    def __init__(self, response: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.response = PAYMENT_METHODS_RESPONSE if response is None else response
        self.error = error
        self.requests: List[Dict[str, Any]] = []

    def payment_methods(self, body: Dict[str, Any]) -> Dict[str, Any]:
        self.requests.append(body)
        if self.error is not None:
            raise self.error
        return self.response


class StaticConfiguration:
    def __init__(self, merchant_account: Optional[str]) -> None:
        self.merchant_account = merchant_account

    def get_merchant_account(self) -> Optional[str]:
        return self.merchant_account


def make_customer(billing: Optional[str] = "DE", shipping: Optional[str] = "DE") -> Customer:
    return Customer(
        id="customer-42",
        active_billing_address=CustomerAddress(country=Country(iso=billing)),
        active_shipping_address=CustomerAddress(country=Country(iso=shipping)),
    )


def make_context(customer: Optional[Customer] = None, currency: str = "EUR") -> SalesChannelContext:
    return SalesChannelContext(
        token="cart-token",
        sales_channel_id="storefront",
        currency_iso_code=currency,
        customer=customer,
    )


@pytest.fixture(autouse=True)
def _clean_adyen_environment(monkeypatch):
    for key in ADYEN_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config() -> AdyenConfig:
    return AdyenConfig(api_key="test-api-key", merchant_account="TestMerchantECOM")


@pytest.fixture
def checkout_client() -> RecordingCheckoutClient:
    return RecordingCheckoutClient()


@pytest.fixture
def cart_service() -> StaticCartService:
    return StaticCartService(
        {"cart-token": Cart(token="cart-token", price=CartPrice(total_price=Decimal("49.99")))}
    )


@pytest.fixture
def sales_channel_repository() -> InMemorySalesChannelRepository:
    return InMemorySalesChannelRepository(
        [SalesChannel(id="storefront", language=Language(locale=Locale(code="de-DE")))]
    )


@pytest.fixture
def make_service(checkout_client, cart_service, sales_channel_repository):
    def _make(merchant_account: Optional[str] = "TestMerchantECOM", **overrides):
        kwargs = {
            "checkout_client": checkout_client,
            "configuration": StaticConfiguration(merchant_account),
            "cart_service": cart_service,
            "sales_channel_repository": sales_channel_repository,
        }
        kwargs.update(overrides)
        return PaymentMethodsService(**kwargs)

    return _make


@pytest.fixture
def provider_error() -> AdyenError:
    return AdyenError("Adyen responded with 401: Unauthorized", status_code=401)
