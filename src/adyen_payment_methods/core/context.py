"""
Read-only commerce data consumed when building a payment-methods request.

The real cart, configuration and sales-channel stores live in the commerce
platform. They are described here as protocols so any object with the right
methods can be injected, and small in-memory implementations are provided for
the command line and for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

__all__ = [
    "Cart",
    "CartPrice",
    "CartService",
    "ConfigurationService",
    "ContextError",
    "Country",
    "Criteria",
    "Customer",
    "CustomerAddress",
    "InMemorySalesChannelRepository",
    "Language",
    "Locale",
    "LOCALE_ASSOCIATION",
    "SalesChannel",
    "SalesChannelContext",
    "SalesChannelRepository",
    "StaticCartService",
]

LOCALE_ASSOCIATION = "language.locale"


class ContextError(ValueError):
    """Raised when a context document cannot be parsed."""


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ContextError(f"'{name}' must be an object")
    return value


def _required_str(data: Mapping[str, Any], key: str, name: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ContextError(f"'{name}.{key}' must be a non-empty string")
    return value


@dataclass(frozen=True)
class Country:
    iso: Optional[str] = None


@dataclass(frozen=True)
class CustomerAddress:
    country: Optional[Country] = None

    @property
    def country_iso(self) -> Optional[str]:
        if self.country is None:
            return None
        return self.country.iso or None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> Optional["CustomerAddress"]:
        if data is None:
            return None
        data = _mapping(data, "address")
        country = data.get("country")
        if country is None:
            return cls()
        country = _mapping(country, "address.country")
        return cls(country=Country(iso=country.get("iso")))


@dataclass(frozen=True)
class Customer:
    id: str
    active_billing_address: Optional[CustomerAddress] = None
    active_shipping_address: Optional[CustomerAddress] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Customer":
        data = _mapping(data, "customer")
        return cls(
            id=_required_str(data, "id", "customer"),
            active_billing_address=CustomerAddress.from_mapping(
                data.get("activeBillingAddress")
            ),
            active_shipping_address=CustomerAddress.from_mapping(
                data.get("activeShippingAddress")
            ),
        )


@dataclass(frozen=True)
class SalesChannelContext:
    """The storefront session a payment-methods lookup is made for."""

    token: str
    sales_channel_id: str
    currency_iso_code: str
    customer: Optional[Customer] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SalesChannelContext":
        data = _mapping(data, "context")
        customer = data.get("customer")
        return cls(
            token=_required_str(data, "token", "context"),
            sales_channel_id=_required_str(data, "salesChannelId", "context"),
            currency_iso_code=_required_str(data, "currency", "context"),
            customer=None if customer is None else Customer.from_mapping(customer),
        )


@dataclass(frozen=True)
class CartPrice:
    total_price: Decimal = Decimal("0")


@dataclass(frozen=True)
class Cart:
    token: str
    price: CartPrice = field(default_factory=CartPrice)

    @classmethod
    def from_mapping(cls, token: str, data: Mapping[str, Any]) -> "Cart":
        data = _mapping(data, "cart")
        price = _mapping(data.get("price", {}), "cart.price")
        raw_total = price.get("totalPrice", "0")
        try:
            total = Decimal(str(raw_total))
        except InvalidOperation as exc:
            raise ContextError(
                f"'cart.price.totalPrice' must be a decimal number, got '{raw_total}'"
            ) from exc
        if not total.is_finite():
            raise ContextError(
                f"'cart.price.totalPrice' must be a finite number, got '{raw_total}'"
            )
        return cls(token=token, price=CartPrice(total_price=total))


@dataclass(frozen=True)
class Locale:
    code: str


@dataclass(frozen=True)
class Language:
    locale: Locale


@dataclass(frozen=True)
class SalesChannel:
    id: str
    language: Optional[Language] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SalesChannel":
        data = _mapping(data, "salesChannel")
        language = data.get("language")
        if language is None:
            return cls(id=_required_str(data, "id", "salesChannel"))
        language = _mapping(language, "salesChannel.language")
        locale = _mapping(language.get("locale"), "salesChannel.language.locale")
        return cls(
            id=_required_str(data, "id", "salesChannel"),
            language=Language(
                locale=Locale(code=_required_str(locale, "code", "salesChannel.language.locale"))
            ),
        )


@dataclass(frozen=True)
class Criteria:
    """Search criteria: a list of ids plus the associations to load."""

    ids: Tuple[str, ...] = ()
    associations: Tuple[str, ...] = ()

    def add_association(self, path: str) -> "Criteria":
        if path in self.associations:
            return self
        return replace(self, associations=self.associations + (path,))

    def has_association(self, path: str) -> bool:
        return path in self.associations


class CartService(Protocol):
    def get_cart(self, token: str, context: SalesChannelContext) -> Cart:
        ...


class ConfigurationService(Protocol):
    def get_merchant_account(self) -> Optional[str]:
        ...


class SalesChannelRepository(Protocol):
    def search(self, criteria: Criteria) -> List[SalesChannel]:
        ...


class StaticCartService:
    """Cart lookup backed by a mapping of token to cart.

    Unknown tokens yield an empty cart, the way a storefront hands out a fresh
    cart for a new session.
    """

    def __init__(self, carts: Optional[Mapping[str, Cart]] = None) -> None:
        self._carts: Dict[str, Cart] = dict(carts or {})

    def get_cart(self, token: str, context: SalesChannelContext) -> Cart:
        return self._carts.get(token) or Cart(token=token)


class InMemorySalesChannelRepository:
    """Sales-channel store that only loads the language when asked to."""

    def __init__(self, sales_channels: Iterable[SalesChannel] = ()) -> None:
        self._sales_channels: Dict[str, SalesChannel] = {
            channel.id: channel for channel in sales_channels
        }

    def search(self, criteria: Criteria) -> List[SalesChannel]:
        if criteria.ids:
            found = [
                self._sales_channels[channel_id]
                for channel_id in criteria.ids
                if channel_id in self._sales_channels
            ]
        else:
            found = list(self._sales_channels.values())

        if criteria.has_association(LOCALE_ASSOCIATION):
            return found
        return [replace(channel, language=None) for channel in found]
