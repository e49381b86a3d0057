"""
Helpers for constructing the JSON payloads sent to the Adyen Checkout API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

__all__ = [
    "Amount",
    "PaymentMethodsRequest",
    "WEB_CHANNEL",
]

WEB_CHANNEL = "Web"


@dataclass(frozen=True)
class Amount:
    currency: str
    value: int

    def to_payload(self) -> Dict[str, Any]:
        return {"currency": self.currency, "value": self.value}


@dataclass(frozen=True)
class PaymentMethodsRequest:
    merchant_account: str
    country_code: Optional[str]
    amount: Amount
    shopper_reference: str
    shopper_locale: str
    channel: str = WEB_CHANNEL

    def to_payload(self) -> Dict[str, Any]:
        """Build the body submitted to ``/paymentMethods``."""
        payload: Dict[str, Any] = {
            "channel": self.channel,
            "merchantAccount": self.merchant_account,
            "countryCode": self.country_code,
            "amount": self.amount.to_payload(),
            "shopperReference": self.shopper_reference,
            "shopperLocale": self.shopper_locale,
        }
        if self.country_code is None:
            del payload["countryCode"]
        return payload
