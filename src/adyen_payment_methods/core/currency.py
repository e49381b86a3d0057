"""
Minor-unit conversion for amounts sent to the Adyen API.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import FrozenSet

__all__ = ["Currency"]

_ZERO_DECIMAL_CURRENCIES: FrozenSet[str] = frozenset(
    {
        "CVE",
        "DJF",
        "GNF",
        "IDR",
        "JPY",
        "KMF",
        "KRW",
        "PYG",
        "RWF",
        "UGX",
        "VND",
        "VUV",
        "XAF",
        "XOF",
        "XPF",
    }
)

_THREE_DECIMAL_CURRENCIES: FrozenSet[str] = frozenset(
    {"BHD", "IQD", "JOD", "KWD", "LYD", "OMR", "TND"}
)


def _to_decimal(amount: Decimal | int | float | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise ValueError("Amount must be numeric, got a boolean")
    try:
        # 49.99 -> Decimal("49.99")
        return Decimal(str(amount).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Amount must be a valid decimal number, got '{amount}'") from exc


class Currency:
    """
    Currency helper following the provider's ISO-4217 exponent table.
    """

    def decimals(self, currency: str) -> int:
        code = currency.strip().upper()
        if code in _ZERO_DECIMAL_CURRENCIES:
            return 0
        if code in _THREE_DECIMAL_CURRENCIES:
            return 3
        return 2

    def sanitize(self, amount: Decimal | int | float | str, currency: str) -> int:
        """
        Convert ``amount`` into the integer minor-unit value for ``currency``.

        ``12.34`` EUR becomes ``1234``, ``1500`` JPY stays ``1500``. Half values
        round away from zero.
        """
        value = _to_decimal(amount)
        if not value.is_finite():
            raise ValueError(f"Amount must be finite, got '{amount}'")
        scaled = value * (Decimal(10) ** self.decimals(currency))
        return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
