"""
HTTP client helpers for the Adyen Checkout API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .config import AdyenConfig

__all__ = [
    "AdyenError",
    "CheckoutClient",
    "request_payment_methods",
]


class AdyenError(Exception):
    """Raised when the Checkout API cannot be reached or rejects a request."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _post_json(
    session: requests.Session,
    url: str,
    body: Dict[str, Any],
    *,
    headers: Mapping[str, str],
    timeout: float,
) -> Dict[str, Any]:
    try:
        response = session.post(url, json=body, headers=dict(headers), timeout=timeout)
    except requests.RequestException as exc:
        raise AdyenError(f"Request to {url} failed: {exc}") from exc

    if response.status_code >= 400:
        raise AdyenError(
            f"Adyen responded with {response.status_code}: {response.text}",
            status_code=response.status_code,
        )
    try:
        payload = response.json()
    except ValueError as exc:
        raise AdyenError(
            f"Failed to parse JSON from Adyen at {url}: {response.text}",
            status_code=response.status_code,
        ) from exc
    if not isinstance(payload, dict):
        raise AdyenError(
            f"Unexpected response from Adyen at {url}: {payload!r}",
            status_code=response.status_code,
        )
    return payload


def _auth_headers(config: AdyenConfig) -> Dict[str, str]:
    return {
        "X-API-Key": config.api_key,
        "Content-Type": "application/json",
    }


def request_payment_methods(
    session: requests.Session,
    config: AdyenConfig,
    body: Dict[str, Any],
) -> Dict[str, Any]:
    url = f"{config.checkout_url}/paymentMethods"
    logging.info("Requesting payment methods from %s", url)
    return _post_json(
        session,
        url,
        body,
        headers=_auth_headers(config),
        timeout=config.timeout_seconds,
    )


class CheckoutClient:
    """
    Thin wrapper around the Checkout API endpoints used by the storefront.

    The API key travels with each request; a shared ``session`` is left untouched.
    """

    def __init__(
        self,
        config: AdyenConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def payment_methods(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return request_payment_methods(self.session, self.config, body)
