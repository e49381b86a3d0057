"""
Configuration objects and helpers for the Adyen checkout integration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "ConfigError",
    "AdyenConfig",
    "AdyenParameters",
    "load_adyen_config",
]

TEST_CHECKOUT_URL = "https://checkout-test.adyen.com"
LIVE_CHECKOUT_URL_TEMPLATE = "https://{prefix}-checkout-live.adyenpayments.com/checkout"
DEFAULT_API_VERSION = "v68"
ENVIRONMENTS = ("test", "live")

_PARAMETER_TO_ENV_KEY = {
    "api_key": "ADYEN_API_KEY",
    "merchant_account": "ADYEN_MERCHANT_ACCOUNT",
    "environment": "ADYEN_ENVIRONMENT",
    "live_url_prefix": "ADYEN_LIVE_URL_PREFIX",
    "api_version": "ADYEN_CHECKOUT_API_VERSION",
    "checkout_url": "ADYEN_CHECKOUT_URL",
    "timeout_seconds": "ADYEN_REQUEST_TIMEOUT_SECONDS",
}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class AdyenParameters:
    """
    Explicit parameter bundle for constructing :class:`AdyenConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_adyen_config`.
    """

    api_key: Optional[str] = None
    merchant_account: Optional[str] = None
    environment: Optional[str] = None
    live_url_prefix: Optional[str] = None
    api_version: Optional[str] = None
    checkout_url: Optional[str] = None
    timeout_seconds: Optional[float | int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[AdyenParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:  # pragma: no cover - guarded by the call sites
            raise TypeError(f"Unknown Adyen parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _require(values: Mapping[str, str], key: str) -> str:
    value = (values.get(key) or "").strip()
    if not value:
        raise ConfigError(f"{key} must be provided")
    return value


def _optional(values: Mapping[str, str], key: str) -> Optional[str]:
    value = (values.get(key) or "").strip()
    return value or None


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"ADYEN_REQUEST_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(
            "ADYEN_REQUEST_TIMEOUT_SECONDS must be a finite number greater than zero"
        )
    return timeout


@dataclass(frozen=True)
class AdyenConfig:
    api_key: str
    merchant_account: Optional[str] = None
    environment: str = "test"
    live_url_prefix: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    checkout_url_override: Optional[str] = None
    timeout_seconds: float = 30.0

    def get_merchant_account(self) -> Optional[str]:
        """Return the configured merchant account, or ``None`` when unset."""
        return self.merchant_account or None

    @property
    def is_live(self) -> bool:
        return self.environment == "live"

    @property
    def checkout_url(self) -> str:
        if self.checkout_url_override:
            return self.checkout_url_override
        if self.is_live:
            base = LIVE_CHECKOUT_URL_TEMPLATE.format(prefix=self.live_url_prefix)
        else:
            base = TEST_CHECKOUT_URL
        return f"{base}/{self.api_version}"

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "AdyenConfig":
        api_key = _require(values, "ADYEN_API_KEY")
        merchant_account = _optional(values, "ADYEN_MERCHANT_ACCOUNT")

        environment = (values.get("ADYEN_ENVIRONMENT") or "test").strip().lower()
        if environment not in ENVIRONMENTS:
            raise ConfigError(
                f"ADYEN_ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got '{environment}'"
            )

        live_url_prefix = _optional(values, "ADYEN_LIVE_URL_PREFIX")
        checkout_url = _optional(values, "ADYEN_CHECKOUT_URL")
        if checkout_url is not None:
            checkout_url = checkout_url.rstrip("/")
        if environment == "live" and live_url_prefix is None and checkout_url is None:
            raise ConfigError(
                "ADYEN_LIVE_URL_PREFIX must be provided for the live environment"
            )

        api_version = _optional(values, "ADYEN_CHECKOUT_API_VERSION") or DEFAULT_API_VERSION
        timeout_seconds = _parse_timeout(
            values.get("ADYEN_REQUEST_TIMEOUT_SECONDS") or "30"
        )

        return cls(
            api_key=api_key,
            merchant_account=merchant_account,
            environment=environment,
            live_url_prefix=live_url_prefix,
            api_version=api_version,
            checkout_url_override=checkout_url,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
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
    ) -> "AdyenConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "merchant_account": merchant_account,
                "environment": environment,
                "live_url_prefix": live_url_prefix,
                "api_version": api_version,
                "checkout_url": checkout_url,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        resolved = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(resolved.variables)


def load_adyen_config(
    *,
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
) -> AdyenConfig:
    """
    Convenience wrapper that mirrors :meth:`AdyenConfig.from_env`.

    The configuration can be provided through environment variables, a
    ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return AdyenConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        merchant_account=merchant_account,
        environment=environment,
        live_url_prefix=live_url_prefix,
        api_version=api_version,
        checkout_url=checkout_url,
        timeout_seconds=timeout_seconds,
    )
