import pytest

from adyen_payment_methods.core import AdyenParameters, ConfigError, load_adyen_config
from adyen_payment_methods.core.config import AdyenConfig


def test_test_environment_defaults():
    config = load_adyen_config(env_file=None, base={"ADYEN_API_KEY": "key"})

    assert config.environment == "test"
    assert config.get_merchant_account() is None
    assert config.checkout_url == "https://checkout-test.adyen.com/v68"
    assert config.timeout_seconds == 30.0


def test_live_environment_uses_url_prefix():
    config = load_adyen_config(
        env_file=None,
        base={
            "ADYEN_API_KEY": "key",
            "ADYEN_ENVIRONMENT": "LIVE",
            "ADYEN_LIVE_URL_PREFIX": "1797a841fbb37ca7-AdyenDemo",
            "ADYEN_CHECKOUT_API_VERSION": "v70",
        },
    )

    assert config.is_live
    assert config.checkout_url == (
        "https://1797a841fbb37ca7-AdyenDemo-checkout-live.adyenpayments.com/checkout/v70"
    )


def test_checkout_url_override_wins():
    config = load_adyen_config(
        env_file=None,
        base={"ADYEN_API_KEY": "key"},
        checkout_url="http://localhost:8080/checkout/",
    )

    assert config.checkout_url == "http://localhost:8080/checkout"


def test_missing_api_key_is_rejected():
    with pytest.raises(ConfigError, match="ADYEN_API_KEY"):
        load_adyen_config(env_file=None, base={})


def test_live_without_prefix_is_rejected():
    with pytest.raises(ConfigError, match="ADYEN_LIVE_URL_PREFIX"):
        load_adyen_config(env_file=None, base={"ADYEN_API_KEY": "key", "ADYEN_ENVIRONMENT": "live"})


def test_unknown_environment_is_rejected():
    with pytest.raises(ConfigError, match="ADYEN_ENVIRONMENT"):
        load_adyen_config(env_file=None, base={"ADYEN_API_KEY": "key", "ADYEN_ENVIRONMENT": "staging"})


@pytest.mark.parametrize("timeout", ["soon", "0", "-1", "nan", "inf", "-inf"])
def test_invalid_timeout_is_rejected(timeout):
    with pytest.raises(ConfigError, match="ADYEN_REQUEST_TIMEOUT_SECONDS"):
        load_adyen_config(env_file=None, base={"ADYEN_API_KEY": "key"}, timeout_seconds=timeout)


def test_parameters_and_keywords_override_environment(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "ADYEN_API_KEY=file-key\nADYEN_MERCHANT_ACCOUNT=FileMerchant\n", encoding="utf-8"
    )

    config = load_adyen_config(
        env_file=str(env_file),
        base={},
        parameters=AdyenParameters(merchant_account="ParamMerchant", timeout_seconds=5),
        api_key="explicit-key",
    )

    assert config.api_key == "explicit-key"
    assert config.get_merchant_account() == "ParamMerchant"
    assert config.timeout_seconds == 5.0


def test_blank_merchant_account_is_absent():
    config = load_adyen_config(
        env_file=None, base={"ADYEN_API_KEY": "key", "ADYEN_MERCHANT_ACCOUNT": "   "}
    )

    assert config.get_merchant_account() is None


def test_parameters_as_overrides_skips_unset_fields():
    assert AdyenParameters(api_key="k", timeout_seconds=10).as_overrides() == {
        "ADYEN_API_KEY": "k",
        "ADYEN_REQUEST_TIMEOUT_SECONDS": "10",
    }


def test_config_is_frozen():
    config = AdyenConfig(api_key="key")
    with pytest.raises(AttributeError):
        config.api_key = "other"


@pytest.mark.parametrize("timeout", ["nan", "inf"])
def test_non_finite_timeout_in_environment_is_rejected(timeout):
    with pytest.raises(ConfigError, match="finite"):
        load_adyen_config(
            env_file=None,
            base={"ADYEN_API_KEY": "key", "ADYEN_REQUEST_TIMEOUT_SECONDS": timeout},
        )
