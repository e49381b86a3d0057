import pytest

from adyen_payment_methods import (
    PaymentMethodsService,
    create_checkout_client,
    create_payment_methods_service,
    get_payment_methods,
)

from conftest import PAYMENT_METHODS_RESPONSE, FakeSession, make_context, make_customer


def test_create_checkout_client_from_parameters():
    session = FakeSession()

    client = create_checkout_client(
        session=session,
        env_file=None,
        base={},
        api_key="param-key",
        merchant_account="ParamMerchant",
    )

    assert client.config.api_key == "param-key"
    client.payment_methods({})
    assert session.calls[0]["headers"]["X-API-Key"] == "param-key"
    assert "X-API-Key" not in session.headers


def test_config_and_parameters_are_mutually_exclusive(config):
    with pytest.raises(ValueError, match="not both"):
        create_checkout_client(config=config, api_key="other")


def test_service_uses_config_as_merchant_account_source(
    config, cart_service, sales_channel_repository
):
    service = create_payment_methods_service(
        config=config,
        session=FakeSession(),
        cart_service=cart_service,
        sales_channel_repository=sales_channel_repository,
    )

    assert isinstance(service, PaymentMethodsService)
    assert service.configuration.get_merchant_account() == "TestMerchantECOM"


def test_get_payment_methods_end_to_end(config, cart_service, sales_channel_repository):
    session = FakeSession()

    result = get_payment_methods(
        make_context(make_customer()),
        config=config,
        session=session,
        cart_service=cart_service,
        sales_channel_repository=sales_channel_repository,
    )

    assert result == PAYMENT_METHODS_RESPONSE
    assert session.calls[0]["json"]["amount"] == {"currency": "EUR", "value": 4999}
    assert session.calls[0]["json"]["shopperLocale"] == "de-DE"
