from __future__ import annotations

import pytest

from mollie_sms.connectors import (
    GatewayClient,
    MockDeliveryStore,
    MockGatewayClient,
    build_gateway_client,
    gateway_reply,
)
from mollie_sms.connectors.mock import DEFAULT_MAX_ENTRIES
from mollie_sms.core.errors import DeliveryFailure, ValidationError
from mollie_sms.message import Message
from mollie_sms.settings import SmsSettings

from .conftest import BODY, RECIPIENT


@pytest.fixture
def store() -> MockDeliveryStore:
    return MockDeliveryStore()


def test_mock_delivery_is_recorded(settings, message, store):
    with MockGatewayClient(settings, store=store) as client:
        response = client.deliver(message)

    assert response.success is True
    assert response.result_code == 10
    assert response.message == "message sent"

    [delivery] = store.get_all()
    assert delivery.recipient == RECIPIENT
    assert delivery.body == BODY
    assert delivery.params["originator"] == "Astro INC"
    assert "md5_password" not in delivery.params
    assert store.get_by_recipient(RECIPIENT) == [delivery]


def test_mock_failure_result(settings, message, store):
    with MockGatewayClient(settings, store=store, result_code=31) as client:
        response = client.deliver(message)
        assert response.success is False
        assert response.result_code == 31
        assert response.message == "not enough credits to send message"

        with pytest.raises(DeliveryFailure, match=r"^\(not enough credits to send message\) from:"):
            client.deliver_or_fail(message)

    assert len(store.get_all()) == 2


def test_mock_custom_result_message(settings, message, store):
    with MockGatewayClient(settings, store=store, result_message="Queued <test>") as client:
        assert client.deliver(message).message == "Queued <test>"


def test_mock_still_validates(settings, store):
    sms = Message(RECIPIENT, BODY, {"originator": "A very long sender"}, settings=settings)
    with MockGatewayClient(settings, store=store) as client:
        with pytest.raises(ValidationError):
            client.deliver(sms)
    assert store.get_all() == []


def test_store_clear(settings, message, store):
    with MockGatewayClient(settings, store=store) as client:
        client.deliver(message)
    store.clear()
    assert store.get_all() == []


def test_store_keeps_only_newest_deliveries():
    capped = MockDeliveryStore(max_entries=2)
    for n in range(3):
        capped.add({"recipients": f"+3161234567{n}"}, 10)

    kept = capped.get_all()
    assert [d.recipient for d in kept] == ["+31612345671", "+31612345672"]
    assert [d.id for d in kept] == ["mock-2", "mock-3"]


def test_store_without_cap_keeps_everything():
    unbounded = MockDeliveryStore(max_entries=None)
    for n in range(DEFAULT_MAX_ENTRIES + 1):
        unbounded.add({"recipients": str(n)}, 10)
    assert len(unbounded.get_all()) == DEFAULT_MAX_ENTRIES + 1


def test_gateway_reply_format():
    assert gateway_reply(20, "No username given.") == (
        '<?xml version="1.0"?><response><item type="sms"><recipients>0</recipients>'
        "<success>false</success><resultcode>20</resultcode>"
        "<resultmessage>No username given.</resultmessage></item></response>"
    )


def test_factory_returns_mock_in_simulation_mode():
    settings = SmsSettings(simulation_enabled=True)
    client = build_gateway_client(settings)
    try:
        assert isinstance(client, MockGatewayClient)
    finally:
        client.close()


def test_factory_returns_real_client_by_default(settings):
    client = build_gateway_client(settings)
    try:
        assert type(client) is GatewayClient
        assert client.settings is settings
    finally:
        client.close()
