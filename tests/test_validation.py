from __future__ import annotations

import pytest

from mollie_sms.connectors.gateway import validate_params
from mollie_sms.constants import REQUIRED_PARAMS
from mollie_sms.core.errors import MissingRequiredParam, ValidationError
from mollie_sms.message import Message

from .conftest import BODY, RECIPIENT


def test_complete_message_is_valid(message):
    validate_params(message.params)


@pytest.mark.parametrize("key", REQUIRED_PARAMS)
def test_absent_required_param_is_reported(message, key):
    del message.params[key]
    with pytest.raises(MissingRequiredParam) as exc_info:
        validate_params(message.params)

    assert exc_info.value.field == key
    assert str(exc_info.value) == f"The required parameter '{key}' is missing."


@pytest.mark.parametrize("key", REQUIRED_PARAMS)
@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_required_param_is_reported(message, key, blank):
    message.params[key] = blank
    with pytest.raises(MissingRequiredParam) as exc_info:
        validate_params(message.params)
    assert exc_info.value.field == key


def test_unconfigured_settings_fail_on_username(settings):
    settings.username = ""
    sms = Message(RECIPIENT, BODY, settings=settings)
    with pytest.raises(MissingRequiredParam, match="username"):
        validate_params(sms.params)


def test_missing_param_is_a_validation_error(message):
    message.body = None
    with pytest.raises(ValidationError):
        validate_params(message.params)


@pytest.mark.parametrize("originator", ["00000000001111", "0123456789A", "Astro INC", "1"])
def test_originator_within_limits(message, originator):
    message.params["originator"] = originator
    validate_params(message.params)


def test_numeric_originator_longer_than_14_digits(message):
    message.params["originator"] = "000000000011112"
    with pytest.raises(ValidationError) as exc_info:
        validate_params(message.params)

    assert str(exc_info.value) == "Originator may have a maximum of 14 numerical characters."
    assert exc_info.value.field == "originator"
    assert exc_info.value.details["limit"] == 14


def test_alphanumeric_originator_longer_than_11_characters(message):
    message.params["originator"] = "0123456789AB"
    with pytest.raises(ValidationError) as exc_info:
        validate_params(message.params)

    assert str(exc_info.value) == "Originator may have a maximum of 11 alphanumerical characters."
    assert exc_info.value.details["limit"] == 11


def test_leading_plus_makes_originator_alphanumeric(message):
    message.params["originator"] = "+31612345678"
    with pytest.raises(ValidationError, match="11 alphanumerical"):
        validate_params(message.params)


def test_validation_error_to_dict(message):
    message.params["originator"] = "0123456789AB"
    with pytest.raises(ValidationError) as exc_info:
        validate_params(message.params)

    assert exc_info.value.to_dict() == {
        "error": "Originator may have a maximum of 11 alphanumerical characters.",
        "details": {"limit": 11, "length": 12},
        "field": "originator",
    }
