"""Client for sending SMS messages through the Mollie XML SMS gateway."""

from mollie_sms.connectors import GatewayClient, MockGatewayClient, build_gateway_client
from mollie_sms.constants import GATEWAY_URL, GATEWAYS, REQUIRED_PARAMS, RESULT_CODES
from mollie_sms.core.errors import (
    DeliveryFailure,
    GatewayResponseError,
    MissingRequiredParam,
    SmsError,
    ValidationError,
)
from mollie_sms.message import Message
from mollie_sms.response import Response
from mollie_sms.settings import SmsSettings, get_settings

__all__ = [
    "DeliveryFailure",
    "GATEWAYS",
    "GATEWAY_URL",
    "GatewayClient",
    "GatewayResponseError",
    "Message",
    "MissingRequiredParam",
    "MockGatewayClient",
    "REQUIRED_PARAMS",
    "RESULT_CODES",
    "Response",
    "SmsError",
    "SmsSettings",
    "ValidationError",
    "build_gateway_client",
    "get_settings",
]
