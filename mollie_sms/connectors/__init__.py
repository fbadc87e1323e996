"""Connector package for the SMS gateway.

This package provides:
- GatewayClient: delivery through the Mollie XML SMS gateway
- MockGatewayClient: simulation mode, no network access
"""

from mollie_sms.connectors.base import BaseConnector, BaseConnectorConfig
from mollie_sms.connectors.factory import build_gateway_client
from mollie_sms.connectors.gateway import GatewayClient, encode_form, validate_params
from mollie_sms.connectors.mock import (
    MockDelivery,
    MockDeliveryStore,
    MockGatewayClient,
    gateway_reply,
    get_mock_store,
)

__all__ = [
    # Base classes
    "BaseConnector",
    "BaseConnectorConfig",
    # Gateway
    "GatewayClient",
    "encode_form",
    "validate_params",
    "build_gateway_client",
    # Mock/Simulation
    "MockGatewayClient",
    "MockDelivery",
    "MockDeliveryStore",
    "gateway_reply",
    "get_mock_store",
]
