"""Construction of gateway clients from settings."""

from __future__ import annotations

import logging

import httpx

from mollie_sms.connectors.gateway import GatewayClient
from mollie_sms.connectors.mock import MockGatewayClient
from mollie_sms.settings import SmsSettings, get_settings

logger = logging.getLogger("mollie_sms")


def build_gateway_client(
    settings: SmsSettings | None = None,
    http: httpx.Client | None = None,
) -> GatewayClient:
    """Return the client matching the settings.

    In simulation mode a ``MockGatewayClient`` is returned and ``http`` is
    ignored.
    """
    settings = settings if settings is not None else get_settings()
    if settings.simulation_enabled:
        logger.info("sms_simulation_mode_enabled")
        return MockGatewayClient(settings)
    return GatewayClient(settings, http=http)
