"""Connector for the Mollie XML SMS gateway.

Messages are validated locally, posted form-encoded over HTTPS and the XML
reply is wrapped in a ``Response``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from mollie_sms.connectors.base import BaseConnector, BaseConnectorConfig
from mollie_sms.constants import (
    FORM_CONTENT_TYPE,
    MAX_ALPHANUMERIC_ORIGINATOR,
    MAX_NUMERIC_ORIGINATOR,
    REQUIRED_PARAMS,
)
from mollie_sms.core.errors import (
    DeliveryFailure,
    GatewayResponseError,
    MissingRequiredParam,
    ValidationError,
)
from mollie_sms.core.logging import mask_recipient
from mollie_sms.message import Message
from mollie_sms.response import Response
from mollie_sms.settings import SmsSettings, get_settings

logger = logging.getLogger("mollie_sms")

_NUMERIC = re.compile(r"[0-9]+")


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def validate_params(params: Mapping[str, Any]) -> None:
    """Check a parameter set before it is sent.

    Every required parameter must be present and non-blank. The originator
    may be up to 14 digits, or up to 11 characters if it contains anything
    other than digits.

    Raises:
        MissingRequiredParam: If a required parameter is absent or blank
        ValidationError: If the originator is too long
    """
    for key in REQUIRED_PARAMS:
        if _is_blank(params.get(key)):
            raise MissingRequiredParam(key)

    originator = str(params["originator"])
    if _NUMERIC.fullmatch(originator):
        limit, kind = MAX_NUMERIC_ORIGINATOR, "numerical"
    else:
        limit, kind = MAX_ALPHANUMERIC_ORIGINATOR, "alphanumerical"

    if len(originator) > limit:
        raise ValidationError(
            f"Originator may have a maximum of {limit} {kind} characters.",
            field="originator",
            details={"limit": limit, "length": len(originator)},
        )


def encode_form(params: Mapping[str, Any]) -> str:
    """Percent-encode ``params`` as a form body.

    Keys and values are quoted with no safe characters, so a space becomes
    ``%20``, never ``+``.
    """
    return "&".join(
        f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
        for key, value in params.items()
        if value is not None
    )


class GatewayClient(BaseConnector):
    """Delivers messages through the Mollie SMS gateway.

    Example:
        with GatewayClient(settings) as client:
            response = client.deliver(Message("+31612345678", "Hello", settings=settings))
            if not response.success:
                ...
    """

    def __init__(self, settings: SmsSettings | None = None, http: httpx.Client | None = None) -> None:
        """Initialize the client.

        Args:
            settings: Settings providing the endpoint and timeout
            http: HTTP client instance; one is created if omitted
        """
        self.settings = settings if settings is not None else get_settings()
        config = BaseConnectorConfig(
            url=str(self.settings.gateway_url),
            timeout_seconds=self.settings.timeout_seconds,
        )
        super().__init__(config, http)

    def _headers(self) -> dict[str, str]:
        return {**super()._headers(), "Content-Type": FORM_CONTENT_TYPE}

    def validate(self, message: Message) -> None:
        """Validate a message's parameters. See ``validate_params``."""
        try:
            validate_params(message.params)
        except ValidationError as exc:
            logger.warning(
                "sms_validation_failed",
                extra={"field": exc.field, "error": exc.message},
            )
            raise

    def deliver(self, message: Message) -> Response:
        """Post a message to the gateway.

        Gateway-level failures do not raise; inspect ``Response.success``.
        A 2xx reply that cannot be parsed is returned as well; reading its
        ``params`` raises ``GatewayResponseError``.

        Returns:
            The wrapped gateway reply

        Raises:
            ValidationError: If the message is not valid (nothing is sent)
            httpx.TransportError: If the gateway cannot be reached
        """
        self.validate(message)

        context: dict[str, Any] = {
            "recipient": mask_recipient(message.recipient),
            "originator": message.originator,
            "gateway": message.params.get("gateway"),
        }

        try:
            http_response = self._post(content=encode_form(message.params))
        except httpx.TransportError as exc:
            logger.error("sms_transport_error", extra={**context, "error": repr(exc)})
            raise

        response = Response(http_response)
        context["http_status"] = response.status_code
        try:
            context["result_code"] = response.result_code
        except GatewayResponseError as exc:
            logger.error("sms_unreadable_reply", extra={**context, "error": exc.message})
            return response

        if response.success:
            logger.info("sms_delivered", extra=context)
        else:
            logger.warning("sms_delivery_failed", extra={**context, "error": response.message})
        return response

    def deliver_or_fail(self, message: Message) -> Response:
        """Like ``deliver``, but raise when the gateway did not accept the message.

        Raises:
            DeliveryFailure: On an HTTP error, a gateway failure result or an
                unreadable reply
        """
        response = self.deliver(message)
        try:
            accepted = response.success
        except GatewayResponseError as exc:
            raise DeliveryFailure(message, response, reason=exc.message) from exc
        if not accepted:
            raise DeliveryFailure(message, response)
        return response
