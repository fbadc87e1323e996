"""Mock gateway client for simulation mode.

The mock goes through exactly the same validation, encoding and reply
handling as ``GatewayClient``; only the transport is swapped for an
``httpx.MockTransport`` that records each delivery and answers with a
gateway-style XML reply.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from urllib.parse import parse_qsl
from xml.sax.saxutils import escape

import httpx

from mollie_sms.connectors.gateway import GatewayClient
from mollie_sms.constants import RESULT_CODES, RESULT_SENT
from mollie_sms.settings import SmsSettings

logger = logging.getLogger("mollie_sms")

DEFAULT_MAX_ENTRIES = 1000


@dataclass
class MockDelivery:
    """A message accepted by the mock gateway."""

    id: str
    timestamp: datetime
    params: dict[str, str] = field(default_factory=dict)
    result_code: int = RESULT_SENT

    @property
    def recipient(self) -> str | None:
        return self.params.get("recipients")

    @property
    def body(self) -> str | None:
        return self.params.get("message")


class MockDeliveryStore:
    """Thread-safe record of deliveries made through mock clients.

    Only the newest ``max_entries`` deliveries are kept; ``None`` keeps all.
    """

    def __init__(self, max_entries: int | None = DEFAULT_MAX_ENTRIES) -> None:
        self._deliveries: deque[MockDelivery] = deque(maxlen=max_entries)
        self._count = 0
        self._lock = threading.Lock()

    def add(self, params: dict[str, str], result_code: int) -> MockDelivery:
        """Record a delivery. The password hash is not kept.

        Args:
            params: Decoded form parameters that were posted
            result_code: Result code the mock answered with

        Returns:
            The stored delivery
        """
        recorded = {key: value for key, value in params.items() if key != "md5_password"}
        with self._lock:
            self._count += 1
            delivery = MockDelivery(
                id=f"mock-{self._count}",
                timestamp=datetime.now(UTC),
                params=recorded,
                result_code=result_code,
            )
            self._deliveries.append(delivery)
        logger.debug("mock_delivery_stored", extra={"result_code": result_code})
        return delivery

    def get_all(self) -> list[MockDelivery]:
        with self._lock:
            return list(self._deliveries)

    def get_by_recipient(self, recipient: str) -> list[MockDelivery]:
        return [d for d in self.get_all() if d.recipient == recipient]

    def clear(self) -> None:
        """Clear all stored deliveries."""
        with self._lock:
            self._deliveries.clear()
        logger.info("mock_deliveries_cleared")


# Global store instance
_mock_store = MockDeliveryStore()


def get_mock_store() -> MockDeliveryStore:
    """Get the global mock delivery store."""
    return _mock_store


def gateway_reply(result_code: int, result_message: str | None = None) -> str:
    """Build an XML body the way the gateway formats its replies."""
    if result_message is None:
        result_message = RESULT_CODES.get(result_code, "unknown error")
    success = "true" if result_code == RESULT_SENT else "false"
    recipients = "1" if result_code == RESULT_SENT else "0"
    return (
        '<?xml version="1.0"?>'
        "<response>"
        '<item type="sms">'
        f"<recipients>{recipients}</recipients>"
        f"<success>{success}</success>"
        f"<resultcode>{result_code}</resultcode>"
        f"<resultmessage>{escape(result_message)}</resultmessage>"
        "</item>"
        "</response>"
    )


class MockGatewayClient(GatewayClient):
    """Gateway client that never leaves the process.

    Example:
        client = MockGatewayClient(settings, result_code=31)
        client.deliver(sms).success  # False, "not enough credits"
    """

    def __init__(
        self,
        settings: SmsSettings | None = None,
        *,
        store: MockDeliveryStore | None = None,
        result_code: int = RESULT_SENT,
        result_message: str | None = None,
    ) -> None:
        """Initialize the mock client.

        Args:
            settings: Settings providing the defaults and endpoint
            store: Where deliveries are recorded (the global store if omitted)
            result_code: Gateway result code every delivery is answered with
            result_message: Result message; taken from ``RESULT_CODES`` if omitted
        """
        self._store = store if store is not None else get_mock_store()
        self.result_code = result_code
        self.result_message = result_message
        super().__init__(settings, http=httpx.Client(transport=httpx.MockTransport(self._handle)))
        self._owns_http = True

    def _handle(self, request: httpx.Request) -> httpx.Response:
        params = dict(parse_qsl(request.content.decode("utf-8"), keep_blank_values=True))
        self._store.add(params, self.result_code)
        logger.info(
            "mock_sms_sent",
            extra={"result_code": self.result_code, "originator": params.get("originator")},
        )
        return httpx.Response(
            200,
            content=gateway_reply(self.result_code, self.result_message),
            headers={"Content-Type": "application/xml"},
        )
