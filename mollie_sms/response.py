"""Gateway reply interpretation.

The gateway answers with an XML document shaped like::

    <response>
      <item type="sms">
        <recipients>1</recipients>
        <success>true</success>
        <resultcode>10</resultcode>
        <resultmessage>Message successfully sent.</resultmessage>
      </item>
    </response>

An HTTP error status is reported as a failed response without looking at
the body.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from functools import cached_property

import httpx

from mollie_sms.constants import RESULT_CODES
from mollie_sms.core.errors import GatewayResponseError

# Leading integer of a result code, e.g. "10" in "10 " or "10.0"
_LEADING_INT = re.compile(r"\s*[-+]?\d+")


class Response:
    """Result of a single delivery attempt."""

    def __init__(self, http_response: httpx.Response) -> None:
        """Initialize the response.

        Args:
            http_response: The raw HTTP response from the gateway
        """
        self.http_response = http_response

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def reason_phrase(self) -> str:
        return self.http_response.reason_phrase

    @property
    def body(self) -> str:
        return self.http_response.text

    @property
    def is_http_failure(self) -> bool:
        """Whether the HTTP request itself failed (status outside 2xx)."""
        return not 200 <= self.status_code <= 299

    @cached_property
    def params(self) -> dict[str, str]:
        """The ``<item>`` fields of the reply, or ``{}`` after an HTTP error.

        Raises:
            GatewayResponseError: If the body is not the expected XML document
        """
        if self.is_http_failure:
            return {}

        try:
            root = ET.fromstring(self.http_response.content)
        except ET.ParseError as exc:
            raise GatewayResponseError(
                f"Gateway reply is not valid XML: {exc}",
                details={"body": self.body[:500]},
            ) from exc

        item = root.find("item") if root.tag == "response" else None
        if item is None:
            raise GatewayResponseError(
                "Gateway reply has no <response><item> element",
                details={"body": self.body[:500]},
            )
        return {child.tag: (child.text or "").strip() for child in item}

    @property
    def result_code(self) -> int:
        """The gateway result code, or the HTTP status after an HTTP error.

        Only the leading digits of ``resultcode`` count; without any the
        code is 0. See ``mollie_sms.constants.RESULT_CODES`` for the gateway
        codes.
        """
        if self.is_http_failure:
            return self.status_code
        match = _LEADING_INT.match(self.params.get("resultcode", ""))
        return int(match.group()) if match else 0

    @property
    def result_description(self) -> str | None:
        return RESULT_CODES.get(self.result_code)

    @property
    def message(self) -> str | None:
        """The gateway's result message, or the HTTP status line after an HTTP error."""
        if self.is_http_failure:
            return f"[HTTP: {self.status_code}] {self.reason_phrase}"
        return self.params.get("resultmessage")

    @property
    def success(self) -> bool:
        """Whether the gateway accepted the message."""
        return not self.is_http_failure and self.params.get("success") == "true"

    def __repr__(self) -> str:
        outcome = "succeeded" if self.success else "failed"
        return f"<{type(self).__name__} {outcome} ({self.result_code}) '{self.message}'>"
