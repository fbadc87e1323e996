"""Exception hierarchy for the SMS client.

Validation problems are raised before anything is sent. Gateway-level
failures only become exceptions through ``deliver_or_fail``. Transport
failures are left as the ``httpx`` exceptions they already are.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mollie_sms.message import Message
    from mollie_sms.response import Response


class SmsError(Exception):
    """Base exception for all SMS client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary, e.g. for structured logs.

        Returns:
            Dictionary representation of the error
        """
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(SmsError):
    """Raised when a message's parameters fail validation.

    Nothing has been sent to the gateway when this is raised.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the validation error.

        Args:
            message: Human-readable error message
            field: Name of the parameter that failed validation
            details: Optional additional error details
        """
        super().__init__(message, details)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class MissingRequiredParam(ValidationError):
    """Raised when a required parameter is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(f"The required parameter '{field}' is missing.", field=field)


class GatewayResponseError(SmsError):
    """Raised when a successful HTTP reply carries a body that cannot be parsed."""

    pass


class DeliveryFailure(SmsError):
    """Raised by ``deliver_or_fail`` when the gateway did not accept a message.

    Carries the message and the gateway response for diagnostics.
    """

    def __init__(self, sms: Message, response: Response, reason: str | None = None) -> None:
        """Initialize the failure.

        Args:
            sms: The message that was not accepted
            response: The gateway response
            reason: Used instead of the response message when the reply
                could not be read
        """
        if reason is None:
            reason = response.message
            details: dict[str, Any] = {"result_code": response.result_code}
        else:
            details = {"http_status": response.status_code}
        super().__init__(f"({reason}) {sms}", details=details)
        self.sms = sms
        self.response = response
