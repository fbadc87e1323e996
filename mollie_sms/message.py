"""Outbound SMS message.

A message is a parameter mapping seeded from the settings' defaults. Nothing
is validated here; that happens when the message is delivered.
"""

from __future__ import annotations

from typing import Any

from mollie_sms.settings import SmsSettings, get_settings


class Message:
    """One SMS to be posted to the gateway.

    Example:
        settings = SmsSettings(username="AstroRadio", password="secret", originator="Astro INC")
        sms = Message("+31612345678", "Hello", settings=settings)
        sms.params["originator"]  # 'Astro INC'
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        recipient: str | None = None,
        body: str | None = None,
        extra_params: dict[str, Any] | None = None,
        *,
        settings: SmsSettings | None = None,
    ) -> None:
        """Initialize the message.

        Args:
            recipient: Recipient telephone number
            body: Message text
            extra_params: Parameters overriding the defaults
            settings: Settings to take defaults from (``get_settings()`` if omitted)
        """
        if settings is None:
            settings = get_settings()
        self.params: dict[str, Any] = {**settings.default_params(), **(extra_params or {})}
        if recipient is not None:
            self.recipient = recipient
        if body is not None:
            self.body = body

    @property
    def recipient(self) -> str | None:
        return self.params.get("recipients")

    @recipient.setter
    def recipient(self, value: str | None) -> None:
        self.params["recipients"] = value

    # Name used by the gateway documentation
    telephone_number = recipient

    @property
    def body(self) -> str | None:
        return self.params.get("message")

    @body.setter
    def body(self, value: str | None) -> None:
        self.params["message"] = value

    @property
    def originator(self) -> str | None:
        return self.params.get("originator")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self.params == other.params

    def __str__(self) -> str:
        return f'from: <{self.originator}> to: <{self.recipient}> body: "{self.body}"'

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"
