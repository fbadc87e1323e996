"""Client settings shared by every message.

This module provides configuration management using Pydantic Settings.
An ``SmsSettings`` instance is built once at startup, either explicitly or
through ``get_settings()``, and read by every ``Message`` and client.
"""

from __future__ import annotations

import hashlib
from functools import lru_cache
from typing import Any

from pydantic import AnyHttpUrl, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mollie_sms.constants import (
    DEFAULT_CHARSET,
    DEFAULT_GATEWAY,
    DEFAULT_MESSAGE_TYPE,
    GATEWAY_URL,
    GATEWAYS,
)


def md5_hexdigest(plaintext: str) -> str:
    """Return the lowercase MD5 hex digest the gateway expects as password."""
    return hashlib.md5(plaintext.encode("utf-8"), usedforsecurity=False).hexdigest()


class SmsSettings(BaseSettings):
    """Credentials and defaults for the Mollie SMS gateway.

    Values come from constructor arguments, ``MOLLIE_SMS_*`` environment
    variables or a ``.env`` file. Pass ``password=`` to have a plaintext
    password hashed; only the hash is kept.

    Attributes:
        username: Gateway account name
        md5_password: MD5 hex digest of the account password
        originator: Sender name or number shown to the recipient
        charset: Character set of the message body
        message_type: Message type, sent as the ``type`` parameter
        gateway: Gateway code (``2``, ``4``, ``1`` or ``8``)
        gateway_url: HTTPS endpoint messages are posted to
        timeout_seconds: HTTP timeout for a delivery
        log_level: Logging level for ``configure_logging``
        log_json: Emit JSON logs instead of human-readable ones
        simulation_enabled: Use the mock client instead of the real gateway
    """

    model_config = SettingsConfigDict(
        env_prefix="MOLLIE_SMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    username: str = ""
    md5_password: str = Field(default="", repr=False)
    originator: str = ""
    charset: str = DEFAULT_CHARSET
    message_type: str = DEFAULT_MESSAGE_TYPE
    gateway: str = DEFAULT_GATEWAY
    gateway_url: AnyHttpUrl = GATEWAY_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"
    log_json: bool = False
    simulation_enabled: bool = False

    @model_validator(mode="before")
    @classmethod
    def hash_plaintext_password(cls, data: Any) -> Any:
        """Replace a plaintext ``password`` argument by its MD5 digest."""
        if isinstance(data, dict) and "password" in data:
            data = dict(data)
            password = data.pop("password")
            if password is not None:
                data["md5_password"] = md5_hexdigest(password)
        return data

    @field_validator("gateway", mode="before")
    @classmethod
    def resolve_gateway(cls, v: Any) -> str:
        """Accept a gateway name or code and store the code."""
        value = str(v).strip()
        if value in GATEWAYS:
            return GATEWAYS[value]
        if value in GATEWAYS.values():
            return value
        raise ValueError(
            f"Unknown gateway: {v}. Must be one of {sorted(GATEWAYS)} "
            f"or a code in {sorted(GATEWAYS.values())}"
        )

    @field_validator("gateway_url")
    @classmethod
    def require_https(cls, v: AnyHttpUrl) -> AnyHttpUrl:
        if v.scheme != "https":
            raise ValueError(f"gateway_url must use https, got {v.scheme}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper

    @property
    def password(self) -> str:
        """The stored password hash. The plaintext is never kept."""
        return self.md5_password

    def set_password(self, plaintext: str) -> None:
        """Hash ``plaintext`` with MD5 and store the digest."""
        self.md5_password = md5_hexdigest(plaintext)

    def default_params(self) -> dict[str, str]:
        """Parameters every message starts from, read from the current values.

        Returns:
            ``username``, ``md5_password``, ``originator``, ``gateway``,
            ``charset`` and ``type``
        """
        return {
            "username": self.username,
            "md5_password": self.md5_password,
            "originator": self.originator,
            "gateway": self.gateway,
            "charset": self.charset,
            "type": self.message_type,
        }


@lru_cache
def get_settings() -> SmsSettings:
    """Get cached settings instance.

    Returns:
        Settings instance loaded from environment variables
    """
    return SmsSettings()
