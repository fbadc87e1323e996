"""Base connector for the HTTP gateway.

This module centralizes HTTP client ownership and header construction for
connectors. Each call sends exactly one request.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class BaseConnectorConfig:
    """Base configuration for connectors.

    Attributes:
        url: Endpoint requests are sent to
        timeout_seconds: Timeout applied to an owned HTTP client
    """

    url: str = ""
    timeout_seconds: float = 10.0


class BaseConnector:
    """Shared plumbing for connectors.

    Provides common functionality:
    - HTTP client management (injected or owned)
    - Header construction
    - Context manager support
    """

    user_agent = "mollie-sms"

    def __init__(self, config: BaseConnectorConfig, http: httpx.Client | None = None) -> None:
        """Initialize the connector.

        Args:
            config: Connector configuration
            http: HTTP client to use; one is created (and later closed) if omitted
        """
        self._cfg = config
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=config.timeout_seconds)

    def _headers(self) -> dict[str, str]:
        """Build default headers for requests.

        Subclasses extend this with the headers their endpoint expects.
        """
        return {"User-Agent": self.user_agent}

    def _post(
        self,
        *,
        content: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST ``content`` to the configured URL.

        HTTP error statuses are returned, not raised.

        Raises:
            httpx.TransportError: If the connection fails or times out
        """
        merged_headers = {**self._headers(), **(headers or {})}
        return self._http.post(self._cfg.url, content=content, headers=merged_headers)

    def close(self) -> None:
        """Close the HTTP client if this connector created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
