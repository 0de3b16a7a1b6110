"""
Web2PDF Client
==============

Authenticated HTTP client for the Web2PDF service. Holds credentials and the
base address, sends JSON POST requests through a transport and turns
non-success responses into ``APIRequestError``.
"""

import json
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from web2pdf.config.logging import get_logger
from web2pdf.config.settings import get_settings
from web2pdf.core.exceptions import APIRequestError
from web2pdf.core.transport import (
    BaseTransport,
    SendFunction,
    TransportResponse,
    as_transport,
    resolve_default_transport,
)
from web2pdf.core.tree_renderer import BaseTreeRenderer, resolve_tree_renderer
from web2pdf.models.schemas import Web2PdfConfig

logger = get_logger(__name__)


class Web2PdfClient:
    """Client for the Web2PDF API."""

    def __init__(
        self,
        config: Web2PdfConfig,
        transport: Optional[Union[BaseTransport, SendFunction]] = None,
        tree_renderer: Optional[BaseTreeRenderer] = None,
        timeout: Optional[float] = None,
    ):
        self.config = config
        self.timeout = timeout
        self.logger: Any = logger.bind(component="web2pdf_client")  # structlog.BoundLoggerBase
        self._transport: Optional[BaseTransport] = (
            as_transport(transport) if transport is not None else None
        )
        self._owns_transport = transport is None
        self._tree_renderer = tree_renderer

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def tree_renderer(self) -> BaseTreeRenderer:
        """The injected renderer, or whichever one the environment provides."""
        if self._tree_renderer is not None:
            return self._tree_renderer
        return resolve_tree_renderer()

    def get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers."""
        return {
            "Authorization": f"Bearer {self.config.api_id}:{self.config.secret_key}",
            "Content-Type": "application/json",
        }

    def get_credentials(self) -> Dict[str, str]:
        """Get API credentials."""
        return {
            "api_id": self.config.api_id,
            "secret_key": self.config.secret_key,
        }

    def _get_transport(self) -> BaseTransport:
        if self._transport is None:
            self._transport = resolve_default_transport(timeout=self.timeout)
        return self._transport

    async def request(
        self, endpoint: str, body: Dict[str, Any]
    ) -> Tuple[bytes, Mapping[str, str]]:
        """
        POST ``body`` as JSON to ``endpoint``.

        Args:
            endpoint: Path appended to the base URL
            body: JSON-serializable request body

        Returns:
            The raw response bytes and the case-insensitive response headers

        Raises:
            APIRequestError: The service answered with a non-success status
            TransportUnavailableError: No transport was given and none is installed
        """
        transport = self._get_transport()
        url = f"{self.base_url}{endpoint}"

        self.logger.debug("Sending request", url=url, fields=sorted(body))
        response = await transport.send(url, self.get_auth_headers(), json.dumps(body).encode("utf-8"))
        self.logger.debug(
            "Received response",
            url=url,
            status=response.status,
            content_type=response.headers.get("content-type"),
            size=len(response.body),
        )

        if not response.ok:
            raise APIRequestError(response.status, response.status_text, _error_body(response))

        return response.body, response.headers

    async def close(self) -> None:
        """Close a transport this client created itself."""
        if self._owns_transport and self._transport is not None:
            await self._transport.close()
            self._transport = None

    async def __aenter__(self) -> "Web2PdfClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def _error_body(response: TransportResponse) -> Any:
    """Decode a JSON error body, falling back to the status text."""
    try:
        return json.loads(response.body)
    except ValueError:
        return {"message": response.status_text}


def create_client(config: Optional[Web2PdfConfig] = None, **kwargs: Any) -> Web2PdfClient:
    """Create a Web2PDF client instance, reading settings when no config is given."""
    if config is None:
        settings = get_settings()
        config = Web2PdfConfig.from_settings(settings)
        kwargs.setdefault("timeout", settings.request_timeout)
    return Web2PdfClient(config, **kwargs)
