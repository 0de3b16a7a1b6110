"""
HTTP Transport
==============

Pluggable request-sending strategies used by the Web2PDF client.

A transport POSTs a prepared body and hands back the complete response. The
client accepts any ``BaseTransport`` or a plain async callable; without one
it resolves a default from the HTTP libraries installed:

1. aiohttp
2. httpx
"""

import importlib.util
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from multidict import CIMultiDict, CIMultiDictProxy

from web2pdf.config.logging import get_logger
from web2pdf.core.exceptions import TransportUnavailableError

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """A fully buffered HTTP response."""

    status: int
    status_text: str
    body: bytes = b""
    headers: CIMultiDictProxy = field(default_factory=lambda: CIMultiDictProxy(CIMultiDict()))

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def build(
        cls,
        status: int,
        status_text: str = "",
        body: bytes = b"",
        headers: Optional[Mapping[str, str]] = None,
    ) -> "TransportResponse":
        """Create a response, normalizing headers to a case-insensitive view."""
        return cls(
            status=status,
            status_text=status_text,
            body=body,
            headers=CIMultiDictProxy(CIMultiDict(headers or {})),
        )


SendFunction = Callable[[str, Mapping[str, str], bytes], Awaitable[TransportResponse]]


class BaseTransport(ABC):
    """Abstract base class for HTTP transports."""

    @abstractmethod
    async def send(self, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        """POST ``body`` to ``url`` and return the buffered response."""
        pass

    async def close(self) -> None:
        """Release any connection resources."""
        pass


class CallableTransport(BaseTransport):
    """Adapts a plain async send function to the transport interface."""

    def __init__(self, send_fn: SendFunction):
        self._send_fn = send_fn

    async def send(self, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        return await self._send_fn(url, headers, body)


class AiohttpTransport(BaseTransport):
    """Transport backed by an ``aiohttp.ClientSession``."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self.logger: Any = logger.bind(transport="aiohttp")  # structlog.BoundLoggerBase
        self._session: Any = None  # aiohttp.ClientSession

    async def _get_session(self) -> Any:
        """Get or create aiohttp session."""
        import aiohttp

        if self._session is None or self._session.closed:
            # total=None leaves the request unbounded unless a timeout is configured
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def send(self, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        session = await self._get_session()
        async with session.post(url, data=body, headers=dict(headers)) as response:
            payload = await response.read()
            return TransportResponse(
                status=response.status,
                status_text=response.reason or "",
                body=payload,
                headers=CIMultiDictProxy(CIMultiDict(response.headers)),
            )

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self.logger.debug("Transport session closed")
        self._session = None


class HttpxTransport(BaseTransport):
    """Transport backed by an ``httpx.AsyncClient``."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self.logger: Any = logger.bind(transport="httpx")  # structlog.BoundLoggerBase
        self._client: Any = None  # httpx.AsyncClient

    async def _get_client(self) -> Any:
        """Get or create httpx client."""
        import httpx

        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def send(self, url: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        client = await self._get_client()
        response = await client.post(url, content=body, headers=dict(headers))
        return TransportResponse(
            status=response.status_code,
            status_text=response.reason_phrase or "",
            body=response.content,
            headers=CIMultiDictProxy(CIMultiDict(response.headers.multi_items())),
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self.logger.debug("Transport client closed")
        self._client = None


def _module_available(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def resolve_default_transport(timeout: Optional[float] = None) -> BaseTransport:
    """Pick the first installed HTTP library, or fail with remediation."""
    if _module_available("aiohttp"):
        logger.debug("Resolved default transport", transport="aiohttp")
        return AiohttpTransport(timeout=timeout)

    if _module_available("httpx"):
        logger.debug("Resolved default transport", transport="httpx")
        return HttpxTransport(timeout=timeout)

    raise TransportUnavailableError(
        "No HTTP transport is available. Install aiohttp (pip install aiohttp) "
        "or httpx (pip install httpx), or pass a transport to the client."
    )


def as_transport(transport: Union[BaseTransport, SendFunction]) -> BaseTransport:
    """Wrap a plain async send function; pass transports through."""
    if isinstance(transport, BaseTransport):
        return transport
    if callable(transport):
        return CallableTransport(transport)
    raise TypeError(f"Unsupported transport: {transport!r}")
