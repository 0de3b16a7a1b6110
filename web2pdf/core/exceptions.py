"""
Client Exceptions
=================

Typed errors raised by the Web2PDF client. Every failure of a call surfaces
as exactly one of these; nothing is retried.
"""

import json
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from web2pdf.models.schemas import ApiError


class Web2PdfError(Exception):
    """Base class for all Web2PDF client errors."""

    pass


class ConfigurationError(Web2PdfError):
    """Raised when settings do not provide what the client needs."""

    pass


class InputValidationError(Web2PdfError, ValueError):
    """Raised when caller input is rejected before any network call."""

    pass


class RendererUnavailableError(Web2PdfError):
    """Raised when component-tree rendering is requested but no renderer is available."""

    pass


class TreeRenderError(Web2PdfError):
    """Raised when the component-tree renderer fails to produce HTML."""

    pass


class TransportUnavailableError(Web2PdfError):
    """Raised when no HTTP transport can be found to send a request."""

    pass


class APIRequestError(Web2PdfError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status: int, status_text: str, body: Any):
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(
            f"API request failed: {status} {status_text}. {json.dumps(body, default=str)}"
        )

    @property
    def api_error(self) -> Optional["ApiError"]:
        """The error body as an ``ApiError`` when it has that shape."""
        from web2pdf.models.schemas import ApiError

        return ApiError.parse_lenient(self.body)
