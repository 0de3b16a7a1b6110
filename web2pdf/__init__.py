"""
Web2PDF Client
==============

Async client for the Web2PDF rendering service: convert URLs, HTML or
component trees into PDF files and screenshots.

This package provides:
- An authenticated client with pluggable HTTP transports
- PDF and screenshot operations returning typed results
- Optional component-tree to HTML rendering
- Environment-driven settings and structured logging
"""

import logging

from web2pdf.core.client import Web2PdfClient, create_client
from web2pdf.core.exceptions import (
    APIRequestError,
    ConfigurationError,
    InputValidationError,
    RendererUnavailableError,
    TransportUnavailableError,
    TreeRenderError,
    Web2PdfError,
)
from web2pdf.core.pdf import create_pdf
from web2pdf.core.screenshot import create_screenshot
from web2pdf.core.transport import (
    AiohttpTransport,
    BaseTransport,
    HttpxTransport,
    TransportResponse,
)
from web2pdf.core.tree_renderer import (
    BaseTreeRenderer,
    CompositeTreeRenderer,
    DominateTreeRenderer,
    HtmlProtocolTreeRenderer,
    UnavailableTreeRenderer,
    is_tree_value,
    render_to_html,
    set_default_tree_renderer,
)
from web2pdf.models.schemas import (
    ApiError,
    CreatePdfOptions,
    CreatePdfRequest,
    CreateScreenshotOptions,
    CreateScreenshotRequest,
    PdfMargin,
    PdfOptions,
    PdfResult,
    RateLimitInfo,
    ScreenshotOptions,
    ScreenshotResult,
    ScreenshotViewport,
    Web2PdfConfig,
)

__version__ = "1.0.0"

logging.getLogger("web2pdf").addHandler(logging.NullHandler())

__all__ = [
    "Web2PdfClient",
    "create_client",
    "create_pdf",
    "create_screenshot",
    "Web2PdfConfig",
    "CreatePdfOptions",
    "CreateScreenshotOptions",
    "CreatePdfRequest",
    "CreateScreenshotRequest",
    "PdfOptions",
    "PdfMargin",
    "ScreenshotOptions",
    "ScreenshotViewport",
    "PdfResult",
    "ScreenshotResult",
    "RateLimitInfo",
    "ApiError",
    "Web2PdfError",
    "APIRequestError",
    "ConfigurationError",
    "InputValidationError",
    "RendererUnavailableError",
    "TransportUnavailableError",
    "TreeRenderError",
    "BaseTransport",
    "AiohttpTransport",
    "HttpxTransport",
    "TransportResponse",
    "BaseTreeRenderer",
    "CompositeTreeRenderer",
    "DominateTreeRenderer",
    "HtmlProtocolTreeRenderer",
    "UnavailableTreeRenderer",
    "is_tree_value",
    "render_to_html",
    "set_default_tree_renderer",
]
