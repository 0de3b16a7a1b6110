"""
Pydantic Models and Schemas
===========================

Data models for client configuration, PDF/screenshot options, request bodies,
service error payloads and operation results.

Option and request models carry the service's camelCase names as aliases;
they are always serialized ``by_alias`` with unset fields left out.
"""

import re
from typing import Optional, List, Dict, Any, Literal, Mapping, Union
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from web2pdf.config.settings import DEFAULT_BASE_URL, Web2PdfSettings, get_settings
from web2pdf.core.exceptions import ConfigurationError


PdfFormat = Literal[
    "letter", "legal", "tabloid", "ledger", "a0", "a1", "a2", "a3", "a4", "a5", "a6"
]

ScreenshotType = Literal["png", "jpeg", "webp"]

RATE_LIMIT_REMAINING_HEADER = "x-ratelimit-remaining"
RATE_LIMIT_LIMIT_HEADER = "x-ratelimit-limit"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class WireModel(BaseModel):
    """Base for models sent to the service."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready dict the service expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Configuration
class Web2PdfConfig(BaseModel):
    """Credentials and service address for one client."""

    model_config = ConfigDict(frozen=True)

    api_id: str = Field(..., min_length=1, description="API id")
    secret_key: str = Field(..., min_length=1, description="Secret key", repr=False)
    base_url: str = Field(DEFAULT_BASE_URL, description="Service base URL")

    @field_validator("base_url", mode="before")
    @classmethod
    def normalize_base_url(cls, v: Optional[str]) -> str:
        """Fall back to the production address and drop a trailing slash."""
        if not v:
            return DEFAULT_BASE_URL
        return v.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Optional[Web2PdfSettings] = None) -> "Web2PdfConfig":
        """Build a configuration from environment settings."""
        settings = settings or get_settings()
        if not settings.api_id or not settings.secret_key:
            raise ConfigurationError(
                "Web2PDF credentials are not configured. "
                "Set WEB2PDF_API_ID and WEB2PDF_SECRET_KEY or pass a Web2PdfConfig."
            )
        return cls(
            api_id=settings.api_id,
            secret_key=settings.secret_key,
            base_url=settings.base_url,
        )


# PDF Options
class PdfMargin(WireModel):
    """Page margins as CSS lengths."""

    top: Optional[str] = None
    right: Optional[str] = None
    bottom: Optional[str] = None
    left: Optional[str] = None


class PdfOptions(WireModel):
    """PDF generation options."""

    format: Optional[PdfFormat] = Field(None, description="Paper format")
    landscape: Optional[bool] = Field(None, description="Landscape orientation")
    print_background: Optional[bool] = Field(None, alias="printBackground")
    margin: Optional[PdfMargin] = None
    display_header_footer: Optional[bool] = Field(None, alias="displayHeaderFooter")
    header_template: Optional[str] = Field(None, alias="headerTemplate")
    footer_template: Optional[str] = Field(None, alias="footerTemplate")


# Screenshot Options
class ScreenshotViewport(WireModel):
    """Viewport size for screenshots."""

    width: Optional[int] = Field(None, gt=0, description="Viewport width in pixels")
    height: Optional[int] = Field(None, gt=0, description="Viewport height in pixels")


class ScreenshotOptions(WireModel):
    """Screenshot generation options."""

    type: Optional[ScreenshotType] = Field(None, description="Image type")
    full_page: Optional[bool] = Field(None, alias="fullPage")
    omit_background: Optional[bool] = Field(None, alias="omitBackground")
    capture_beyond_viewport: Optional[bool] = Field(None, alias="captureBeyondViewport")
    viewport: Optional[ScreenshotViewport] = None


# Caller Input
class CreateOptionsBase(BaseModel):
    """Source selection shared by both operations.

    Exactly one of ``url``, ``html`` or ``tree`` is expected; that rule is
    enforced when the operation runs so it surfaces as an
    ``InputValidationError`` before any request is sent.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    url: Optional[str] = Field(None, description="Page URL to render")
    html: Optional[str] = Field(None, description="Inline HTML to render")
    tree: Any = Field(None, description="Component tree rendered to HTML locally")
    custom_css: Optional[str] = Field(None, description="Extra CSS for html/tree sources")


class CreatePdfOptions(CreateOptionsBase):
    """Input for PDF creation."""

    pdf_options: Optional[PdfOptions] = None


class CreateScreenshotOptions(CreateOptionsBase):
    """Input for screenshot creation."""

    screenshot_options: Optional[ScreenshotOptions] = None


# Request Bodies
class CreatePdfRequest(WireModel):
    """Request body for ``/api/create/pdf``."""

    url: Optional[str] = None
    html: Optional[str] = None
    custom_css: Optional[str] = Field(None, alias="customCss")
    pdf_options: Optional[PdfOptions] = Field(None, alias="pdfOptions")


class CreateScreenshotRequest(WireModel):
    """Request body for ``/api/create/screen-shot``."""

    url: Optional[str] = None
    html: Optional[str] = None
    custom_css: Optional[str] = Field(None, alias="customCss")
    screenshot_options: Optional[ScreenshotOptions] = Field(None, alias="screenshotOptions")


# Error Models
class ApiErrorItem(BaseModel):
    """A single field error reported by the service."""

    path: str
    message: str


class ApiErrorDetails(BaseModel):
    """Extra error context such as quota counters."""

    errors: Optional[List[ApiErrorItem]] = None
    remaining: Optional[int] = None
    limit: Optional[int] = None
    used: Optional[int] = None
    error: Optional[str] = None


class ApiError(BaseModel):
    """Error payload returned by the service on failure."""

    success: bool = False
    error: Optional[str] = None
    message: Optional[str] = None
    details: Optional[ApiErrorDetails] = None

    @classmethod
    def parse_lenient(cls, body: Any) -> Optional["ApiError"]:
        """Return an ``ApiError`` for dict bodies of the right shape, else None."""
        if not isinstance(body, dict):
            return None
        try:
            return cls.model_validate(body)
        except ValidationError:
            return None


# Rate Limits
def parse_int_header(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a header value.

    Trailing text is ignored, so ``"4.5"`` reads as 4; values that do not
    start with a number give None.
    """
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


class RateLimitInfo(BaseModel):
    """Advisory rate-limit counters reported by the service."""

    remaining: Optional[int] = None
    limit: Optional[int] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo":
        """Read counters from case-insensitive response headers."""
        return cls(
            remaining=parse_int_header(headers.get(RATE_LIMIT_REMAINING_HEADER)),
            limit=parse_int_header(headers.get(RATE_LIMIT_LIMIT_HEADER)),
        )


# Results
class OperationResult(BaseModel):
    """Binary payload returned by a successful operation.

    Rate-limit fields are only set when the service reported them, so
    ``model_dump(exclude_unset=True)`` omits them otherwise.
    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., description="Rendered payload", repr=False)
    content_type: str = Field(..., description="Payload media type")
    rate_limit_remaining: Optional[int] = Field(None, description="Calls left in the window")
    rate_limit_limit: Optional[int] = Field(None, description="Calls allowed in the window")

    @property
    def size(self) -> int:
        """Payload size in bytes."""
        return len(self.data)

    def save(self, path: Union[str, Path]) -> Path:
        """Write the payload to ``path`` and return it."""
        target = Path(path)
        target.write_bytes(self.data)
        return target


class PdfResult(OperationResult):
    """Result of PDF creation."""

    pass


class ScreenshotResult(OperationResult):
    """Result of screenshot creation."""

    pass
