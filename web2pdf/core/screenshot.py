"""
Screenshot Creation
===================

Capture an image of a URL, inline HTML or a component tree.
"""

from typing import Any, Optional, Union, cast

from web2pdf.core.builder import OperationSpec, coerce_options, run_operation
from web2pdf.core.client import Web2PdfClient
from web2pdf.models.schemas import (
    CreateScreenshotOptions,
    CreateScreenshotRequest,
    ScreenshotResult,
)

SCREENSHOT_SPEC = OperationSpec(
    name="screenshot",
    endpoint="/api/create/screen-shot",
    default_content_type="image/png",
    options_field="screenshot_options",
    request_model=CreateScreenshotRequest,
    result_model=ScreenshotResult,
)


async def create_screenshot(
    client: Web2PdfClient,
    options: Optional[Union[CreateScreenshotOptions, dict]] = None,
    **kwargs: Any,
) -> ScreenshotResult:
    """Create a screenshot from URL, HTML, or a component tree."""
    create_options = coerce_options(CreateScreenshotOptions, options, kwargs)
    return cast(ScreenshotResult, await run_operation(client, SCREENSHOT_SPEC, create_options))
