"""
PDF Creation
============

Create a PDF from a URL, inline HTML or a component tree.
"""

from typing import Any, Optional, Union, cast

from web2pdf.core.builder import OperationSpec, coerce_options, run_operation
from web2pdf.core.client import Web2PdfClient
from web2pdf.models.schemas import CreatePdfOptions, CreatePdfRequest, PdfResult

PDF_SPEC = OperationSpec(
    name="pdf",
    endpoint="/api/create/pdf",
    default_content_type="application/pdf",
    options_field="pdf_options",
    request_model=CreatePdfRequest,
    result_model=PdfResult,
)


async def create_pdf(
    client: Web2PdfClient,
    options: Optional[Union[CreatePdfOptions, dict]] = None,
    **kwargs: Any,
) -> PdfResult:
    """
    Create a PDF from URL, HTML, or a component tree.

    Args:
        client: Configured Web2PDF client
        options: ``CreatePdfOptions`` or an equivalent dict
        **kwargs: Option fields, overriding those in ``options``

    Returns:
        PdfResult with the PDF bytes and rate-limit counters

    Example:
        result = await create_pdf(client, html="<h1>Invoice</h1>", pdf_options={"format": "a4"})
    """
    create_options = coerce_options(CreatePdfOptions, options, kwargs)
    return cast(PdfResult, await run_operation(client, PDF_SPEC, create_options))
