"""
Test Helpers
============

Helper functions for building service responses.
"""

import json
from typing import Any, Dict, Optional

from web2pdf.core.transport import TransportResponse


def make_success_response(
    body: bytes = b"%PDF-1.7 mock",
    content_type: Optional[str] = "application/pdf",
    remaining: Optional[str] = None,
    limit: Optional[str] = None,
) -> TransportResponse:
    """Build a 200 response with optional content-type and rate-limit headers."""
    headers: Dict[str, str] = {}
    if content_type is not None:
        headers["Content-Type"] = content_type
    if remaining is not None:
        headers["X-RateLimit-Remaining"] = remaining
    if limit is not None:
        headers["X-RateLimit-Limit"] = limit
    return TransportResponse.build(200, "OK", body, headers)


def make_error_response(
    status: int, status_text: str, payload: Any = None, raw_body: Optional[bytes] = None
) -> TransportResponse:
    """Build an error response with a JSON payload or a raw body."""
    if raw_body is None:
        raw_body = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return TransportResponse.build(status, status_text, raw_body, {"Content-Type": "application/json"})
