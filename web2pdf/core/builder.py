"""
Operation Builder
=================

Shared pipeline behind PDF and screenshot creation:

1. validate that exactly one source (url, html, tree) is given
2. render a component tree to HTML when one is given
3. reject custom CSS combined with a URL source
4. assemble the request body without empty fields
5. POST it to the operation's endpoint
6. map the response into a typed result

Validation happens before any network call and nothing is retried.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import ValidationError

from web2pdf.config.logging import get_logger
from web2pdf.core.client import Web2PdfClient
from web2pdf.core.exceptions import InputValidationError
from web2pdf.core.tree_renderer import is_tree_value, render_to_html
from web2pdf.models.schemas import (
    CreateOptionsBase,
    OperationResult,
    RateLimitInfo,
    WireModel,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class OperationSpec:
    """Endpoint and defaults that distinguish one operation from another."""

    name: str
    endpoint: str
    default_content_type: str
    options_field: str
    request_model: Type[WireModel]
    result_model: Type[OperationResult]


def coerce_options(
    model: Type[CreateOptionsBase], options: Any, overrides: Dict[str, Any]
) -> CreateOptionsBase:
    """Accept an options model, a dict or keyword arguments."""
    if isinstance(options, model) and not overrides:
        return options

    if isinstance(options, CreateOptionsBase):
        data = {name: getattr(options, name) for name in options.model_fields_set}
    else:
        data = dict(options or {})
    data.update(overrides)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InputValidationError(f"Invalid {model.__name__}: {e}") from e


def is_provided(value: Any) -> bool:
    """None and empty strings count as not provided."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value)
    # childless trees can be falsy
    return True


def validate_sources(options: CreateOptionsBase) -> None:
    """Require exactly one non-empty source."""
    sources = [s for s in (options.url, options.html, options.tree) if is_provided(s)]
    if len(sources) != 1:
        raise InputValidationError("Exactly one of url, html, or tree must be provided")


async def resolve_html(client: Web2PdfClient, options: CreateOptionsBase) -> Optional[str]:
    """Return the HTML to send, rendering the tree source when there is one."""
    if not is_provided(options.tree):
        return options.html or None

    renderer = client.tree_renderer
    if not is_tree_value(options.tree, renderer):
        raise InputValidationError(
            "Invalid component tree provided. Make sure a tree renderer is available "
            "and the tree is a valid element."
        )
    return await render_to_html(options.tree, renderer)


def validate_custom_css(options: CreateOptionsBase) -> None:
    if options.custom_css and options.url:
        raise InputValidationError("custom_css can only be used with html or tree, not with url")


def build_request_body(
    spec: OperationSpec, options: CreateOptionsBase, html: Optional[str]
) -> Dict[str, Any]:
    """Assemble the JSON body, leaving out every field that was not given."""
    fields: Dict[str, Any] = {}
    if options.url:
        fields["url"] = options.url
    if html:
        fields["html"] = html
    if options.custom_css:
        fields["custom_css"] = options.custom_css

    operation_options = getattr(options, spec.options_field, None)
    if operation_options is not None:
        fields[spec.options_field] = operation_options

    return spec.request_model(**fields).to_wire()


def map_response(spec: OperationSpec, data: bytes, headers: Mapping[str, str]) -> OperationResult:
    """Build the typed result; rate-limit fields are only set when reported."""
    fields: Dict[str, Any] = {
        "data": data,
        "content_type": headers.get("content-type") or spec.default_content_type,
    }

    rate_limit = RateLimitInfo.from_headers(headers)
    if rate_limit.remaining is not None:
        fields["rate_limit_remaining"] = rate_limit.remaining
    if rate_limit.limit is not None:
        fields["rate_limit_limit"] = rate_limit.limit

    return spec.result_model(**fields)


async def run_operation(
    client: Web2PdfClient, spec: OperationSpec, options: CreateOptionsBase
) -> OperationResult:
    """Validate, build, send and map one operation."""
    validate_sources(options)
    html = await resolve_html(client, options)
    validate_custom_css(options)

    body = build_request_body(spec, options, html)
    data, headers = await client.request(spec.endpoint, body)

    result = map_response(spec, data, headers)
    logger.debug(
        "Operation completed",
        operation=spec.name,
        content_type=result.content_type,
        size=result.size,
        rate_limit_remaining=result.rate_limit_remaining,
    )
    return result
