"""
Unit Tests for Screenshot Creation
==================================

Tests for ``create_screenshot``: endpoint, options and result defaults.
"""

import pytest

from web2pdf.core.exceptions import InputValidationError, RendererUnavailableError
from web2pdf.core.screenshot import create_screenshot
from web2pdf.core.tree_renderer import render_to_html
from web2pdf.models.schemas import CreateScreenshotOptions, ScreenshotResult

from tests.utils.helpers import make_error_response, make_success_response
from tests.utils.mocks import StubTree


class TestCreateScreenshotValidation:
    """Test input validation happens before any request."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "sources",
        [
            {},
            {"html": ""},
            {"url": "https://example.com", "tree": StubTree("div")},
        ],
    )
    async def test_requires_exactly_one_source(self, client, mock_transport, sources):
        with pytest.raises(InputValidationError):
            await create_screenshot(client, **sources)
        assert mock_transport.call_count == 0

    @pytest.mark.asyncio
    async def test_custom_css_with_url_rejected(self, client, mock_transport):
        with pytest.raises(InputValidationError, match="not with url"):
            await create_screenshot(client, url="https://example.com", custom_css="*{}")
        assert mock_transport.call_count == 0

    @pytest.mark.asyncio
    async def test_tree_without_renderer(self, client_without_renderer, mock_transport):
        tree = StubTree("div")

        with pytest.raises(InputValidationError):
            await create_screenshot(client_without_renderer, tree=tree)
        with pytest.raises(RendererUnavailableError):
            await render_to_html(tree, client_without_renderer.tree_renderer)
        assert mock_transport.call_count == 0


class TestCreateScreenshotRequest:
    """Test the request sent to the service."""

    @pytest.mark.asyncio
    async def test_endpoint_and_options(self, client, mock_transport):
        await create_screenshot(
            client,
            url="https://example.com",
            screenshot_options={
                "type": "jpeg",
                "full_page": True,
                "capture_beyond_viewport": False,
                "viewport": {"width": 1280, "height": 720},
            },
        )

        request = mock_transport.last_request
        assert request.url == "https://api.test.local/api/create/screen-shot"
        assert request.json == {
            "url": "https://example.com",
            "screenshotOptions": {
                "type": "jpeg",
                "fullPage": True,
                "captureBeyondViewport": False,
                "viewport": {"width": 1280, "height": 720},
            },
        }

    @pytest.mark.asyncio
    async def test_html_with_css(self, client, mock_transport):
        options = CreateScreenshotOptions(html="<p>x</p>", custom_css="p { color: blue }")
        await create_screenshot(client, options)
        assert mock_transport.last_request.json == {
            "html": "<p>x</p>",
            "customCss": "p { color: blue }",
        }

    @pytest.mark.asyncio
    async def test_camel_case_options_accepted(self, client, mock_transport):
        await create_screenshot(
            client, html="<p>x</p>", screenshot_options={"omitBackground": True}
        )
        assert mock_transport.last_request.json["screenshotOptions"] == {"omitBackground": True}

    @pytest.mark.asyncio
    async def test_invalid_viewport_rejected(self, client, mock_transport):
        with pytest.raises(InputValidationError):
            await create_screenshot(
                client, html="<p>x</p>", screenshot_options={"viewport": {"width": 0}}
            )
        assert mock_transport.call_count == 0


class TestCreateScreenshotResult:
    """Test mapping of the service response."""

    @pytest.mark.asyncio
    async def test_default_content_type(self, client, mock_transport):
        mock_transport.response = make_success_response(b"\x89PNG", content_type=None)

        result = await create_screenshot(client, html="<p>x</p>")

        assert isinstance(result, ScreenshotResult)
        assert result.data == b"\x89PNG"
        assert result.content_type == "image/png"
        assert "rate_limit_remaining" not in result.model_fields_set
        assert "rate_limit_limit" not in result.model_fields_set

    @pytest.mark.asyncio
    async def test_service_content_type_and_rate_limits(self, client, mock_transport):
        mock_transport.response = make_success_response(
            b"RIFF", "image/webp", remaining="0", limit="50"
        )

        result = await create_screenshot(client, url="https://example.com")

        assert result.content_type == "image/webp"
        assert result.rate_limit_remaining == 0
        assert result.rate_limit_limit == 50

    @pytest.mark.asyncio
    async def test_unparseable_error_body(self, client, mock_transport):
        from web2pdf.core.exceptions import APIRequestError

        mock_transport.response = make_error_response(500, "Internal Server Error", raw_body=b"oops")

        with pytest.raises(APIRequestError) as exc_info:
            await create_screenshot(client, url="https://example.com")

        assert exc_info.value.body == {"message": "Internal Server Error"}
        assert exc_info.value.api_error.message == "Internal Server Error"
