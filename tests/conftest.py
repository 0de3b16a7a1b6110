"""
Test Configuration
==================

Pytest configuration with fixtures for client, transport and renderer tests.
"""

import pytest
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from web2pdf.config.settings import Web2PdfSettings
from web2pdf.core.client import Web2PdfClient
from web2pdf.core.tree_renderer import UnavailableTreeRenderer, set_default_tree_renderer
from web2pdf.models.schemas import Web2PdfConfig

from tests.utils.mocks import MockTransport, StubTreeRenderer


# Test settings override
class TestSettings(Web2PdfSettings):
    """Test-specific settings."""

    __test__ = False

    api_id: str = "test-api-id"
    secret_key: str = "test-secret"
    base_url: str = "https://api.test.local"
    environment: str = "testing"
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="WEB2PDF_TEST_")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture
def override_settings(test_settings: TestSettings):
    """Route ``get_settings()`` to the test settings."""
    with patch("web2pdf.core.client.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture(autouse=True)
def reset_default_tree_renderer():
    """Keep a registered renderer from leaking between tests."""
    yield
    set_default_tree_renderer(None)


@pytest.fixture
def config() -> Web2PdfConfig:
    return Web2PdfConfig(
        api_id="test-api-id", secret_key="test-secret", base_url="https://api.test.local"
    )


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def stub_renderer() -> StubTreeRenderer:
    return StubTreeRenderer()


@pytest.fixture
def client(config: Web2PdfConfig, mock_transport: MockTransport, stub_renderer) -> Web2PdfClient:
    """Client with a mock transport and the stub tree renderer."""
    return Web2PdfClient(config, transport=mock_transport, tree_renderer=stub_renderer)


@pytest.fixture
def client_without_renderer(config: Web2PdfConfig, mock_transport: MockTransport) -> Web2PdfClient:
    """Client whose tree rendering capability is absent."""
    return Web2PdfClient(config, transport=mock_transport, tree_renderer=UnavailableTreeRenderer())
