"""Pytest configuration and shared fixtures.

This configuration provides:
1. Custom markers (unit, api)
2. Automatic asyncio marking of async tests
3. A testing-environment Settings instance
4. A freshly built host application per test (isolated service registry)
"""

import inspect
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.core.config import Settings
from src.core.enums import Environment
from src.main import create_app
from src.modules.catalog.domain.product import Product

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP tests against the host application")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the testing environment (JSON logs, no API docs)."""
    return Settings(environment=Environment.TESTING, api_base_url="http://testserver/")


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; ``bind`` returns the same mock so calls stay visible."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def app(test_settings):
    """Host application built from the default module registry."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """Test client that lets server errors surface as 500 responses."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def make_product():
    """Factory building valid Products through Product.create."""

    def _make(name: str = "Widget", price: str = "9.99") -> Product:
        return Product.create(name, Decimal(price)).value.entity

    return _make
