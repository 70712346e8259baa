"""
Pytest configuration for Storefront backend tests.

Sets up test environment and global fixtures.
"""
import os
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
# No real key: without an explicit mock every request takes the keyword fallback
os.environ["GEMINI_API_KEY"] = ""
os.environ["GOOGLE_API_KEY"] = ""

from storefront.schemas.products import Product  # noqa: E402
from storefront.services.catalog_service import get_catalog  # noqa: E402


@pytest.fixture
def catalog():
    """The six-product sample catalog."""
    return get_catalog()


@pytest.fixture
def catalog_payload(catalog):
    """The sample catalog as a JSON request body list."""
    return [product.model_dump(mode="json") for product in catalog]


@pytest.fixture
def make_product():
    """Factory for ad-hoc products."""
    def _make(product_id: int, name: str = "Item", category: str = "Misc",
              price: float = 10.0, description: str = "") -> Product:
        return Product(
            id=product_id,
            name=name,
            category=category,
            price=price,
            image=f"/images/{name}.jpg",
            description=description,
        )
    return _make


@pytest.fixture
def make_gemini_client():
    """
    Factory for a mock Gemini client.

    The mock exposes client.aio.models.generate_content as an AsyncMock that
    either returns a response whose .text is `text` or raises `error`.
    """
    def _make(text: Optional[str] = None, error: Optional[Exception] = None) -> MagicMock:
        mock_client = MagicMock()
        if error is not None:
            mock_client.aio.models.generate_content = AsyncMock(side_effect=error)
        else:
            mock_response = MagicMock()
            mock_response.text = text
            mock_response.candidates = []
            mock_client.aio.models.generate_content = AsyncMock(return_value=mock_response)
        return mock_client
    return _make
