"""
Catalog Store

Static, in-memory product catalog shared by the API and the presentation
layer. Built once at import time and never mutated.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from storefront.schemas.products import Product
from storefront.services.errors import InvalidRequestError
from storefront.utils.constants import ALL_CATEGORIES

logger = logging.getLogger(__name__)


PRODUCT_CATALOG: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Budget Phone X1",
        category="Phone",
        price=299,
        image="/images/Budget Phone X1.jpg",
        description="Entry-level smartphone with decent camera and battery life.",
    ),
    Product(
        id=2,
        name="Pro Phone Z5",
        category="Phone",
        price=799,
        image="/images/Pro Phone Z5.jpg",
        description="Flagship smartphone with OLED display and excellent performance.",
    ),
    Product(
        id=3,
        name="Smartwatch Lite",
        category="Watch",
        price=149,
        image="/images/Smartwatch Lite.jpg",
        description="Lightweight smartwatch with fitness tracking features.",
    ),
    Product(
        id=4,
        name="Gaming Laptop G15",
        category="Laptop",
        price=1200,
        image="/images/Gaming Laptop G15.jpg",
        description="High-performance laptop suitable for gaming and heavy workloads.",
    ),
    Product(
        id=5,
        name="Everyday Laptop E3",
        category="Laptop",
        price=550,
        image="/images/Everyday Laptop E3.jpg",
        description="Affordable laptop for students and office work.",
    ),
    Product(
        id=6,
        name="Wireless Earbuds",
        category="Audio",
        price=89,
        image="/images/Wireless Earbuds.jpg",
        description="Noise-cancelling wireless earbuds with long battery life.",
    ),
)


def ensure_unique_ids(products: Iterable[Product]) -> None:
    """
    Check that no two products share an identifier.

    Raises:
        InvalidRequestError: If a duplicate identifier is found.
    """
    seen = set()
    for product in products:
        if product.id in seen:
            raise InvalidRequestError(f"Duplicate product id in catalog: {product.id}")
        seen.add(product.id)


def get_catalog() -> List[Product]:
    """Return the full catalog in its fixed order."""
    return list(PRODUCT_CATALOG)


def get_categories(products: Optional[Iterable[Product]] = None) -> List[str]:
    """
    List the category tabs for a catalog.

    Returns "All" followed by each distinct category in the order it first
    appears in the catalog.
    """
    if products is None:
        products = PRODUCT_CATALOG

    categories = [ALL_CATEGORIES]
    for product in products:
        if product.category not in categories:
            categories.append(product.category)
    return categories


def filter_by_category(
    category: Optional[str],
    products: Optional[Iterable[Product]] = None,
) -> List[Product]:
    """
    Filter a catalog by category tag.

    "All", None or an empty string disable the filter. An unknown category
    yields an empty list. Catalog order is preserved.
    """
    if products is None:
        products = PRODUCT_CATALOG

    if not category or category == ALL_CATEGORIES:
        return list(products)

    return [product for product in products if product.category == category]


ensure_unique_ids(PRODUCT_CATALOG)
logger.debug(f"Catalog loaded with {len(PRODUCT_CATALOG)} products")
