"""
View state for the catalog page.

One CatalogViewState per browser session. Transitions:
idle -> loading -> (resolved | failed) -> idle
"""

import os
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from storefront.schemas.products import Product
from storefront.services.catalog_service import filter_by_category
from storefront.utils.constants import ALL_CATEGORIES

ViewStatus = Literal["idle", "loading", "resolved", "failed"]


@dataclass
class CatalogViewState:
    """UI state: category tab, preference box, last recommendation result."""

    selected_category: str = ALL_CATEGORIES
    preference: str = ""
    recommendations: Optional[List[Product]] = None
    loading: bool = False
    status: ViewStatus = "idle"
    alert: Optional[str] = None

    def displayed_products(self, catalog: Sequence[Product]) -> List[Product]:
        """Recommendations when present, otherwise the category-filtered catalog."""
        if self.recommendations is not None:
            return list(self.recommendations)
        return filter_by_category(self.selected_category, catalog)

    @property
    def showing_recommendations(self) -> bool:
        return self.recommendations is not None

    def recommendation_summary(self) -> Optional[str]:
        """Caption shown above recommendation results; None when browsing the catalog."""
        if self.recommendations is None:
            return None
        return f"Found {len(self.recommendations)} recommended products based on your request."


def local_image_path(product: Product, image_dir: str) -> Optional[str]:
    """
    Resolve a product's image path ("/images/x.jpg") under image_dir.

    Returns None when the product has no image or the file does not exist.
    """
    if not product.image:
        return None
    path = os.path.join(image_dir, product.image.lstrip("/"))
    return path if os.path.isfile(path) else None
