"""
Catalog page controller.

Owns the CatalogViewState transitions; the rendering layer (ui/app.py) only
reads the state and forwards user actions here.
"""

import logging
from typing import List, Optional, Sequence

from storefront.schemas.products import Product
from storefront.services.catalog_service import get_catalog, get_categories
from storefront.ui.client import RecommendationClient, TransportFailure
from storefront.ui.state import CatalogViewState
from storefront.utils.constants import ALL_CATEGORIES

logger = logging.getLogger(__name__)

TRANSPORT_ALERT = "Something went wrong while fetching recommendations. Please try again."


class CatalogController:
    """User actions for the catalog page."""

    def __init__(
        self,
        client: RecommendationClient,
        catalog: Optional[Sequence[Product]] = None,
        state: Optional[CatalogViewState] = None,
    ):
        self.client = client
        self.catalog: List[Product] = list(catalog) if catalog is not None else get_catalog()
        self.state = state if state is not None else CatalogViewState()

    @property
    def categories(self) -> List[str]:
        return get_categories(self.catalog)

    def displayed_products(self) -> List[Product]:
        return self.state.displayed_products(self.catalog)

    def select_category(self, category: str) -> None:
        self.state.selected_category = category or ALL_CATEGORIES

    def set_preference(self, preference: str) -> None:
        self.state.preference = preference or ""

    def submit(self) -> None:
        """
        Send the current preference and the full catalog for recommendations.

        Blank preferences are ignored. On success with a recommendation list
        the displayed set is replaced and the category tab resets to "All";
        on a transport failure an alert is raised and prior results are kept.
        """
        state = self.state
        if not state.preference.strip() or state.loading:
            return

        state.loading = True
        state.status = "loading"
        state.alert = None

        try:
            recommendations = self.client.recommend(state.preference, self.catalog)
        except TransportFailure as e:
            logger.warning(f"Could not reach recommendation API: {e}")
            state.alert = TRANSPORT_ALERT
            state.status = "failed"
            return
        finally:
            state.loading = False

        if recommendations is not None:
            state.recommendations = recommendations
            state.selected_category = ALL_CATEGORIES
        state.status = "resolved"

    def acknowledge(self) -> None:
        """Dismiss the alert/result notice and return to idle."""
        self.state.alert = None
        self.state.status = "idle"

    def clear(self) -> None:
        """Drop the recommendation result and preference; show the full catalog."""
        state = self.state
        state.recommendations = None
        state.preference = ""
        state.selected_category = ALL_CATEGORIES
        state.alert = None
        state.status = "idle"
