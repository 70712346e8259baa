"""
HTTP client used by the catalog page to reach POST /api/recommend.

Wraps an httpx.Client so the page can talk to a deployed API or, in tests,
to the app through FastAPI's TestClient (itself an httpx.Client).
"""

import logging
from typing import List, Optional, Sequence

import httpx
from pydantic import ValidationError

from storefront.config import settings
from storefront.schemas.products import Product

logger = logging.getLogger(__name__)

RECOMMEND_PATH = "/api/recommend"


class TransportFailure(Exception):
    """Raised when the recommendation API cannot be reached or rejects the request."""


class RecommendationClient:
    """Thin client for the recommendation endpoint."""

    def __init__(self, http_client: Optional[httpx.Client] = None, timeout: float = 60.0):
        if http_client is None:
            http_client = httpx.Client(base_url=settings.STOREFRONT_API_URL, timeout=timeout)
        self._http = http_client

    def recommend(
        self,
        preferences: str,
        products: Sequence[Product],
    ) -> Optional[List[Product]]:
        """
        Ask the API for recommendations.

        Returns:
            The recommended products, or None if the response carried no
            "recommendations" field.

        Raises:
            TransportFailure: On connection errors, timeouts, non-2xx
                responses, a body that is not JSON, or recommendations
                that are not a list of valid products.
        """
        payload = {
            "preferences": preferences,
            "products": [product.model_dump(mode="json") for product in products],
        }

        try:
            response = self._http.post(RECOMMEND_PATH, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Recommendation request failed: {e}")
            raise TransportFailure(str(e)) from e
        except ValueError as e:
            logger.error(f"Recommendation response was not JSON: {e}")
            raise TransportFailure("Invalid response from recommendation API") from e

        raw_recommendations = body.get("recommendations") if isinstance(body, dict) else None
        if raw_recommendations is None:
            return None

        if not isinstance(raw_recommendations, list):
            logger.error("Recommendation response field 'recommendations' is not a list")
            raise TransportFailure("Invalid response from recommendation API")

        try:
            return [Product.model_validate(item) for item in raw_recommendations]
        except ValidationError as e:
            logger.error(f"Recommendation response has malformed products: {e}")
            raise TransportFailure("Invalid response from recommendation API") from e

    def close(self) -> None:
        self._http.close()
