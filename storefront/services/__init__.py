"""
Service layer for the Storefront backend.

Contains business logic that:
- Holds the static Catalog Store
- Resolves free-text preferences into recommendations (Gemini + keyword fallback)
- Defines the error types routes map to HTTP responses

Services act as the glue between routes (HTTP layer) and the LLM.
"""

from .catalog_service import (
    PRODUCT_CATALOG,
    ensure_unique_ids,
    filter_by_category,
    get_catalog,
    get_categories,
)
from .errors import InvalidRequestError, UpstreamFailure
from .recommendation_service import (
    keyword_fallback,
    parse_recommended_ids,
    resolve_recommendations,
    strip_code_fences,
)

__all__ = [
    "PRODUCT_CATALOG",
    "ensure_unique_ids",
    "filter_by_category",
    "get_catalog",
    "get_categories",
    "InvalidRequestError",
    "UpstreamFailure",
    "keyword_fallback",
    "parse_recommended_ids",
    "resolve_recommendations",
    "strip_code_fences",
]
