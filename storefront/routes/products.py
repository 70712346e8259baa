"""
FastAPI routes for the product catalog.

Serves the static Catalog Store to clients that do not embed it.

Endpoints:
- GET /api/products: Catalog, optionally filtered by category
"""

from typing import Optional

from fastapi import APIRouter, Query

from storefront.schemas.products import ProductListResponse
from storefront.services.catalog_service import filter_by_category, get_categories
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["products"]
)


@router.get(
    "/products",
    response_model=ProductListResponse,
    status_code=200,
    summary="List catalog products",
    description=(
        "Returns the catalog in its fixed order together with the category tabs. "
        "Pass `category` to filter; 'All' or no value returns everything."
    ),
)
async def list_products(
    category: Optional[str] = Query(
        None,
        description="Category tag to filter by (e.g. 'Phone'); 'All' disables the filter",
    ),
) -> ProductListResponse:
    """List products, optionally filtered by category."""
    logger.debug(f"GET /api/products called with category={category}")

    return ProductListResponse(
        products=filter_by_category(category),
        categories=get_categories(),
    )
