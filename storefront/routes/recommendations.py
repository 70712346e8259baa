"""
FastAPI routes for the recommendation endpoint.

This module exposes the HTTP boundary of the recommendation flow. The
endpoint is public (no authentication) and stateless: the client sends the
preference text together with the catalog snapshot it is displaying.

Endpoints:
- POST /api/recommend: Resolve preferences into recommended products
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from storefront.schemas.recommendations import (
    ErrorResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from storefront.services.recommendation_service import resolve_recommendations
from storefront.utils.logging import preview

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/api",
    tags=["recommendations"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/recommend",
    response_model=RecommendationResponse,
    status_code=200,
    summary="Recommend products for a free-text preference",
    responses={
        400: {"model": ErrorResponse, "description": "preferences or products missing/empty"},
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
    description="""
    Picks products from the submitted catalog that match the user's preference.

    **Authentication:** None

    **Resolution:**
    1. Gemini is asked for 1-5 matching product ids
    2. Returned ids are mapped back onto the submitted catalog (catalog order)
    3. If Gemini is unreachable or answers with non-JSON text, keyword
       matching picks up to 3 products instead

    Any completed resolution returns 200, even with an empty list.
    """
)
async def recommend_endpoint(request: RecommendationRequest):
    """
    Recommendation endpoint.

    - Parse/Validate: Pydantic RecommendationRequest + service-level checks
    - Call LLM: Single Gemini call via service layer (fallback inside)
    - Map output: RecommendationResponse
    """
    product_count = len(request.products) if request.products else 0
    logger.info(
        f"POST /api/recommend called with {product_count} products, "
        f"preferences='{preview(request.preferences or '')}'"
    )

    try:
        recommendations = await resolve_recommendations(
            preferences=request.preferences,
            products=request.products,
        )

    except ValueError as e:
        logger.warning(f"Invalid recommendation request: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )

    except Exception as e:
        logger.error(f"Error resolving recommendations: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal_error"},
        )

    logger.info(f"Returning {len(recommendations)} recommendations")
    return RecommendationResponse(recommendations=recommendations)
