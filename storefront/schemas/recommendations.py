"""
Pydantic schemas for the recommendation endpoint.

These models define the request/response contract for POST /api/recommend.
Both request fields are optional at the schema level so the endpoint can
answer a missing field with 400 {"error": ...} instead of a generic 422.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from storefront.schemas.products import Product


# ============================================================================
# REQUEST MODELS
# ============================================================================

class RecommendationRequest(BaseModel):
    """
    Request to resolve free-text preferences into catalog recommendations.

    The client submits the full catalog snapshot it is displaying; the
    server recommends only from that snapshot.
    """
    preferences: Optional[str] = Field(
        None,
        description="User's free-text description of what they want",
        examples=["I want a phone under $500 for gaming"]
    )
    products: Optional[List[Product]] = Field(
        None,
        description="Catalog snapshot to recommend from"
    )

    @field_validator("preferences")
    @classmethod
    def strip_preferences(cls, v: Optional[str]) -> Optional[str]:
        """Treat whitespace-only preferences the same as a missing value."""
        if v is not None and v.strip() == "":
            return None
        return v


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RecommendationResponse(BaseModel):
    """
    Response for POST /api/recommend.

    Returned for every completed resolution, whether the products came from
    the model or from keyword matching. An empty list is a valid answer.
    """
    recommendations: List[Product] = Field(
        default_factory=list,
        description="Recommended products, a subset of the submitted catalog"
    )


class ErrorResponse(BaseModel):
    """Body of a 4xx/5xx response."""
    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Both 'preferences' and 'products' are required."]
    )
