"""
Pydantic schemas for catalog products.

A Product is immutable for the lifetime of the process; the same model is
used for the static catalog, for the catalog snapshot clients submit with a
recommendation request, and for the recommendations returned.
"""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt


class Product(BaseModel):
    """
    A single catalog entry.

    Identifiers are unique within a catalog and stable across requests.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Budget Phone X1",
                "category": "Phone",
                "price": 299,
                "image": "/images/Budget Phone X1.jpg",
                "description": "Entry-level smartphone with decent camera and battery life.",
            }
        },
    )

    id: int = Field(..., description="Unique, stable product identifier")
    name: str = Field(..., description="Display name", min_length=1)
    category: str = Field(..., description="Category tag (e.g. 'Phone', 'Laptop')")
    price: Union[NonNegativeInt, NonNegativeFloat] = Field(
        ...,
        description="Price, never negative; integers are kept as integers"
    )
    image: str = Field("", description="Opaque image path")
    description: str = Field("", description="Free-text product description")


class ProductListResponse(BaseModel):
    """Response model for GET /api/products."""
    products: List[Product] = Field(
        ...,
        description="Catalog entries matching the category filter, in catalog order"
    )
    categories: List[str] = Field(
        ...,
        description="'All' followed by every category in first-appearance order",
        examples=[["All", "Phone", "Watch", "Laptop", "Audio"]]
    )
