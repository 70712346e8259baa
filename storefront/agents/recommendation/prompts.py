"""
Recommendation Prompt Templates

Contains the directive and the prompt builder for the Recommendation Service.

Architecture:
- Pattern: Single-shot LLM (one text-completion call per request)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Output: JSON object {"recommendedIds": [...]} parsed from the response text

The directive and the response shape form a versioned contract. Any change
to either must bump RECOMMENDATION_DIRECTIVE_VERSION; the parser in
storefront/services/recommendation_service.py treats anything that does not
match the current shape as an upstream failure.
"""

import json
from typing import Iterable

from storefront.schemas.products import Product
from storefront.utils.constants import MODEL_MAX_RECOMMENDATIONS

RECOMMENDATION_DIRECTIVE_VERSION = "v1"

# Key the model must use for the list of chosen product ids
RECOMMENDED_IDS_KEY = "recommendedIds"

# =============================================================================
# DIRECTIVE
# =============================================================================

RECOMMENDATION_DIRECTIVE = f"""You are a product recommendation engine.

You will receive:
- A list of products
- A user preference text

Your task:
- Pick 1 - {MODEL_MAX_RECOMMENDATIONS} products that match the user's needs
- Consider factors like category, price, and product description

Important:
- Only return valid JSON
- Format must be exactly:
  {{ "{RECOMMENDED_IDS_KEY}": [1, 2, 3] }}"""


# =============================================================================
# PROMPT BUILDER
# =============================================================================

def serialize_catalog(products: Iterable[Product]) -> str:
    """Render the catalog as indented JSON for the prompt."""
    return json.dumps(
        [product.model_dump(mode="json") for product in products],
        indent=2,
        ensure_ascii=False,
    )


def build_recommendation_prompt(preferences: str, products: Iterable[Product]) -> str:
    """
    Build the single prompt sent to Gemini.

    The prompt is the directive, followed by the user's preference text and
    the serialized catalog.

    Args:
        preferences: User's free-text preferences (already validated)
        products: Catalog snapshot to choose from

    Returns:
        str: Prompt text ready to be sent as the request contents
    """
    return f"""{RECOMMENDATION_DIRECTIVE}

User preferences:
{preferences}

Products:
{serialize_catalog(products)}
"""
