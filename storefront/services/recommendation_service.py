"""
Recommendation Service - Gemini with Keyword Fallback

This service turns a free-text preference plus a catalog snapshot into an
ordered subset of that catalog.

Architecture:
- Pattern: Single-shot LLM (one Gemini call per request, no retries)
- Model: Gemini 2.5 Flash (GEMINI_MODEL)
- API: Google Gen AI Python SDK (google-genai), async client
- Timeout: RECOMMENDATION_TIMEOUT_SECONDS around the single call
- Output: JSON text {"recommendedIds": [...]}, optionally wrapped in a code fence

Resolution strategies:
1. Model-assisted: ask Gemini for ids, keep the catalog entries whose id
   was returned (catalog order, at most 5). A well-formed answer with no
   usable ids is an empty result, not a failure.
2. Keyword fallback: used only when the model-assisted path fails outright
   (no client, network error, timeout, non-JSON text). Substring matching of
   preference words against name/description/category, at most 3 results.

resolve_recommendations never raises for a well-formed request.
"""

import asyncio
import json
import logging
import re
from typing import Any, List, Optional, Sequence, Tuple

from google import genai
from google.genai import types

from storefront.agents.recommendation.prompts import (
    RECOMMENDED_IDS_KEY,
    build_recommendation_prompt,
)
from storefront.config import settings
from storefront.schemas.products import Product
from storefront.services.catalog_service import ensure_unique_ids
from storefront.services.errors import InvalidRequestError, UpstreamFailure
from storefront.utils.constants import (
    FALLBACK_MAX_RECOMMENDATIONS,
    FALLBACK_MIN_TOKEN_LENGTH,
    MODEL_MAX_RECOMMENDATIONS,
)
from storefront.utils.logging import preview

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Both 'preferences' and 'products' are required."

# Opening fence with optional language tag, or closing fence
_CODE_FENCE_PATTERN = re.compile(r"^```[\w-]*\s*|\s*```$")

# Initialize Gemini client (lazy initialization)
_gemini_client = None


def _get_gemini_client():
    """
    Lazy initialization of Gemini client.
    Uses the Google Gen AI SDK.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    api_key = settings.GEMINI_API_KEY

    if not api_key:
        logger.warning(
            "GEMINI_API_KEY not configured. Recommendations will use keyword matching. "
            "Please set GEMINI_API_KEY in your .env file."
        )
        return None

    try:
        _gemini_client = genai.Client(api_key=api_key)
        logger.info("Gemini client initialized successfully for recommendations")
        return _gemini_client
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        return None


# =============================================================================
# RESPONSE PARSING
# =============================================================================

def strip_code_fences(text: str) -> str:
    """
    Remove a surrounding markdown code fence from model output.

    "```json\\n{...}\\n```" becomes "{...}". Text that does not start with a
    fence is only trimmed.
    """
    text = (text or "").strip()
    if text.startswith("```"):
        text = _CODE_FENCE_PATTERN.sub("", text).strip()
    return text


def normalize_product_id(value: Any) -> Optional[str]:
    """
    Map a product id to a canonical string so 3, 3.0, "3" and " 3 " compare equal.

    Returns None for values that can never be a product id (booleans,
    non-integral numbers, containers).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else None
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return None
        try:
            return str(int(candidate))
        except ValueError:
            pass
        try:
            number = float(candidate)
        except ValueError:
            return candidate
        return str(int(number)) if number.is_integer() else None
    return None


def parse_recommended_ids(text: str) -> List[str]:
    """
    Extract normalized product ids from Gemini's response text.

    Returns:
        Distinct normalized ids in the order the model listed them. Empty when
        the JSON object has no list under "recommendedIds".

    Raises:
        UpstreamFailure: If the text is not JSON or not a JSON object.
    """
    content = strip_code_fences(text)

    try:
        response_data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error(f"Gemini returned non-JSON output: {e}")
        logger.debug(f"Raw content: {content[:500]}")
        raise UpstreamFailure("Gemini returned non-JSON output") from e

    if not isinstance(response_data, dict):
        raise UpstreamFailure(
            f"Expected a JSON object from Gemini, got {type(response_data).__name__}"
        )

    raw_ids = response_data.get(RECOMMENDED_IDS_KEY)
    if not isinstance(raw_ids, list):
        logger.info(f"Gemini response has no '{RECOMMENDED_IDS_KEY}' list")
        return []

    ids: List[str] = []
    for raw_id in raw_ids:
        normalized = normalize_product_id(raw_id)
        if normalized is not None and normalized not in ids:
            ids.append(normalized)
    return ids


def select_by_ids(products: Sequence[Product], ids: Sequence[str]) -> List[Product]:
    """
    Keep the catalog entries whose id appears in ids.

    Follows catalog order, not the order of ids. Unknown ids are dropped and
    the result is capped at MODEL_MAX_RECOMMENDATIONS.
    """
    wanted = set(ids)
    selected = [
        product for product in products
        if normalize_product_id(product.id) in wanted
    ]
    return selected[:MODEL_MAX_RECOMMENDATIONS]


# =============================================================================
# KEYWORD FALLBACK
# =============================================================================

def _preference_tokens(preferences: str) -> List[str]:
    return [
        word for word in preferences.lower().split()
        if len(word) >= FALLBACK_MIN_TOKEN_LENGTH
    ]


def keyword_fallback(preferences: str, products: Sequence[Product]) -> List[Product]:
    """
    Deterministic keyword matching used when Gemini is unavailable.

    A product matches when any preference word longer than two characters is
    a substring of its lower-cased name, description and category. Returns at
    most FALLBACK_MAX_RECOMMENDATIONS products in catalog order.
    """
    tokens = _preference_tokens(preferences)
    if not tokens:
        return []

    matches = []
    for product in products:
        combined_text = f"{product.name} {product.description} {product.category}".lower()
        if any(token in combined_text for token in tokens):
            matches.append(product)

    return matches[:FALLBACK_MAX_RECOMMENDATIONS]


# =============================================================================
# GEMINI CALL
# =============================================================================

def _extract_response_text(response) -> str:
    """Get the text of a Gemini response, falling back to the first text part."""
    text = getattr(response, "text", None)
    if isinstance(text, str) and text.strip():
        return text

    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            part_text = getattr(part, "text", None)
            if isinstance(part_text, str) and part_text.strip():
                return part_text

    return ""


async def _call_gemini(prompt: str) -> str:
    """
    Make the single Gemini call for a request and return its raw text.

    Raises:
        UpstreamFailure: On missing client, SDK/network error, timeout or
            empty output.
    """
    client = _get_gemini_client()
    if client is None:
        raise UpstreamFailure("Gemini client not available")

    config = types.GenerateContentConfig(
        temperature=0.2,
        response_mime_type="application/json",
    )

    try:
        logger.info(f"Calling Gemini API ({settings.GEMINI_MODEL}) for recommendations...")
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.GEMINI_MODEL,
                contents=prompt,
                config=config,
            ),
            timeout=settings.RECOMMENDATION_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError as e:
        logger.error(
            f"Gemini API timed out after {settings.RECOMMENDATION_TIMEOUT_SECONDS}s"
        )
        raise UpstreamFailure("Gemini API timed out") from e
    except Exception as e:
        logger.error(f"Gemini API error: {e}")
        raise UpstreamFailure(f"Gemini API error: {e}") from e

    text = _extract_response_text(response)
    if not text:
        logger.error("Empty text in Gemini response")
        raise UpstreamFailure("Empty response from Gemini")

    return text


async def _recommend_with_model(
    preferences: str,
    products: Sequence[Product],
) -> List[Product]:
    prompt = build_recommendation_prompt(preferences, products)
    text = await _call_gemini(prompt)
    recommended_ids = parse_recommended_ids(text)
    logger.info(f"Gemini recommended ids: {recommended_ids}")
    return select_by_ids(products, recommended_ids)


# =============================================================================
# PUBLIC API
# =============================================================================

def _validate_request(
    preferences: Optional[str],
    products: Optional[Sequence[Product]],
) -> Tuple[str, List[Product]]:
    """
    Check the inbound request before any external call.

    Raises:
        InvalidRequestError: If preferences is blank or the catalog is empty
            or has duplicate ids.
    """
    if not isinstance(preferences, str) or not preferences.strip():
        raise InvalidRequestError(MISSING_FIELDS_MESSAGE)
    if not products:
        raise InvalidRequestError(MISSING_FIELDS_MESSAGE)

    catalog = list(products)
    ensure_unique_ids(catalog)
    return preferences.strip(), catalog


async def resolve_recommendations(
    preferences: Optional[str],
    products: Optional[Sequence[Product]],
) -> List[Product]:
    """
    Resolve a free-text preference into recommended catalog products.

    This function:
    1. Validates the request (no external call on failure)
    2. Asks Gemini for matching product ids (one call, bounded by a timeout)
    3. Maps the ids back onto the catalog
    4. Falls back to keyword matching if step 2 or 3 fails

    Args:
        preferences: User's free-text preference (non-blank)
        products: Catalog snapshot with unique ids (non-empty)

    Returns:
        Recommended products, a subset of products in catalog order. May be empty.

    Raises:
        InvalidRequestError: If preferences or products are missing/invalid.
    """
    preferences, catalog = _validate_request(preferences, products)

    logger.info(
        f"resolve_recommendations called with {len(catalog)} products, "
        f"preferences='{preview(preferences)}'"
    )

    try:
        recommendations = await _recommend_with_model(preferences, catalog)
        strategy = "model"
    except UpstreamFailure as e:
        logger.warning(f"Model-assisted recommendation failed ({e}); using keyword fallback")
        recommendations = keyword_fallback(preferences, catalog)
        strategy = "fallback"

    logger.info(
        f"Returning {len(recommendations)} recommendations (strategy={strategy})"
    )
    return recommendations
