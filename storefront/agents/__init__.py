"""
AI Components for the Storefront backend.

Recommendation System (Single-Shot LLM)
   - Uses Gemini via the Google Gen AI SDK to pick products for a free-text preference
   - NOT an ADK agent - one prompt, one response, no tools
   - Service layer in: storefront/services/recommendation_service.py
"""

from storefront.agents.recommendation import (
    RECOMMENDATION_DIRECTIVE,
    build_recommendation_prompt,
)

__all__ = [
    "RECOMMENDATION_DIRECTIVE",
    "build_recommendation_prompt",
]
