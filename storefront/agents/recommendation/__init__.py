"""
Recommendation System - Single-Shot LLM Architecture

This module contains the prompt templates for the Gemini-based recommendation system.

Architecture:
- Pattern: Single-shot LLM with keyword-matching fallback
- Model: Gemini 2.5 Flash
- Output: JSON text {"recommendedIds": [...]}

The service layer is in:
- storefront/services/recommendation_service.py

Prompt templates are in:
- storefront/agents/recommendation/prompts.py
"""

from storefront.agents.recommendation.prompts import (
    RECOMMENDATION_DIRECTIVE,
    RECOMMENDATION_DIRECTIVE_VERSION,
    RECOMMENDED_IDS_KEY,
    build_recommendation_prompt,
)

__all__ = [
    "RECOMMENDATION_DIRECTIVE",
    "RECOMMENDATION_DIRECTIVE_VERSION",
    "RECOMMENDED_IDS_KEY",
    "build_recommendation_prompt",
]
