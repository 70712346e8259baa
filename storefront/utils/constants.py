"""
Recommendation limits and UI constants.

The model is asked for 1-5 products; the keyword fallback never returns
more than 3.
"""

MODEL_MAX_RECOMMENDATIONS = 5

FALLBACK_MAX_RECOMMENDATIONS = 3

# Fallback tokens of this length or shorter are ignored ("a", "to", "in", ...)
FALLBACK_MIN_TOKEN_LENGTH = 3

# Pseudo-category meaning "no category filter"
ALL_CATEGORIES = "All"
