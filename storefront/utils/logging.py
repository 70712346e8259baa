"""
Logging utilities for the Storefront backend.

Provides standardized logger configuration.

Rules:
- NEVER log the Gemini API key or other secrets
- Truncate free-text user preferences (first 50 characters) before logging
- Log which resolution strategy produced a result, not the full catalog

Acceptable logging:
- High-level events (e.g., "Calling Gemini for recommendations")
- Non-sensitive metadata (e.g., "products=6, strategy=fallback")
- Error types and sanitized error messages
"""

import logging
from typing import Optional

from storefront.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to the LOG_LEVEL setting)

    Returns:
        Configured logger instance

    Usage:
        >>> from storefront.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def preview(text: str, limit: int = 50) -> str:
    """Shorten free text for log lines."""
    text = text or ""
    return text if len(text) <= limit else f"{text[:limit]}..."
