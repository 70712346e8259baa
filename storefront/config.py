"""
Configuration module for the Storefront recommendation backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # HTTP server
    PORT: int = int(os.getenv("PORT", "5000"))

    # Google Gemini API (GEMINI_API_KEY preferred, GOOGLE_API_KEY accepted)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "") or os.getenv("GOOGLE_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Upper bound for the single model call made per recommendation request
    RECOMMENDATION_TIMEOUT_SECONDS: float = float(
        os.getenv("RECOMMENDATION_TIMEOUT_SECONDS", "20")
    )

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only honoured in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    # Where the presentation layer reaches the API
    STOREFRONT_API_URL: str = os.getenv("STOREFRONT_API_URL", "http://localhost:5000")

    # Directory product image paths ("/images/...") are resolved against
    STOREFRONT_IMAGE_DIR: str = os.getenv("STOREFRONT_IMAGE_DIR", "public")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "GEMINI_API_KEY": cls.GEMINI_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

        if cls.RECOMMENDATION_TIMEOUT_SECONDS <= 0:
            raise ValueError("RECOMMENDATION_TIMEOUT_SECONDS must be greater than 0")

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash: recommendations fall back to keyword matching
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   Recommendations will use keyword matching until an API key is configured.")
        else:
            raise
