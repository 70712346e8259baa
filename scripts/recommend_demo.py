#!/usr/bin/env python3
"""
Recommendation Demo Script

Runs the recommendation resolver locally against the built-in catalog,
without starting the API server or the catalog page.

With GEMINI_API_KEY set the model-assisted path is used; without it (or
with --offline) the keyword fallback answers.

Usage:
    python scripts/recommend_demo.py
    python scripts/recommend_demo.py --preferences "cheap laptop for school"
    python scripts/recommend_demo.py --preferences "wireless audio" --offline
    python scripts/recommend_demo.py --suite
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from storefront.schemas.products import Product
from storefront.services import recommendation_service
from storefront.services.catalog_service import get_catalog
from storefront.services.errors import InvalidRequestError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


SUITE_PREFERENCES = [
    "I want a phone under $500 for gaming",
    "cheap laptop for school",
    "something to track my workouts",
    "noise cancelling audio for the commute",
    "a gift",
]


def print_result(preferences: str, recommendations: List[Product]):
    """Pretty print the recommendation result."""
    print("\n" + "=" * 60)
    print(f"PREFERENCES: {preferences}")
    print("=" * 60)

    if not recommendations:
        print("\n❌ No matching products\n")
        return

    print(f"\n✅ Found {len(recommendations)} recommendation(s):\n")
    for i, product in enumerate(recommendations, 1):
        print(f"--- Product #{i} ---")
        print(f"  Id:        {product.id}")
        print(f"  Name:      {product.name}")
        print(f"  Category:  {product.category}")
        print(f"  Price:     ${product.price:,.2f}")
        print(f"  About:     {product.description}")
        print()


async def run_query(preferences: str) -> List[Product]:
    """Resolve a single preference against the built-in catalog."""
    try:
        recommendations = await recommendation_service.resolve_recommendations(
            preferences=preferences,
            products=get_catalog(),
        )
    except InvalidRequestError as e:
        print(f"\n⚠️  Request rejected: {e}\n")
        return []

    print_result(preferences, recommendations)
    return recommendations


async def run_suite():
    """Run a set of predefined preferences."""
    for preferences in SUITE_PREFERENCES:
        await run_query(preferences)


def main():
    parser = argparse.ArgumentParser(
        description="Try the recommendation resolver locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/recommend_demo.py --preferences "cheap laptop for school"
  python scripts/recommend_demo.py --preferences "phone with a great camera" --offline
  python scripts/recommend_demo.py --suite
        """
    )

    parser.add_argument(
        "--preferences", "-p",
        type=str,
        help="Free-text preference (e.g., 'cheap laptop for school')"
    )
    parser.add_argument(
        "--suite",
        action="store_true",
        help="Run the predefined preference suite"
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip Gemini and use keyword matching only"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.offline:
        # No client means every request takes the keyword fallback
        recommendation_service.settings.GEMINI_API_KEY = ""
    elif not recommendation_service.settings.GEMINI_API_KEY:
        print("\n⚠️  GEMINI_API_KEY not set; results come from keyword matching.")
        print("   Get your API key at: https://aistudio.google.com/app/apikey\n")

    if args.suite:
        asyncio.run(run_suite())
    else:
        asyncio.run(run_query(args.preferences or SUITE_PREFERENCES[0]))


if __name__ == "__main__":
    main()
