"""
Storefront: product catalog API with Gemini-assisted recommendations.
"""
