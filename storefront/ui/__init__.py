"""
Presentation layer for the product catalog.

- state.py: CatalogViewState (category tab, preference, last result)
- client.py: RecommendationClient for POST /api/recommend
- controller.py: CatalogController, the user actions
- app.py: streamlit page (optional "ui" extra)
"""
