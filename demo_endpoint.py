"""
Quick demo script to run the recommendation API locally.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

from storefront.config import settings

if __name__ == "__main__":
    port = settings.PORT
    print("=" * 60)
    print("Starting Storefront Recommendation API")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print(f"   - Liveness:      GET  http://localhost:{port}/")
    print(f"   - Health Check:  GET  http://localhost:{port}/health")
    print(f"   - Products:      GET  http://localhost:{port}/api/products")
    print(f"   - Recommend:     POST http://localhost:{port}/api/recommend")
    print(f"   - API Docs:           http://localhost:{port}/docs")
    print()
    print("📝 Test with curl:")
    print(f'   curl -X POST "http://localhost:{port}/api/recommend" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"preferences": "cheap laptop for school", "products": [...]}\'')
    print()
    print("🖥️  Catalog page:")
    print("   streamlit run storefront/ui/app.py")
    print()
    print("=" * 60)
    print(f"Starting server on http://localhost:{port}")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "storefront.main:app",
        host="0.0.0.0",
        port=port,
        reload=True,
        log_level="info"
    )
