#!/usr/bin/env python3
"""
Startup script for the recommender UI
"""

import uvicorn

from core.config import settings

if __name__ == "__main__":
    print(f"Starting recommender UI on {settings.ui_host}:{settings.ui_port}")
    print(f"Open your browser to http://localhost:{settings.ui_port}")
    print(f"Recommendations are served by the API at {settings.ui_api_base}")

    uvicorn.run(
        "app.main:app",
        host=settings.ui_host,
        port=settings.ui_port,
        reload=settings.debug,
        log_level="info"
    )
