"""
Main FastAPI application for the tool recommender API.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

# Import route modules
from api.routes import (
    recommend_router,
    system_router
)

# Import enhanced logging
from core.config import settings
from core.exceptions import InvalidQueryError
from core.logging_config import get_logger
from api.middleware import add_logging_middleware

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Integration Tool Recommender API",
    description="Recommends catalog tools that integrate with the automation platform, ranked by Claude against a free-text workflow need.",
    version="1.0.0",
    openapi_tags=[
        {
            "name": "Recommendations",
            "description": "Tool recommendation endpoints"
        },
        {
            "name": "System",
            "description": "Health and configuration status"
        }
    ]
)


@app.on_event("startup")
async def startup_event():
    """Report configuration problems when the server starts"""
    logger.info("🚀 Starting recommender API server...")
    logger.info(f"📚 Catalog source: {settings.catalog_url}")

    if not settings.anthropic_api_key:
        logger.error("❌ ANTHROPIC_API_KEY is missing - every recommendation request will fail")
    else:
        logger.info(f"🤖 Claude model: {settings.anthropic_model}")

    logger.info("🎉 Recommender API server startup complete!")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("👋 Recommender API server shutdown complete!")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed request bodies get the same error body as a blank query"""
    logger.error(f"❌ Rejected request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=InvalidQueryError.status_code,
        content={"error": InvalidQueryError.default_message}
    )


# Add logging middleware first (for request tracking)
add_logging_middleware(app)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=False,  # Must be False when allow_origins=["*"]
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all route modules
app.include_router(recommend_router)
app.include_router(system_router)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "message": "Integration Tool Recommender API",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc"
    }
