"""
System routes for health checks and system status.
"""

from datetime import datetime, timezone
from fastapi import APIRouter
from typing import Dict, Any
import logging

from core.catalog.service import CatalogService
from core.config import settings
from services.recommender.ai_client import AnthropicStructuredClient

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/system", tags=["System"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": _now(),
        "version": "1.0.0"
    }


@router.get("/ai-client/status")
async def get_ai_client_status() -> Dict[str, Any]:
    """Get AI client configuration, without secrets"""
    client = AnthropicStructuredClient.from_settings(settings)
    return {
        "status": "success",
        "ai_client": client.get_model_info(),
        "timestamp": _now()
    }


@router.get("/catalog/status")
async def get_catalog_status() -> Dict[str, Any]:
    """Check that the catalog host is reachable"""
    catalog_service = CatalogService.from_settings(settings)
    reachable = await catalog_service.health_check()
    if not reachable:
        logger.warning(f"Catalog host unreachable: {settings.catalog_url}")
    return {
        "status": "success" if reachable else "degraded",
        "catalog": {
            "url": settings.catalog_url,
            "reachable": reachable
        },
        "timestamp": _now()
    }
