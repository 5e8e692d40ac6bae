"""
Recommendation routes.
"""

import asyncio
import logging
from typing import Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.models import (
    RecommendRequest,
    RecommendationsResponse,
    MessageResponse,
    ErrorResponse,
)
from core.catalog.service import CatalogService
from core.config import settings
from core.exceptions import RecommenderError
from services.recommender.ai_client import AnthropicStructuredClient
from services.recommender.engine import RecommendationEngine
from services.recommender.prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Recommendations"])


def get_recommendation_engine() -> RecommendationEngine:
    """Build an engine wired to the configured catalog and Claude credential"""
    return RecommendationEngine(
        generator=AnthropicStructuredClient.from_settings(settings),
        catalog_service=CatalogService.from_settings(settings),
        prompt_builder=PromptBuilder(platform_name=settings.platform_name),
        min_relevance=settings.min_relevance,
        no_match_message=settings.no_match_message,
    )


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/recommend",
    response_model=Union[RecommendationsResponse, MessageResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
async def recommend(
    request: RecommendRequest,
    engine: RecommendationEngine = Depends(get_recommendation_engine),
):
    """Recommend catalog tools for a free-text workflow need"""
    logger.info("=== Recommendation request started ===")
    try:
        result = await asyncio.wait_for(
            engine.recommend(request.query),
            timeout=settings.request_timeout_seconds,
        )
    except RecommenderError as e:
        logger.error(f"Recommendation failed: {e}")
        return error_response(e.message, e.status_code)
    except asyncio.TimeoutError:
        logger.error(f"Recommendation exceeded {settings.request_timeout_seconds}s budget")
        return error_response("Request timed out", 504)
    except Exception as e:
        logger.exception(f"Unexpected error while recommending tools: {e}")
        return error_response("Internal server error", 500)

    return result.to_response()
