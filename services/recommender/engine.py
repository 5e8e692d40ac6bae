"""
Recommendation Engine

Turns a free-text workflow need into a ranked list of catalog tools:
fetch the catalog, prompt the model with the closed candidate set, then keep
only recommendations that name a real catalog entry.
"""

import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from core.catalog.models import CatalogSnapshot
from core.catalog.service import CatalogService
from core.config import DEFAULT_NO_MATCH_MESSAGE
from core.exceptions import (
    AIProcessingFailedError,
    InvalidQueryError,
    MissingCredentialError,
)
from .ai_client import StructuredGenerator
from .models import (
    ModelRecommendation,
    ModelRecommendationSet,
    Recommendation,
    RecommendationResult,
    RECOMMENDATION_SCHEMA,
    RECOMMENDATION_TOOL_NAME,
)
from .prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)

DEFAULT_MIN_RELEVANCE = 0.3


def resolve_recommendations(
    raw_recommendations: List[ModelRecommendation],
    snapshot: CatalogSnapshot,
) -> List[Recommendation]:
    """Drop recommendations whose tool name is not in the catalog"""
    resolved = []
    for index, rec in enumerate(raw_recommendations, start=1):
        logger.debug(f"Processing recommendation {index}: {rec.tool_name!r}")

        if not rec.tool_name or rec.tool_name.strip() in ("", "undefined"):
            logger.warning(f"Recommendation {index} has undefined tool_name: {rec!r}")
            continue

        tool = snapshot.get(rec.tool_name)
        if tool is None:
            logger.warning(f"Tool not found in catalog: {rec.tool_name!r}")
            logger.debug(f"Available keys sample: {list(snapshot.lookup.keys())[:10]}")
            continue

        resolved.append(Recommendation(
            tool=tool,
            relevance_score=rec.relevance_score,
            reasoning=rec.reasoning,
        ))
    return resolved


def select_recommendations(
    raw_recommendations: List[ModelRecommendation],
    snapshot: CatalogSnapshot,
    min_relevance: float = DEFAULT_MIN_RELEVANCE,
    no_match_message: str = DEFAULT_NO_MATCH_MESSAGE,
) -> RecommendationResult:
    """
    Validate, rank and gate the model's recommendations.

    The threshold only decides whether anything is returned: once one
    recommendation reaches it, lower-scored ones are returned alongside it.
    """
    resolved = resolve_recommendations(raw_recommendations, snapshot)
    # sorted() is stable, equal scores keep the model's order
    ranked = sorted(resolved, key=lambda rec: rec.relevance_score, reverse=True)
    logger.info(f"Valid recommendations: {len(ranked)} of {len(raw_recommendations)}")

    if not any(rec.relevance_score >= min_relevance for rec in ranked):
        logger.info(f"No recommendation reached relevance {min_relevance}")
        return RecommendationResult(message=no_match_message)

    return RecommendationResult(recommendations=ranked)


class RecommendationEngine:
    """
    Recommends catalog tools for a user query.

    Responsibilities:
    - Refusing work when the model credential is missing
    - Validating the query before any network call
    - Loading a fresh catalog snapshot per request
    - Calling the model with a strict output schema
    - Filtering, ranking and gating the model output
    """

    def __init__(
        self,
        generator: StructuredGenerator,
        catalog_service: CatalogService,
        prompt_builder: Optional[PromptBuilder] = None,
        min_relevance: float = DEFAULT_MIN_RELEVANCE,
        no_match_message: str = DEFAULT_NO_MATCH_MESSAGE,
    ):
        self.generator = generator
        self.catalog_service = catalog_service
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.min_relevance = min_relevance
        self.no_match_message = no_match_message

    @staticmethod
    def validate_query(query: Any) -> str:
        if not isinstance(query, str) or not query.strip():
            logger.error(f"Invalid query: {query!r}")
            raise InvalidQueryError()
        return query.strip()

    async def request_recommendations(self, prompt: str) -> ModelRecommendationSet:
        """Run the model call and enforce the output schema"""
        raw = await self.generator.generate_object(
            prompt,
            schema=RECOMMENDATION_SCHEMA,
            schema_name=RECOMMENDATION_TOOL_NAME,
            description="Submit the ranked tool recommendations",
        )
        try:
            return ModelRecommendationSet.model_validate(raw)
        except ValidationError as e:
            logger.error(f"Model output does not match the recommendation schema: {e}")
            raise AIProcessingFailedError(details=f"Schema violation: {e.error_count()} errors") from e

    async def recommend(self, query: Any) -> RecommendationResult:
        if not self.generator.is_configured():
            raise MissingCredentialError()

        query = self.validate_query(query)
        logger.info(f"User query: {query!r}")

        snapshot = await self.catalog_service.load_snapshot()
        prompt = self.prompt_builder.build_prompt(query, snapshot)
        model_output = await self.request_recommendations(prompt)

        return select_recommendations(
            model_output.recommendations,
            snapshot,
            min_relevance=self.min_relevance,
            no_match_message=self.no_match_message,
        )
