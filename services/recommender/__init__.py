"""
Recommender Package

Ranks catalog tools against a free-text workflow need using Claude.
"""

from .engine import RecommendationEngine, select_recommendations, resolve_recommendations
from .prompt_builder import PromptBuilder
from .ai_client import StructuredGenerator, AnthropicStructuredClient
from .models import (
    ModelRecommendation,
    ModelRecommendationSet,
    Recommendation,
    RecommendationResult,
    RECOMMENDATION_SCHEMA,
    RECOMMENDATION_TOOL_NAME,
)

__all__ = [
    'RecommendationEngine',
    'select_recommendations',
    'resolve_recommendations',
    'PromptBuilder',
    'StructuredGenerator',
    'AnthropicStructuredClient',
    'ModelRecommendation',
    'ModelRecommendationSet',
    'Recommendation',
    'RecommendationResult',
    'RECOMMENDATION_SCHEMA',
    'RECOMMENDATION_TOOL_NAME',
]
