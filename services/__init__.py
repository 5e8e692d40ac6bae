"""
Services package for the tool recommender.
"""

from .recommender import RecommendationEngine

__all__ = [
    "RecommendationEngine",
]
