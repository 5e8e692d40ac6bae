"""
API models for the tool recommender
"""

from pydantic import BaseModel, Field
from typing import Any, List, Optional

from core.catalog.models import Tool


class RecommendRequest(BaseModel):
    # Left untyped so a non-string query gets the same error as a blank one
    query: Optional[Any] = Field(default=None, description="Free-text description of the workflow need")


class RecommendationOut(BaseModel):
    tool: Tool
    relevance_score: float = Field(..., ge=0, le=1)
    reasoning: str


class RecommendationsResponse(BaseModel):
    recommendations: List[RecommendationOut]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
