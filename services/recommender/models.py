"""
Data models for the recommendation engine.
"""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from core.catalog.models import Tool


RECOMMENDATION_TOOL_NAME = "submit_recommendations"

# JSON schema the model output must satisfy
RECOMMENDATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "recommendations": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "tool_name": {
                        "type": "string",
                        "description": "Exact tool name copied from the numbered list"
                    },
                    "relevance_score": {
                        "type": "number",
                        "minimum": 0,
                        "maximum": 1,
                        "description": "How well the tool matches the request, 0 to 1"
                    },
                    "reasoning": {
                        "type": "string",
                        "description": "Why this tool fits the request"
                    }
                },
                "required": ["tool_name", "relevance_score", "reasoning"]
            }
        }
    },
    "required": ["recommendations"]
}


class ModelRecommendation(BaseModel):
    """One recommendation as returned by the model, before validation"""

    # No coercion: "0.92" or true as a score is a schema violation
    model_config = ConfigDict(strict=True)

    tool_name: str = Field(..., description="Tool name chosen by the model")
    relevance_score: float = Field(..., ge=0, le=1, description="Relevance score (0.0 to 1.0)")
    reasoning: str = Field(..., description="Model's explanation of the match")


class ModelRecommendationSet(BaseModel):
    """Structured output of the model call"""

    recommendations: List[ModelRecommendation]


class Recommendation(BaseModel):
    """A recommendation resolved against the catalog"""

    tool: Tool = Field(..., description="Catalog entry the recommendation refers to")
    relevance_score: float = Field(..., ge=0, le=1)
    reasoning: str


class RecommendationResult(BaseModel):
    """Outcome of one recommendation request"""

    recommendations: List[Recommendation] = Field(default_factory=list)
    message: Optional[str] = Field(
        default=None,
        description="Guidance returned instead of recommendations when no confident match exists"
    )

    @property
    def has_confident_match(self) -> bool:
        return self.message is None

    def to_response(self) -> Dict[str, Any]:
        if self.message is not None:
            return {"message": self.message}
        return {"recommendations": [rec.model_dump() for rec in self.recommendations]}
