"""
Error types raised while producing tool recommendations.

Each error carries the public message and HTTP status the API returns for it.
"""

from typing import Optional


class RecommenderError(Exception):
    """Base exception for all recommender errors."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        """Initialize the error.

        Args:
            message: Human-readable message safe to return to the caller
            details: Technical details for the logs only
        """
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class MissingCredentialError(RecommenderError):
    """The model API credential is not configured."""

    default_message = "ANTHROPIC_API_KEY is missing."


class InvalidQueryError(RecommenderError):
    """The user query is missing, not text, or blank."""

    status_code = 400
    default_message = "Missing or empty query."


class CatalogUnavailableError(RecommenderError):
    """The catalog could not be fetched, parsed, or held no tool array."""

    default_message = "Failed to load tools list."


class NoValidToolsInCatalogError(RecommenderError):
    """The catalog was fetched but no record had a usable name."""

    default_message = "No valid tools found in the data"


class AIProcessingFailedError(RecommenderError):
    """The model call failed or returned data outside the expected schema."""

    default_message = "AI processing failed"
