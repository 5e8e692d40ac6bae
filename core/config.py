"""
Configuration settings for the integration tool recommender.
"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


DEFAULT_NO_MATCH_MESSAGE = (
    "Sorry we couldn't recommend a tool for this use case. "
    "You can submit your use case to tanay@claybootcamp.com or check out the whole "
    "list of tools at https://remarkable-lily-32f8dd.netlify.app/"
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Anthropic API settings
    anthropic_api_key: Optional[str] = Field(
        default=None,
        description="Anthropic API key for Claude LLM access"
    )
    anthropic_model: str = Field(
        default="claude-sonnet-4-5",
        description="Claude model used to rank catalog tools"
    )
    anthropic_base_url: str = Field(
        default="https://api.anthropic.com/v1/messages",
        description="Anthropic Messages API endpoint"
    )
    anthropic_max_tokens: int = Field(
        default=2000,
        description="Maximum tokens for the recommendation response"
    )
    llm_timeout_seconds: float = Field(
        default=60.0,
        description="HTTP timeout in seconds for the Claude API call"
    )

    # Catalog settings
    catalog_url: str = Field(
        default="https://brown-sarita-51.tiiny.site/clay-tools.json",
        description="Remote JSON document holding the tool catalog"
    )
    catalog_fetch_timeout: float = Field(
        default=10.0,
        description="HTTP timeout in seconds for the catalog fetch"
    )
    catalog_fetch_attempts: int = Field(
        default=2,
        description="Attempts made when the catalog host is unreachable"
    )
    platform_name: str = Field(
        default="Clay",
        description="Automation platform the catalog tools integrate with"
    )

    # Recommendation settings
    min_relevance: float = Field(
        default=0.3,
        description="Minimum relevance score at least one recommendation must reach"
    )
    no_match_message: str = Field(
        default=DEFAULT_NO_MATCH_MESSAGE,
        description="Guidance message returned when no confident match is found"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Wall-clock budget in seconds for one recommendation request"
    )

    # Application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    # API settings
    api_host: str = Field(
        default="0.0.0.0",
        description="API server host"
    )
    api_port: int = Field(
        default=8001,
        description="API server port"
    )

    # UI settings
    ui_host: str = Field(
        default="127.0.0.1",
        description="UI server host"
    )
    ui_port: int = Field(
        default=8000,
        description="UI server port"
    )
    ui_api_base: str = Field(
        default="http://localhost:8001",
        description="Base URL the UI uses to reach the recommendation API"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Create global settings instance
settings = Settings()
