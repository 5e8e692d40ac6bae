"""
Pytest configuration and fixtures for the tool recommender tests.
"""
import pytest
from unittest.mock import Mock, AsyncMock
from fastapi.testclient import TestClient

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from api.main import app
from api.routes.recommend import get_recommendation_engine
from core.config import DEFAULT_NO_MATCH_MESSAGE
from core.catalog.fetchers import StaticCatalogFetcher
from core.catalog.normalizer import CatalogNormalizer
from core.catalog.service import CatalogService
from services.recommender.engine import RecommendationEngine
from services.recommender.prompt_builder import PromptBuilder


@pytest.fixture
def sample_catalog_document():
    """Catalog document in the shape served by the catalog host."""
    return {
        "tools": [
            {
                "Name Of Tool": "EmailCheck Pro",
                "Description": "bulk email verification",
                "Url": "https://emailcheck.example.com",
                "GTM Use Cases": "Email verification, List cleaning , Deliverability",
                "Clay Integration Overview": "Verify emails from a Clay column",
            },
            {
                "Name Of Tool": "LeadFinder",
                "Description": "Find qualified prospects",
                "Url": "https://leadfinder.example.com",
                "GTM Use Cases": "Prospecting, Lead generation",
            },
            {
                "Name Of Tool": "  Acme Tool ",
                "Description": "Company data enrichment",
            },
            {
                "Description": "A record without any name field",
            },
        ]
    }


@pytest.fixture
def catalog_service(sample_catalog_document):
    return CatalogService(StaticCatalogFetcher(sample_catalog_document), CatalogNormalizer())


@pytest.fixture
def catalog_snapshot(sample_catalog_document):
    return CatalogNormalizer().normalize(sample_catalog_document)


@pytest.fixture
def mock_generator():
    """Structured generator that answers with a canned model response."""
    generator = Mock()
    generator.is_configured.return_value = True
    generator.generate_object = AsyncMock(return_value={"recommendations": []})
    return generator


@pytest.fixture
def make_engine(mock_generator, catalog_service):
    """Factory for engines wired to the mock generator and the sample catalog."""
    def _make(generator=None, service=None, min_relevance=0.3):
        return RecommendationEngine(
            generator=generator or mock_generator,
            catalog_service=service or catalog_service,
            prompt_builder=PromptBuilder(platform_name="Clay"),
            min_relevance=min_relevance,
            no_match_message=DEFAULT_NO_MATCH_MESSAGE,
        )
    return _make


@pytest.fixture
def test_client():
    """Create a test client for the FastAPI application."""
    return TestClient(app)


@pytest.fixture
def override_engine():
    """Install an engine for the recommend route and remove it afterwards."""
    def _override(engine):
        app.dependency_overrides[get_recommendation_engine] = lambda: engine
    yield _override
    app.dependency_overrides.clear()
