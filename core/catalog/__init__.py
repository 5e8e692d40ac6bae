"""
Tool catalog management.
Fetching, normalizing and indexing the remote tool catalog.
"""

from .models import (
    Tool,
    CatalogSnapshot,
    normalize_tool_name,
    DEFAULT_CATEGORY,
    DEFAULT_INTEGRATION_DIFFICULTY,
    DEFAULT_PRICING_MODEL,
)

from .fetchers import (
    CatalogFetcher,
    HTTPCatalogFetcher,
    StaticCatalogFetcher,
)

from .normalizer import (
    CatalogNormalizer,
    extract_tool_records,
    split_use_cases,
)

from .service import CatalogService

__all__ = [
    # Models
    "Tool",
    "CatalogSnapshot",
    "normalize_tool_name",
    "DEFAULT_CATEGORY",
    "DEFAULT_INTEGRATION_DIFFICULTY",
    "DEFAULT_PRICING_MODEL",

    # Fetchers
    "CatalogFetcher",
    "HTTPCatalogFetcher",
    "StaticCatalogFetcher",

    # Normalization
    "CatalogNormalizer",
    "extract_tool_records",
    "split_use_cases",

    # Services
    "CatalogService",
]

__version__ = "1.0.0"
