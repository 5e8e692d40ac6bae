import logging
from typing import Optional

from .fetchers import CatalogFetcher, HTTPCatalogFetcher
from .models import CatalogSnapshot
from .normalizer import CatalogNormalizer, extract_tool_records

logger = logging.getLogger(__name__)


class CatalogService:
    """Fetches the catalog fresh on every call and normalizes it"""

    def __init__(self, fetcher: CatalogFetcher, normalizer: Optional[CatalogNormalizer] = None):
        self.fetcher = fetcher
        self.normalizer = normalizer or CatalogNormalizer()

    @classmethod
    def from_settings(cls, settings) -> "CatalogService":
        fetcher = HTTPCatalogFetcher(
            url=settings.catalog_url,
            timeout=settings.catalog_fetch_timeout,
            attempts=settings.catalog_fetch_attempts,
        )
        normalizer = CatalogNormalizer(category=f"{settings.platform_name} Integration")
        return cls(fetcher, normalizer)

    async def load_snapshot(self) -> CatalogSnapshot:
        """Fetch the catalog document and build a normalized snapshot"""
        document = await self.fetcher.fetch_document()
        return self.normalizer.normalize(document, source=self.fetcher.source)

    async def count_raw_tools(self) -> int:
        """Number of raw records in the catalog, before normalization"""
        document = await self.fetcher.fetch_document()
        return len(extract_tool_records(document))

    async def health_check(self) -> bool:
        return await self.fetcher.health_check()
