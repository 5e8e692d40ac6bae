import httpx
from typing import Any, Dict, Optional

from core.catalog.fetchers import HTTPCatalogFetcher
from core.catalog.normalizer import extract_tool_records


class UIClient:
    """Thin HTTP client for the recommendation API and the catalog host"""

    def __init__(
        self,
        api_base: str = "http://localhost:8001",
        catalog_url: Optional[str] = None,
        timeout: float = 35.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.catalog_url = catalog_url
        self.timeout = timeout
        self.transport = transport

    async def get_recommendations(self, query: str) -> Dict[str, Any]:
        """POST the query to the API; raises httpx.HTTPStatusError on failure responses"""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(f"{self.api_base}/api/recommend", json={"query": query})
            response.raise_for_status()
            return response.json()

    async def get_tool_count(self) -> int:
        """Count catalog records straight from the catalog host"""
        fetcher = HTTPCatalogFetcher(self.catalog_url, transport=self.transport)
        document = await fetcher.fetch_document()
        return len(extract_tool_records(document))
