from abc import ABC, abstractmethod
from typing import Any, Optional
import json
import logging

import httpx
from tenacity import (
    AsyncRetrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from core.exceptions import CatalogUnavailableError

logger = logging.getLogger(__name__)


class CatalogFetcher(ABC):
    """Abstract base class for catalog document fetchers"""

    @abstractmethod
    async def fetch_document(self) -> Any:
        """Fetch the raw catalog JSON document"""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the catalog source is reachable"""
        pass

    @property
    def source(self) -> str:
        return self.__class__.__name__


class HTTPCatalogFetcher(CatalogFetcher):
    """Fetches the catalog with a plain HTTP GET"""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        attempts: int = 2,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.attempts = max(1, attempts)
        self.transport = transport

    @property
    def source(self) -> str:
        return self.url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def _get(self) -> httpx.Response:
        # Only unreachable hosts are retried; HTTP status errors surface immediately
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
            retry=retry_if_exception_type((httpx.ConnectError, httpx.TimeoutException)),
            before_sleep=before_sleep_log(logger, logging.INFO),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                async with self._client() as client:
                    return await client.get(self.url)

    async def fetch_document(self) -> Any:
        """Fetch and decode the catalog JSON"""
        logger.info(f"Fetching tools from: {self.url}")
        try:
            response = await self._get()
        except httpx.HTTPError as e:
            logger.error(f"Tool-list fetch error: {e}")
            raise CatalogUnavailableError(details=f"Request to {self.url} failed: {e}") from e

        if response.is_error:
            logger.error(f"Tool-list fetch error: HTTP {response.status_code}: {response.reason_phrase}")
            raise CatalogUnavailableError(details=f"HTTP {response.status_code}: {response.reason_phrase}")

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Tool-list is not valid JSON: {e}")
            raise CatalogUnavailableError(details=f"Invalid JSON from {self.url}: {e}") from e

    async def health_check(self) -> bool:
        """Check the catalog host answers a GET"""
        try:
            async with self._client() as client:
                response = await client.get(self.url)
            return response.is_success
        except httpx.HTTPError as e:
            logger.error(f"Catalog health check failed: {e}")
            return False


class StaticCatalogFetcher(CatalogFetcher):
    """Serves an in-memory catalog document, for fixtures and local files"""

    def __init__(self, document: Any):
        self.document = document

    @classmethod
    def from_file(cls, path) -> "StaticCatalogFetcher":
        with open(path, "r", encoding="utf-8") as f:
            return cls(json.load(f))

    async def fetch_document(self) -> Any:
        return self.document

    async def health_check(self) -> bool:
        return self.document is not None
