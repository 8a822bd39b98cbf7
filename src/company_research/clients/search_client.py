"""Tavily search wrapper with async support."""

from __future__ import annotations

import asyncio
import logging
import os

from tavily import AsyncTavilyClient

from company_research.errors import SearchProviderError
from company_research.models.search import SearchResult

logger = logging.getLogger(__name__)


class SearchClient:
    """Async Tavily search client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout: float | None = None,
        search_depth: str = "advanced",
        include_raw_content: bool = True,
    ):
        key = api_key or os.environ.get("TAVILY_API_KEY")
        if not key:
            raise ValueError(
                "Tavily API key required. Set TAVILY_API_KEY env var or pass api_key."
            )
        self.client = AsyncTavilyClient(api_key=key)
        self.timeout = timeout
        self.search_depth = search_depth
        self.include_raw_content = include_raw_content

    async def search(self, query: str, max_results: int = 3) -> list[SearchResult]:
        """Search and return up to ``max_results`` results.

        Raises SearchProviderError on any provider, network or timeout failure.
        """
        logger.info("Searching: %s", query)
        try:
            response = await asyncio.wait_for(
                self.client.search(
                    query=query,
                    max_results=max_results,
                    search_depth=self.search_depth,
                    include_raw_content=self.include_raw_content,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.error("Search timed out after %ss: %s", self.timeout, query)
            raise SearchProviderError(query, f"timed out after {self.timeout}s") from exc
        except Exception as exc:
            logger.error("Search failed", exc_info=True)
            raise SearchProviderError(query, str(exc)) from exc
        return [
            SearchResult(
                title=r.get("title") or "",
                # Raw page text when available, otherwise Tavily's snippet
                content=r.get("raw_content") or r.get("content") or "",
                url=r.get("url") or "",
            )
            for r in response.get("results", [])
        ]
