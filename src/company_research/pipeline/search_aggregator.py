"""Search aggregator: concurrent fan-out over queries with URL deduplication."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence

from company_research.clients.search_client import SearchClient
from company_research.errors import SearchProviderError
from company_research.models.search import SearchResult

logger = logging.getLogger(__name__)


def deduplicate_results(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Keep the first result for each url, in first-seen order.

    Results with an empty url are always kept.
    """
    seen: set[str] = set()
    unique: list[SearchResult] = []
    for result in results:
        if result.url:
            if result.url in seen:
                continue
            seen.add(result.url)
        unique.append(result)
    return unique


class SearchAggregator:
    def __init__(self, search: SearchClient, max_results: int = 3):
        self.search = search
        self.max_results = max_results

    async def aggregate(self, queries: Sequence[str]) -> list[SearchResult]:
        """Run every query concurrently and return deduplicated results.

        A failing query contributes nothing; the batch only comes back empty
        when every query failed or nothing was found.
        """
        batches = await asyncio.gather(*(self._search_one(q) for q in queries))

        flattened = [result for batch in batches for result in batch]
        unique = deduplicate_results(flattened)
        logger.info(
            "Aggregated %d results (%d after dedup) from %d queries",
            len(flattened),
            len(unique),
            len(queries),
        )
        if queries and not unique:
            logger.warning("All %d searches returned nothing", len(queries))
        return unique

    async def _search_one(self, query: str) -> list[SearchResult]:
        try:
            return await self.search.search(query, max_results=self.max_results)
        except SearchProviderError as exc:
            logger.warning("Skipping query %r: %s", query, exc)
        except Exception as exc:
            logger.warning("Skipping query %r after unexpected error: %s", query, exc)
        return []
