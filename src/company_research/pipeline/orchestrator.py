"""Research orchestrator - query planner, search aggregator, profile extractor."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from company_research.clients.llm_client import LLMClient
from company_research.clients.search_client import SearchClient
from company_research.config import AppConfig, load_config
from company_research.models.company import CompanyProfile
from company_research.models.search import SearchResult
from company_research.pipeline.profile_extractor import ProfileExtractor
from company_research.pipeline.query_planner import plan_queries
from company_research.pipeline.search_aggregator import SearchAggregator
from company_research.usage.cost_calculator import calculate_cost

logger = logging.getLogger(__name__)


@dataclass
class ResearchResult:
    """Profile plus the evidence and usage behind it."""

    profile: CompanyProfile
    sources: list[SearchResult] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    input_tokens: int = 0
    output_tokens: int = 0
    search_count: int = 0
    estimated_cost_usd: float = 0.0


class ResearchOrchestrator:
    """Runs one research request end to end. Holds no per-request state."""

    def __init__(
        self,
        llm: LLMClient,
        search: SearchClient,
        *,
        model: str = "claude-haiku-4-5-20251001",
        max_results: int = 3,
        char_limit: int = 3000,
        temperature: float = 0.0,
        max_tokens: int = 4096,
        search_depth: str = "advanced",
    ):
        self.llm = llm
        self.search = search
        self.aggregator = SearchAggregator(search, max_results=max_results)
        self.extractor = ProfileExtractor(
            llm,
            model=model,
            char_limit=char_limit,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        self.search_depth = search_depth

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        *,
        llm: LLMClient | None = None,
        search: SearchClient | None = None,
    ) -> ResearchOrchestrator:
        """Build clients and stages from an AppConfig."""
        if llm is None:
            llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
        if search is None:
            search = SearchClient(
                timeout=config.search.timeout,
                search_depth=config.search.search_depth,
                include_raw_content=config.search.include_raw_content,
            )
        return cls(
            llm,
            search,
            model=config.llm.model,
            max_results=config.search.max_results,
            char_limit=config.extraction.content_char_limit,
            temperature=config.llm.temperature,
            max_tokens=config.llm.max_tokens,
            search_depth=config.search.search_depth,
        )

    async def run(self, company_name: str) -> ResearchResult:
        """Research a company and report usage alongside the profile."""
        start = time.monotonic()
        queries = plan_queries(company_name)
        name = company_name.strip()

        calls: list[tuple[str, int, int]] = []
        sources = await self.aggregator.aggregate(queries)
        profile = await self.extractor.extract(name, sources, usage=calls)

        searches = len(queries)
        elapsed = time.monotonic() - start
        logger.info(
            "Researched %s in %.1fs (%d sources)", profile.company_name, elapsed, len(sources)
        )
        return ResearchResult(
            profile=profile,
            sources=sources,
            elapsed_seconds=elapsed,
            input_tokens=sum(c[1] for c in calls),
            output_tokens=sum(c[2] for c in calls),
            search_count=searches,
            estimated_cost_usd=calculate_cost(
                calls, searches, search_depth=self.search_depth
            ),
        )

    async def research(self, company_name: str) -> CompanyProfile:
        """Research a company and return only the structured profile."""
        result = await self.run(company_name)
        return result.profile


async def research_company(
    company_name: str, config: AppConfig | None = None
) -> CompanyProfile:
    """Research ``company_name`` with clients built from config.yaml and env vars."""
    orchestrator = ResearchOrchestrator.from_config(config or load_config())
    return await orchestrator.research(company_name)
