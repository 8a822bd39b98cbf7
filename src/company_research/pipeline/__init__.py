"""Research pipeline stages."""

from company_research.pipeline.orchestrator import (
    ResearchOrchestrator,
    ResearchResult,
    research_company,
)
from company_research.pipeline.profile_extractor import ProfileExtractor, format_evidence
from company_research.pipeline.query_planner import QUERY_TEMPLATES, plan_queries
from company_research.pipeline.search_aggregator import SearchAggregator, deduplicate_results

__all__ = [
    "QUERY_TEMPLATES",
    "ProfileExtractor",
    "ResearchOrchestrator",
    "ResearchResult",
    "SearchAggregator",
    "deduplicate_results",
    "format_evidence",
    "plan_queries",
    "research_company",
]
