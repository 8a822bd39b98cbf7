"""Automated company research: web search fan-out and structured profile extraction."""

from company_research.errors import (
    ExtractionError,
    PlannerError,
    ResearchError,
    SearchProviderError,
)
from company_research.models.company import CompanyProfile, NewsStory
from company_research.pipeline.orchestrator import research_company

__version__ = "0.1.0"

__all__ = [
    "CompanyProfile",
    "ExtractionError",
    "NewsStory",
    "PlannerError",
    "ResearchError",
    "SearchProviderError",
    "research_company",
]
