"""Data models for the company research pipeline."""

from company_research.models.company import CompanyProfile, NewsStory
from company_research.models.search import SearchResult

__all__ = [
    "CompanyProfile",
    "NewsStory",
    "SearchResult",
]
