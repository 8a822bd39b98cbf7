"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import DEFAULT, AsyncMock

import pytest

from company_research.clients.llm_client import LLMClient
from company_research.clients.search_client import SearchClient
from company_research.models.company import CompanyProfile, NewsStory
from company_research.models.search import SearchResult


@pytest.fixture
def sample_results() -> list[SearchResult]:
    return [
        SearchResult(
            title="Acme Corp - Official Site",
            content="Acme Corp builds anvils, rockets and assorted gadgets.",
            url="https://acme.com",
        ),
        SearchResult(
            title="Acme Corp names Wile E. Coyote CEO",
            content="The board of Acme Corp appointed Wile E. Coyote as chief executive.",
            url="https://news.example.com/acme-ceo",
        ),
        SearchResult(
            title="Acme Corp | LinkedIn",
            content="Acme Corp. Manufacturing. Phoenix, Arizona.",
            url="https://www.linkedin.com/company/acme",
        ),
    ]


@pytest.fixture
def sample_profile() -> CompanyProfile:
    return CompanyProfile(
        company_name="Acme Corp",
        ceo="Wile E. Coyote",
        website="https://acme.com",
        linkedin_url="https://www.linkedin.com/company/acme",
        description="Manufacturer of anvils, rockets and desert gadgets.",
        headquarters="Phoenix, Arizona, USA",
        latest_news_stories=[
            NewsStory(
                headline="Acme Corp names new CEO",
                date="2026-09-02",
                url="https://news.example.com/acme-ceo",
            ),
            NewsStory(headline="Acme opens rocket plant", date="August 2026"),
        ],
    )


@pytest.fixture
def mock_llm_client(sample_profile) -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)

    async def generate_structured(*args, usage=None, **kwargs):
        if usage is not None:
            usage.append(("claude-haiku-4-5-20251001", 1200, 300))
        return DEFAULT

    client.generate_structured = AsyncMock(
        side_effect=generate_structured, return_value=sample_profile
    )
    return client


@pytest.fixture
def mock_search_client() -> SearchClient:
    """Create a mock search client."""
    client = AsyncMock(spec=SearchClient)
    client.search = AsyncMock(
        return_value=[
            SearchResult(title="Test", url="https://example.com", content="Test content")
        ]
    )
    return client
