"""Profile extractor: turns search evidence into a CompanyProfile via Claude."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from company_research.clients.llm_client import LLMClient
from company_research.models.company import CompanyProfile
from company_research.models.search import SearchResult

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "..."
TOOL_NAME = "company_info_extraction"

SYSTEM_PROMPT = """\
You are an expert at extracting structured information about companies from search results.
Populate every field using the best available facts.
Extract the following information from the search results:
- company_name: Official name of the company
- ceo: Name of the current CEO or chief executive
- website: Official company website URL
- linkedin_url: Company LinkedIn profile URL
- description: Brief description of what the company does and its main business
- headquarters: Location of the company headquarters (city, state/country)
- latest_news_stories: Exactly two news stories about the company from the past 6 months (with headline, date, and url)

Only include fields where you found reliable information. Omit anything the \
search results do not support."""

NO_RESULTS_NOTE = (
    "No search results were found. Use the requested company name as "
    "company_name and leave every other field out."
)


def format_evidence(results: Sequence[SearchResult], char_limit: int = 3000) -> str:
    """Render results as numbered blocks separated by blank lines.

    Content longer than ``char_limit`` is cut and marked.
    """
    blocks = []
    for i, r in enumerate(results, 1):
        content = r.content
        if len(content) > char_limit:
            content = content[:char_limit] + TRUNCATION_MARKER
        blocks.append(f"[{i}] {r.title}\n{content}\nURL: {r.url}")
    return "\n\n".join(blocks)


class ProfileExtractor:
    def __init__(
        self,
        llm: LLMClient,
        model: str = "claude-haiku-4-5-20251001",
        *,
        char_limit: int = 3000,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.char_limit = char_limit
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def extract(
        self,
        company_name: str,
        results: Sequence[SearchResult],
        usage: list[tuple[str, int, int]] | None = None,
    ) -> CompanyProfile:
        """Extract a profile for ``company_name``. Raises ExtractionError.

        Token usage of the model call is appended to ``usage`` when given.
        """
        evidence = format_evidence(results, self.char_limit)
        logger.debug(
            "Extracting profile for %s from %d results (%d chars)",
            company_name,
            len(results),
            len(evidence),
        )

        prompt = f"""Company: {company_name}

Search Results:
{evidence or NO_RESULTS_NOTE}

Extract the company information from the search results."""

        return await self.llm.generate_structured(
            prompt=prompt,
            schema=CompanyProfile,
            system=SYSTEM_PROMPT,
            tool_name=TOOL_NAME,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            usage=usage,
        )
