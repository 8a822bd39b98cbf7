"""External collaborators: web search and the language model."""

from company_research.clients.llm_client import LLMClient
from company_research.clients.search_client import SearchClient

__all__ = ["LLMClient", "SearchClient"]
