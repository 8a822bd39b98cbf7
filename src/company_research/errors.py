"""Exception hierarchy for the research pipeline."""

from __future__ import annotations


class ResearchError(Exception):
    """Base class for every failure surfaced by the research pipeline."""


class PlannerError(ResearchError, ValueError):
    """Raised when the company name is empty or whitespace-only."""


class SearchProviderError(ResearchError):
    """A single search provider call failed or timed out.

    Never escapes the search aggregator: the failed query contributes no
    results and the batch continues.
    """

    def __init__(self, query: str, message: str):
        super().__init__(f"Search failed for {query!r}: {message}")
        self.query = query


class ExtractionError(ResearchError):
    """The language model call failed or its output did not match the schema."""
