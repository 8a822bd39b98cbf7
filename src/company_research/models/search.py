"""Search result model shared by the aggregator and the extractor."""

from __future__ import annotations

from pydantic import BaseModel


class SearchResult(BaseModel):
    title: str = ""
    content: str = ""
    url: str = ""
