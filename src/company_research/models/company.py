"""Pydantic models for the extracted company profile."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

MAX_NEWS_STORIES = 2


class NewsStory(BaseModel):
    headline: str = Field(min_length=1, description="News headline")
    date: str = Field(min_length=1, description="Date of the news story")
    url: str | None = Field(default=None, description="URL link to the news article")


class CompanyProfile(BaseModel):
    """Structured company profile.

    Only ``company_name`` is required. Every other field is present only when
    the search evidence supported it.
    """

    company_name: str = Field(min_length=1, description="Official name of the company")
    ceo: str | None = Field(
        default=None, description="Name of the current CEO or chief executive"
    )
    website: str | None = Field(default=None, description="Official company website URL")
    linkedin_url: str | None = Field(default=None, description="Company LinkedIn profile URL")
    description: str | None = Field(
        default=None, description="Brief description of what the company does"
    )
    headquarters: str | None = Field(
        default=None, description="Location of the company headquarters"
    )
    latest_news_stories: list[NewsStory] | None = Field(
        default=None,
        description="Recent news stories about the company",
        json_schema_extra={"maxItems": MAX_NEWS_STORIES},
    )

    @field_validator("latest_news_stories")
    @classmethod
    def _keep_first_stories(cls, value: list[NewsStory] | None) -> list[NewsStory] | None:
        if value is None:
            return None
        return value[:MAX_NEWS_STORIES]

    def to_json(self) -> str:
        """Serialize with absent fields omitted."""
        return self.model_dump_json(exclude_none=True)
