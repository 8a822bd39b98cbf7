"""Query planner: expands a company name into topic-targeted search queries."""

from __future__ import annotations

from company_research.errors import PlannerError

QUERY_TEMPLATES: tuple[str, ...] = (
    "{company} company ceo",
    "{company} headquarters location",
    "{company} official website",
    "{company} LinkedIn profile",
    "{company} company description business",
    "{company} recent news",
)


def plan_queries(company_name: str) -> list[str]:
    """Return one query per template, in template order."""
    if not company_name or not company_name.strip():
        raise PlannerError("Company name must not be empty")
    name = company_name.strip()
    return [template.format(company=name) for template in QUERY_TEMPLATES]
