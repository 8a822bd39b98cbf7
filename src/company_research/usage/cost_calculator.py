"""Cost calculator for Claude API and Tavily search usage."""

from __future__ import annotations

# Pricing per 1M tokens (USD)
MODEL_PRICING: dict[str, dict[str, float]] = {
    "claude-haiku-4-5-20251001": {"input": 1.00, "output": 5.00},
    "claude-sonnet-4-5-20250929": {"input": 3.00, "output": 15.00},
}

# Tavily bills advanced searches at two credits
TAVILY_COST_PER_CREDIT = 0.008
SEARCH_CREDITS = {"basic": 1, "advanced": 2}


def calculate_cost(
    calls: list[tuple[str, int, int]],
    search_count: int = 0,
    search_depth: str = "advanced",
) -> float:
    """Estimate the USD cost of one research run.

    Args:
        calls: List of (model_id, input_tokens, output_tokens) tuples.
        search_count: Number of Tavily search API calls.
        search_depth: Tavily depth used for those calls.

    Unknown models contribute nothing.
    """
    total = 0.0
    for model_id, input_tokens, output_tokens in calls:
        pricing = MODEL_PRICING.get(model_id)
        if pricing is None:
            continue
        total += (input_tokens / 1_000_000) * pricing["input"]
        total += (output_tokens / 1_000_000) * pricing["output"]
    total += search_count * SEARCH_CREDITS.get(search_depth, 1) * TAVILY_COST_PER_CREDIT
    return total
