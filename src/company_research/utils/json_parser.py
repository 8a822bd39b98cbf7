"""Recover a JSON object from free-text model output."""

from __future__ import annotations

import json
import re

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def extract_json(text: str) -> dict | list:
    """Extract JSON from an LLM reply, handling ```json blocks.

    Tries the whole text, then the first fenced block, then the span from the
    first '{' to the last '}'. Raises ValueError when none of them parse.
    """
    text = (text or "").strip()
    candidates = [text]

    fenced = _FENCE_RE.search(text)
    if fenced:
        candidates.append(fenced.group(1).strip())

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except (json.JSONDecodeError, TypeError):
            continue

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")
