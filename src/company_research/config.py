"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

SEARCH_DEPTHS = ("basic", "advanced")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    timeout: int = 60
    max_retries: int = 3
    max_tokens: int = 4096
    temperature: float = 0.0

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ValueError(
                f"llm.max_retries must be between 1 and 10, got {self.max_retries}"
            )
        if self.max_tokens < 256:
            raise ValueError(f"llm.max_tokens must be at least 256, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(
                f"llm.temperature must be between 0 and 1, got {self.temperature}"
            )


@dataclass(frozen=True)
class SearchConfig:
    max_results: int = 3
    search_depth: str = "advanced"
    timeout: float = 30.0
    include_raw_content: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.max_results <= 10:
            raise ValueError(
                f"search.max_results must be between 1 and 10, got {self.max_results}"
            )
        if self.search_depth not in SEARCH_DEPTHS:
            raise ValueError(
                f"search.search_depth must be one of {SEARCH_DEPTHS}, got {self.search_depth!r}"
            )
        if self.timeout <= 0:
            raise ValueError(f"search.timeout must be positive, got {self.timeout}")


@dataclass(frozen=True)
class ExtractionConfig:
    content_char_limit: int = 3000

    def __post_init__(self) -> None:
        if self.content_char_limit < 100:
            raise ValueError(
                "extraction.content_char_limit must be at least 100, "
                f"got {self.content_char_limit}"
            )


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        search=SearchConfig(**raw.get("search", {})),
        extraction=ExtractionConfig(**raw.get("extraction", {})),
    )
