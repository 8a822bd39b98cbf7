"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from company_research.config import load_config
from company_research.errors import ResearchError
from company_research.models.company import CompanyProfile
from company_research.pipeline.orchestrator import ResearchOrchestrator
from company_research.pipeline.query_planner import plan_queries

app = typer.Typer(
    name="company-research",
    help="Research a company on the web and extract a structured profile.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _render_profile(profile: CompanyProfile) -> str:
    lines = [f"[bold]{profile.company_name}[/bold]"]
    for label, value in (
        ("CEO", profile.ceo),
        ("Headquarters", profile.headquarters),
        ("Website", profile.website),
        ("LinkedIn", profile.linkedin_url),
    ):
        if value:
            lines.append(f"{label}: {value}")
    if profile.description:
        lines.append(f"\n{profile.description}")
    if profile.latest_news_stories:
        lines.append("\n[bold]Latest news[/bold]")
        for story in profile.latest_news_stories:
            lines.append(f"  - {story.headline} ({story.date})")
            if story.url:
                lines.append(f"    [dim]{story.url}[/dim]")
    return "\n".join(lines)


@app.command()
def research(
    company: str = typer.Argument(help="Company name to research"),
    as_json: bool = typer.Option(False, "--json", help="Print the profile as JSON"),
    max_results: int = typer.Option(
        None, "--max-results", "-n", help="Results per search query (overrides config)"
    ),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and usage"),
) -> None:
    """Research a company and print its profile."""
    _setup_logging(verbose)
    if not company.strip():
        console.print("[red]Company name must not be empty.[/red]")
        raise typer.Exit(1)

    try:
        config = load_config(config_path)
        if max_results is not None:
            config = replace(config, search=replace(config.search, max_results=max_results))
        orchestrator = ResearchOrchestrator.from_config(config)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    try:
        if as_json:
            result = asyncio.run(orchestrator.run(company))
        else:
            with console.status(f"Researching {company}..."):
                result = asyncio.run(orchestrator.run(company))
    except ResearchError as e:
        console.print(f"[red]Research failed: {e}[/red]")
        raise typer.Exit(1)

    profile = result.profile
    if as_json:
        payload = {"company_info": profile.model_dump(exclude_none=True)}
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        console.print(Panel(_render_profile(profile), title="Company Profile"))
        console.print(f"[green]Successfully researched {profile.company_name}.[/green]")

    if verbose:
        console.print(
            f"[dim]sources: {len(result.sources)} | searches: {result.search_count} | "
            f"tokens: {result.input_tokens} in / {result.output_tokens} out | "
            f"cost: ${result.estimated_cost_usd:.4f} | {result.elapsed_seconds:.1f}s[/dim]"
        )


@app.command()
def queries(
    company: str = typer.Argument(help="Company name"),
) -> None:
    """Show the search queries that would be issued for a company."""
    try:
        planned = plan_queries(company)
    except ResearchError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    for i, query in enumerate(planned, 1):
        console.print(f"  [bold]{i}.[/bold] {query}")


if __name__ == "__main__":
    app()
