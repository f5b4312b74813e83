"""
content-intel CLI - run the pipeline from a terminal.

Commands:
    content-intel analyze TITLE CONTENT [--no-ai]   Violation report
    content-intel paragraphs TITLE [--category]     Paragraph suggestions
    content-intel keywords TITLE [CONTENT]          SEO keywords and tags
    content-intel grammar CONTENT                   Grammar and spelling check
    content-intel improve CONTENT                   Vocabulary improvements
    content-intel topics [--category]               Topic ideas
    content-intel chat MESSAGE [--context]          Assistant reply
    content-intel spam CONTENT                      Spam verdict
    content-intel excerpt CONTENT [--max-length]    Excerpt
    content-intel suggest CONTENT                   Draft feedback
    content-intel status                            Provider status

CONTENT arguments accept "-" to read from stdin.
"""

import asyncio
import logging
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import PipelineConfig
from .generation import GenerationFacade
from .llm import ProviderOrchestrator, build_providers
from .moderation import ViolationAggregator, severity_color

app = typer.Typer(help="Content moderation and writing assistance with builtin fallback")
console = Console()


def _setup(verbose: bool = False) -> tuple[PipelineConfig, ProviderOrchestrator]:
    config = PipelineConfig.from_env()
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return config, ProviderOrchestrator(build_providers(config), config=config)


def _facade(verbose: bool) -> GenerationFacade:
    config, orchestrator = _setup(verbose)
    return GenerationFacade(orchestrator, config)


def _read(value: str) -> str:
    return sys.stdin.read() if value == "-" else value


VerboseOption = typer.Option(False, "--verbose", "-v", help="Debug logging")


# =============================================================================
# MODERATION
# =============================================================================


@app.command()
def analyze(
    title: str = typer.Argument(..., help="Post title"),
    content: str = typer.Argument(..., help="Post body, or - for stdin"),
    no_ai: bool = typer.Option(False, "--no-ai", help="Rule engine only"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = VerboseOption,
):
    """Check a post for rule violations."""
    _config, orchestrator = _setup(verbose)
    aggregator = ViolationAggregator(orchestrator)
    report = asyncio.run(aggregator.analyze(title, _read(content), use_ai=not no_ai))

    if as_json:
        console.print_json(data=report.to_dict())
        return

    color = severity_color(report.severity)
    console.print(
        f"\n[bold]Severity:[/bold] [{color}]{report.severity.value}[/{color}]  "
        f"[bold]Clean:[/bold] {report.is_clean}  "
        f"[dim](ai: {report.sources_used.ai}, provider: {report.ai_provider or '-'})[/dim]\n"
    )
    if report.is_clean:
        console.print("[green]No violations found.[/green]")
        return

    table = Table(title="Violations")
    table.add_column("Category", style="bold")
    table.add_column("Severity")
    table.add_column("Sources")
    table.add_column("Count", justify="right")
    table.add_column("Excerpt / description")
    for v in report.violations:
        c = severity_color(v.severity)
        table.add_row(
            v.category.value,
            f"[{c}]{v.severity.value}[/{c}]",
            "+".join(s.value for s in v.contributors),
            str(v.occurrence_count),
            v.excerpt or v.description,
        )
    console.print(table)


# =============================================================================
# GENERATION
# =============================================================================


@app.command()
def paragraphs(
    title: str = typer.Argument(..., help="Post title (at least 5 characters)"),
    category: str = typer.Option("general", help="technology, education, science, business, general"),
    verbose: bool = VerboseOption,
):
    """Suggest introduction, body and conclusion paragraphs."""
    result = asyncio.run(_facade(verbose).generate_paragraphs(title, category))
    console.print_json(data=result.to_dict())
    if not result.success:
        raise typer.Exit(1)


@app.command()
def keywords(
    title: str = typer.Argument(..., help="Post title"),
    content: str = typer.Argument("", help="Post body, or - for stdin"),
    category: str = typer.Option("general"),
    verbose: bool = VerboseOption,
):
    """Suggest SEO keywords, tags and meta description."""
    result = asyncio.run(_facade(verbose).generate_keywords(title, _read(content), category))
    console.print_json(data=result.to_dict())


@app.command()
def grammar(
    content: str = typer.Argument(..., help="Text, or - for stdin"),
    verbose: bool = VerboseOption,
):
    """Check grammar and spelling."""
    result = asyncio.run(_facade(verbose).check_grammar(_read(content)))
    console.print_json(data=result.to_dict())


@app.command()
def improve(
    content: str = typer.Argument(..., help="Text, or - for stdin"),
    verbose: bool = VerboseOption,
):
    """Improve vocabulary and flow."""
    result = asyncio.run(_facade(verbose).improve_content(_read(content)))
    console.print_json(data=result.to_dict())


@app.command()
def topics(
    category: str = typer.Option("general"),
    verbose: bool = VerboseOption,
):
    """Suggest topic ideas for a category."""
    result = asyncio.run(_facade(verbose).generate_topic_ideas(category))
    console.print_json(data=result.to_dict())


@app.command()
def chat(
    message: str = typer.Argument(...),
    context: str = typer.Option("", help="Extra context for the assistant"),
    verbose: bool = VerboseOption,
):
    """Ask the blog assistant a question."""
    result = asyncio.run(_facade(verbose).chat_with_assistant(message, context))
    console.print(f"[dim]({result.provider})[/dim]")
    console.print(result.reply)


@app.command()
def spam(
    content: str = typer.Argument(..., help="Text, or - for stdin"),
    verbose: bool = VerboseOption,
):
    """Check whether text looks like spam."""
    result = asyncio.run(_facade(verbose).detect_spam(_read(content)))
    console.print_json(data=result.to_dict())


@app.command()
def excerpt(
    content: str = typer.Argument(..., help="Text or HTML, or - for stdin"),
    max_length: int = typer.Option(200, "--max-length", min=1),
    verbose: bool = VerboseOption,
):
    """Build a whole-sentence excerpt."""
    result = asyncio.run(_facade(verbose).generate_excerpt(_read(content), max_length))
    console.print_json(data=result.to_dict())


@app.command()
def suggest(
    content: str = typer.Argument(..., help="Text, or - for stdin"),
    verbose: bool = VerboseOption,
):
    """Score a draft and suggest improvements."""
    result = asyncio.run(_facade(verbose).get_content_suggestions(_read(content)))
    console.print_json(data=result.to_dict())


# =============================================================================
# STATUS
# =============================================================================


@app.command()
def status(verbose: bool = VerboseOption):
    """Show which providers are configured."""
    config, orchestrator = _setup(verbose)
    info = orchestrator.status()
    available = set(info["providers"])

    table = Table(title="Providers (priority order)")
    table.add_column("Provider", style="bold")
    table.add_column("Status")
    for provider in orchestrator.providers:
        state = "[green]available[/green]" if provider.id in available else "[dim]not configured[/dim]"
        table.add_row(provider.id, state)
    table.add_row("builtin", "[green]always[/green]")
    console.print(table)

    console.print(f"\nPrimary provider: [bold]{info['primaryProvider']}[/bold]")
    deadline = f"{config.outer_deadline:.0f}s" if config.outer_deadline else "off"
    console.print(f"Timeout per provider: {config.provider_timeout:.0f}s, outer deadline: {deadline}")


if __name__ == "__main__":
    app()
