"""
speechscore.cli - Typer CLI entry point.

Reads a transcript, runs the scoring pipeline and prints a report or
the flat JSON record.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from speechscore import __version__
from speechscore.config import (
    CONFIG_FILENAME,
    SpeechScoreConfig,
    create_default_config,
    load_config,
    write_config,
)
from speechscore.exceptions import ConfigError
from speechscore.logging import configure_logging
from speechscore.models import ScoredResult
from speechscore.utils import format_duration, get_score_style

app = typer.Typer(
    name="speechscore",
    help="Score speaking performance from a transcript.\n\n"
    "Measures pace, filler words, vocabulary, clarity and confidence, "
    "combines them into an overall score and suggests improvements.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"speechscore {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """speechscore - transcript speaking-performance scoring."""
    pass


@app.command("init")
def init_config(
    path: str = typer.Option(".", "--path", "-d", help="Directory to write the config in"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default speechscore.yaml."""
    config_path = Path(path) / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print("[red]Error: config already exists[/red]")
        console.print(f"  {config_path}")
        console.print("Use --force to overwrite it.")
        raise typer.Exit(1)

    write_config(create_default_config(), config_path)
    console.print(f"[green]✓[/green] Wrote {config_path}")


def _resolve_config(config_path: str | None, enrich: str | None) -> SpeechScoreConfig:
    config = load_config(Path(config_path) if config_path else None)
    if enrich is None:
        return config
    try:
        return SpeechScoreConfig(**{**config.model_dump(), "enrichment": enrich})
    except ValidationError as e:
        raise ConfigError(f"Invalid --enrich value '{enrich}'") from e


def _print_report(result: ScoredResult) -> None:
    from speechscore.feedback import feedback_for

    feedback = feedback_for(result)
    breakdown = result.scoring_breakdown

    style = get_score_style(result.overall_score)
    console.print(f"\nOverall score: [bold {style}]{result.overall_score}[/bold {style}] / 100\n")

    table = Table(title="Speaking Metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Score", justify="right")
    table.add_column("Rating", style="yellow")

    table.add_row(
        "Pace",
        f"{result.words_per_minute} WPM over {format_duration(result.duration_seconds)}",
        str(breakdown.wpm_score),
        feedback["pace"].label,
    )
    table.add_row(
        "Filler words",
        str(result.total_filler_count),
        str(breakdown.filler_score),
        feedback["fillers"].label,
    )
    table.add_row(
        "Vocabulary",
        f"{result.vocabulary_richness}% unique ({result.unique_word_count}/{result.total_words})",
        str(breakdown.vocab_score),
        feedback["vocabulary"].label,
    )
    table.add_row(
        "Clarity",
        f"{result.clarity_score:.2f}",
        str(breakdown.clarity_score),
        feedback["clarity"].label,
    )
    table.add_row(
        "Confidence",
        f"{result.confidence_score:.2f}",
        str(breakdown.confidence_score),
        feedback["confidence"].label,
    )
    table.add_row("Sentiment", f"{result.sentiment_score:+.2f}", "-", result.sentiment_label)
    table.add_row(
        "Sentence length",
        f"{result.average_sentence_length} words avg",
        "-",
        feedback["sentence_length"].label,
    )
    console.print(table)

    if result.filler_words:
        fillers = ", ".join(f"{word} ({count})" for word, count in result.filler_words)
        console.print(f"[dim]Fillers: {fillers}[/dim]")
    if result.tone:
        console.print(f"[dim]Tone: {result.tone}[/dim]")

    if result.suggestions:
        console.print("\n[bold]Suggestions[/bold]")
        for suggestion in result.suggestions:
            console.print(f"  • {suggestion}")


@app.command("analyze")
def analyze_cmd(
    transcript: str = typer.Argument(..., help="Transcript file, or '-' to read stdin"),
    duration: float | None = typer.Option(
        None, "--duration", "-t", help="Speaking time in seconds (estimated if omitted)"
    ),
    enrich: str | None = typer.Option(
        None, "--enrich", "-e", help="Enrichment: none, lexicon, or llm (overrides config)"
    ),
    config_path: str | None = typer.Option(
        None, "--config", "-c", help=f"Path to {CONFIG_FILENAME} or its directory"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result record as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Score a transcript."""
    configure_logging(verbose)

    from speechscore.io import read_transcript
    from speechscore.pipeline import analyze, build_enricher

    try:
        config = _resolve_config(config_path, enrich)
    except (ConfigError, FileNotFoundError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        text = read_transcript(transcript)
    except OSError as e:
        console.print(f"[red]Error reading transcript: {e}[/red]")
        raise typer.Exit(1)

    if not text.strip():
        console.print("[red]Error: No transcript provided[/red]")
        raise typer.Exit(1)

    api_key = os.environ.get(config.llm_api_key_env) if config.enrichment == "llm" else None
    enricher = build_enricher(config, api_key=api_key)

    result = analyze(text, duration, enricher=enricher, config=config)

    if as_json:
        typer.echo(json.dumps(result.to_record(), indent=2, ensure_ascii=False))
        return

    _print_report(result)

    client = getattr(enricher, "client", None)
    if client is not None:
        usage = client.get_token_usage()
        if usage["total_tokens"] > 0:
            console.print(f"\n[dim]Token usage: {usage['total_tokens']:,} total[/dim]")
