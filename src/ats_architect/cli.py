"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ats_architect.clients.llm_client import LLMClient
from ats_architect.config import AppConfig, load_config
from ats_architect.models.ats import ATSScore, IssueSeverity
from ats_architect.models.resume import ResumeDocument, apply_patch
from ats_architect.parsers.resume_parser import (
    dump_resume_document,
    load_resume_document,
    parse_resume,
)
from ats_architect.pipeline.resume_importer import ResumeImporter
from ats_architect.pipeline.text_generator import TextGenerator
from ats_architect.scoring.autofix import AutoFixDispatcher
from ats_architect.scoring.scorer import score as score_resume

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ats-architect",
    help="Local ATS compatibility scoring for structured resumes",
    no_args_is_help=True,
)
console = Console()

SEVERITY_STYLES = {
    IssueSeverity.CRITICAL: "red",
    IssueSeverity.WARNING: "yellow",
    IssueSeverity.INFO: "blue",
}


def _setup(verbose: bool) -> AppConfig:
    config = load_config()
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return config


def _load(resume: Path) -> ResumeDocument:
    if not resume.exists():
        console.print(f"[red]Resume file not found: {resume}[/red]")
        raise typer.Exit(1)
    try:
        return load_resume_document(resume)
    except (ValueError, ValidationError) as exc:
        console.print(f"[red]Could not load resume: {exc}[/red]")
        raise typer.Exit(1)


def _make_generator(config: AppConfig) -> TextGenerator:
    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    return TextGenerator(llm, model=config.llm.fast_model, review_model=config.llm.review_model)


def _print_score(result: ATSScore) -> None:
    color = "green" if result.score >= 80 else "yellow" if result.score >= 50 else "red"
    console.print(Panel(f"[bold {color}]{result.score}/100[/bold {color}]", title="ATS score"))
    if not result.issues:
        console.print("[green]No issues found.[/green]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Severity")
    table.add_column("Id")
    table.add_column("Issue")
    table.add_column("Fixable", justify="center")
    for issue in result.issues:
        style = SEVERITY_STYLES[issue.severity]
        table.add_row(
            f"[{style}]{issue.severity.value}[/{style}]",
            issue.id,
            f"[bold]{issue.title}[/bold]\n[dim]{issue.description}[/dim]",
            "yes" if issue.can_auto_fix else "",
        )
    console.print(table)


@app.command()
def score(
    resume: Path = typer.Argument(help="Structured resume file (.json/.yaml)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Score a resume for ATS compatibility."""
    _setup(verbose)
    result = score_resume(_load(resume))
    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return
    _print_score(result)


@app.command()
def fix(
    resume: Path = typer.Argument(help="Structured resume file (.json/.yaml)"),
    issue_id: str = typer.Argument(help="Issue id reported by 'score', e.g. short_summary"),
    output: Path = typer.Option(None, "--output", "-o", help="Where to write the fixed resume (default: overwrite)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Apply one auto-fix to a resume."""
    config = _setup(verbose)
    document = _load(resume)

    dispatcher = AutoFixDispatcher(
        _make_generator(config),
        fallback_role=config.fix.summary_fallback_role,
        style_hint=config.fix.style_hint,
    )
    try:
        with console.status(f"Fixing {issue_id}..."):
            patch = asyncio.run(dispatcher.autofix(issue_id, document))
    except Exception as exc:
        logger.exception("Auto-fix %s failed", issue_id)
        console.print(f"[red]Auto-fix failed: {exc}[/red]")
        raise typer.Exit(1)

    if patch.is_empty:
        console.print(f"[yellow]No automatic fix available for {issue_id}.[/yellow]")
        return

    fixed = apply_patch(document, patch)
    if output is None:
        output = resume if resume.suffix.lower() == ".json" else resume.with_suffix(".json")
    dump_resume_document(fixed, output)

    before, after = score_resume(document).score, score_resume(fixed).score
    console.print(f"[green]Saved: {output}[/green] (score {before} → {after})")


@app.command()
def review(
    resume: Path = typer.Argument(help="Structured resume file (.json/.yaml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Ask the LLM for a free-form ATS critique."""
    config = _setup(verbose)
    document = _load(resume)
    generator = _make_generator(config)
    try:
        with console.status("Reviewing resume..."):
            critique = asyncio.run(generator.analyze_resume(document))
    except Exception as exc:
        logger.exception("Review failed")
        console.print(f"[red]Review failed: {exc}[/red]")
        raise typer.Exit(1)
    console.print(Markdown(critique))


@app.command("import")
def import_resume(
    file: Path = typer.Argument(help="Resume file (PDF/DOCX/TXT/MD)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output .json path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Convert a resume file into a structured JSON resume."""
    config = _setup(verbose)
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    try:
        text = parse_resume(file)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    importer = ResumeImporter(llm, model=config.llm.fast_model)
    try:
        with console.status("Extracting resume data..."):
            document = asyncio.run(importer.extract(text))
    except Exception as exc:
        logger.exception("Import failed")
        console.print(f"[red]Import failed: {exc}[/red]")
        raise typer.Exit(1)

    output = output or file.with_suffix(".json")
    dump_resume_document(document, output)
    console.print(f"[green]Saved: {output}[/green]")
    _print_score(score_resume(document))


if __name__ == "__main__":
    app()
