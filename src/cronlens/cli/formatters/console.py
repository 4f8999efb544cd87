# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatters for engine results."""

from __future__ import annotations

from datetime import UTC, datetime

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cronlens import __version__
from cronlens.models import (
    ComparisonResult,
    ConversionResult,
    Example,
    GenerationResult,
    MatchResult,
    ValidationResult,
)

console = Console()

_DATE_FORMAT = "%a, %b %d %Y %H:%M"


def _relative(instant: datetime, now: datetime) -> str:
    seconds = int((instant - now).total_seconds())
    if seconds < 60:
        return "in less than a minute"
    minutes = seconds // 60
    if minutes < 60:
        return f"in {minutes} min"
    hours = minutes // 60
    if hours < 48:
        return f"in {hours}h {minutes % 60}m"
    return f"in {hours // 24} days"


def print_header() -> None:
    console.print(f"[bold]cronlens v{__version__}[/bold] - cron expressions, explained")
    console.print()


def print_error(message: str) -> None:
    console.print(f"[bold red]error:[/bold red] {escape(message)}")


def format_explanation(expression: str, description: str, runs: list[datetime], tz: str) -> None:
    console.print(Panel(f"[bold]{escape(description)}[/bold]", title=escape(expression)))
    if runs:
        format_next_runs(runs, tz)


def format_next_runs(runs: list[datetime], tz: str, *, now: datetime | None = None) -> None:
    now = now or datetime.now(UTC)
    table = Table(title=f"Next {len(runs)} runs ({tz})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("When", style="cyan")
    table.add_column("Relative", style="dim")
    for i, run in enumerate(runs, start=1):
        table.add_row(str(i), run.strftime(_DATE_FORMAT), _relative(run, now))
    console.print(table)


def format_validation(expression: str, result: ValidationResult) -> None:
    if result.valid:
        console.print(f"[bold green]valid[/bold green]  {escape(expression)}")
    else:
        console.print(f"[bold red]invalid[/bold red]  {escape(expression)}")
        for error in result.errors:
            console.print(f"  - {escape(error)}", style="red")
        if result.suggestion:
            console.print(f"  {escape(result.suggestion)}", style="dim")
    for warning in result.warnings:
        console.print(f"  warning: {escape(warning)}", style="yellow")


def format_comparison(first: str, second: str, result: ComparisonResult) -> None:
    table = Table(title="Field comparison")
    table.add_column("Field", style="bold")
    table.add_column(escape(first))
    table.add_column(escape(second))
    table.add_column("")
    for diff in result.differences:
        table.add_row(diff.field, escape(diff.first), escape(diff.second), "[red]differs[/red]")
    for name in result.similarities:
        table.add_row(name, "", "", "[green]same[/green]")
    console.print(table)

    if result.descriptions is not None:
        console.print(f"  first:  {escape(result.descriptions.first)}")
        console.print(f"  second: {escape(result.descriptions.second)}")
    if result.same:
        console.print("  These expressions are identical.", style="bold green")
    else:
        console.print(
            f"  {len(result.differences)} field(s) differ; "
            f"{result.overlap} of the next 10 runs overlap."
        )


def format_generation(text: str, result: GenerationResult) -> None:
    console.print(f"  input:      {escape(text)}")
    console.print(f"  expression: [bold cyan]{escape(result.expression or '')}[/bold cyan]")
    if result.description:
        console.print(f"  meaning:    {escape(result.description)}", style="dim")


def format_conversion(result: ConversionResult) -> None:
    console.print(f"[bold]{result.format}[/bold]")
    console.print(escape(result.result or ""), style="cyan")
    if result.description:
        console.print(f"meaning: {escape(result.description)}", style="dim")
    if result.note:
        style = "yellow" if not result.exact else "dim"
        console.print(f"note: {escape(result.note)}", style=style)


def format_formats(formats: dict[str, str]) -> None:
    table = Table(title="Supported formats")
    table.add_column("Format", style="cyan")
    table.add_column("Description")
    for key, label in formats.items():
        table.add_row(str(key), label)
    console.print(table)


def format_examples(examples: list[Example]) -> None:
    table = Table(title="Common schedules")
    table.add_column("Expression", style="cyan", no_wrap=True)
    table.add_column("Meaning")
    for example in examples:
        table.add_row(example.expression, example.description)
    console.print(table)


def format_matches(expression: str, description: str, results: list[MatchResult]) -> None:
    console.print(f"[bold]Testing:[/bold] {escape(expression)}")
    console.print(f"Meaning: {escape(description)}", style="dim")
    console.print()
    for result in results:
        stamp = result.instant.strftime(_DATE_FORMAT)
        if result.matches:
            console.print(f"  {stamp} - [green]RUNS[/green]")
        else:
            console.print(f"  {stamp} - [red]does not run[/red]")


def format_range(
    expression: str, description: str, start: datetime, end: datetime, runs: list[datetime]
) -> None:
    console.print(f"[bold]Testing:[/bold] {escape(expression)}")
    console.print(f"Meaning: {escape(description)}", style="dim")
    console.print(f"Range: {start:%Y-%m-%d} to {end:%Y-%m-%d}")
    console.print()
    if not runs:
        console.print("No runs found in this range.", style="yellow")
        return
    console.print(f"{len(runs)} runs in this range:", style="green")
    for i, run in enumerate(runs[:20], start=1):
        console.print(f"  {i:>3}. {run.strftime(_DATE_FORMAT)}")
    if len(runs) > 20:
        console.print(f"  ... and {len(runs) - 20} more", style="dim")
