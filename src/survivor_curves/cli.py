"""CLI interface for Survivor Curves."""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config import Settings
from .errors import LifeTableError
from .logging import configure_logging

app = typer.Typer(
    name="survivor-curves",
    help="Extract life-table survivor curves into a JSON dataset",
    add_completion=False,
)
console = Console()


def get_settings() -> Settings:
    """Load settings from the environment, exiting on invalid values."""
    try:
        return Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def fetch(
    start: int = typer.Option(None, "--start", help="First table year (inclusive)"),
    end: int = typer.Option(None, "--end", help="Last table year (inclusive)"),
    step: int = typer.Option(None, "--step", help="Years between tables"),
    output: Path = typer.Option(None, "--output", "-o", help="Output JSON file"),
    min_interval: float = typer.Option(None, "--min-interval", help="Seconds between requests"),
    log_level: str = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, ...)"),
):
    """Fetch every table year and write the combined dataset."""
    from .aggregate import batch_years, collect_curves
    from .export import write_dataset
    from .fetch import LifeTablePageFetcher
    from .net import AsyncRateLimiter, RateLimitConfig

    try:
        settings = get_settings().override(
            start_year=start,
            end_year=end,
            year_step=step,
            output_path=output,
            min_interval=min_interval,
            log_level=log_level.upper() if log_level else None,
        )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    configure_logging(settings.log_level)
    years = batch_years(settings.start_year, settings.end_year, settings.year_step)
    console.print(
        Panel(
            f"[bold]Years:[/bold] {years[0]}-{years[-1]} step {settings.year_step} "
            f"({len(years)} tables)\n[bold]Output:[/bold] {settings.output_path}",
            title="Survivor Curves",
        )
    )

    async def run():
        limiter = AsyncRateLimiter(RateLimitConfig(min_interval=settings.min_interval))
        async with LifeTablePageFetcher(
            limiter,
            url_template=settings.url_template,
            timeout=settings.timeout_seconds,
            user_agent=settings.user_agent,
        ) as fetcher:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                console=console,
            ) as progress:
                task = progress.add_task("Parsing tables...", total=len(years))
                return await collect_curves(
                    fetcher,
                    years,
                    on_year=lambda year: progress.update(
                        task, advance=1, description=f"Parsed {year}"
                    ),
                )

    try:
        dataset = asyncio.run(run())
    except LifeTableError as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print("[yellow]No output written.[/yellow]")
        raise typer.Exit(1)

    path = write_dataset(dataset, settings.output_path)
    console.print(f"[green]Wrote {len(dataset)} years to {path}[/green]")


@app.command()
def parse(
    file_path: Path = typer.Argument(..., help="Path to a saved life-table HTML page"),
    year: int = typer.Option(None, "--year", "-y", help="Table year to record the curve under"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the curve as a one-year dataset"),
    age: int = typer.Option(65, "--age", help="Age to report survivors at"),
):
    """Extract a survivor curve from a local HTML file."""
    from .export import write_dataset
    from .extraction import parse_life_table
    from .models import YearlyDataset

    if not file_path.exists():
        console.print(f"[red]Error: File not found: {file_path}[/red]")
        raise typer.Exit(1)
    if output and year is None:
        console.print("[red]Error: --year is required with --output[/red]")
        raise typer.Exit(1)

    try:
        curve = parse_life_table(file_path.read_text(encoding="utf-8", errors="replace"), year=year)
    except LifeTableError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Survivor curve: {file_path.name}")
    table.add_column("Ages", justify="right")
    table.add_column(f"Male @ {age}", justify="right")
    table.add_column(f"Female @ {age}", justify="right")
    table.add_row(str(curve.ages), *_at_age(curve, age))
    console.print(table)

    if output:
        dataset = YearlyDataset()
        dataset.add(year, curve)
        write_dataset(dataset, output)
        console.print(f"[green]Curve saved to {output}[/green]")


@app.command()
def show(
    file_path: Path = typer.Argument(Path("fileTables.json"), help="Dataset JSON file"),
    age: int = typer.Option(65, "--age", help="Age to report survivors at"),
):
    """Summarize a dataset written by `fetch`."""
    from .export import load_dataset

    if not file_path.exists():
        console.print(f"[red]Error: File not found: {file_path}[/red]")
        raise typer.Exit(1)

    try:
        dataset = load_dataset(file_path)
    except ValueError as e:
        console.print(f"[red]Error: invalid dataset {file_path}: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Survivors at age {age}")
    table.add_column("Year", justify="right")
    table.add_column("Ages", justify="right")
    table.add_column("Male", justify="right")
    table.add_column("Female", justify="right")
    for year in dataset.years():
        curve = dataset[year]
        table.add_row(str(year), str(curve.ages), *_at_age(curve, age))
    console.print(table)
    console.print(f"[dim]{len(dataset)} years[/dim]")


def _at_age(curve, age: int) -> tuple[str, str]:
    if not 0 <= age < curve.ages:
        return "-", "-"
    male, female = curve.survival_at(age)
    return f"{male:.5f}", f"{female:.5f}"


if __name__ == "__main__":
    app()
