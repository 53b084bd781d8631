from __future__ import annotations

"""CLI entrypoint for edit-distance."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .algorithms import available_metrics, get_metric
from .config import InputTooLongError, load_pairs, load_settings
from .graphemes import grapheme_length
from .runner.batch import BatchRunner
from .scoring import reports

app = typer.Typer(help="Levenshtein and OSA edit distances over grapheme clusters.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def distance(
    one: str = typer.Argument(..., help="First string."),
    other: str = typer.Argument(..., help="Second string."),
    metric: str = typer.Option(
        "levenshtein", "--metric", "-m", help="Distance metric (levenshtein/osa)."
    ),
) -> None:
    try:
        func = get_metric(metric)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)
    console.print(func(one, other))


@app.command()
def compare(
    one: str = typer.Argument(..., help="First string."),
    other: str = typer.Argument(..., help="Second string."),
) -> None:
    table = Table(title=escape(f"{one!r} vs {other!r}"))
    table.add_column("metric")
    table.add_column("distance", justify="right")
    for name, func in sorted(available_metrics().items()):
        table.add_row(name, str(func(one, other)))
    console.print(table)
    console.print(
        f"Grapheme lengths: {grapheme_length(one)} / {grapheme_length(other)}"
    )


@app.command()
def batch(
    input_path: Path = typer.Argument(..., help="JSONL file of {pair_id, one, other}."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file."
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", help="Limit number of pairs processed."
    ),
    run_path: Optional[Path] = typer.Option(
        None, "--run-path", help="Directory to store run artefacts."
    ),
) -> None:
    if not input_path.exists():
        console.print(f"[red]Input not found:[/red] {escape(str(input_path))}")
        raise typer.Exit(code=1)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    run_dir = run_path or Path("runs") / f"{timestamp}_{input_path.stem}"
    try:
        settings = load_settings(config)
        results = BatchRunner(settings).run(
            load_pairs(input_path), limit=limit, run_dir=run_dir
        )
    except (FileNotFoundError, InputTooLongError, ValueError) as exc:
        console.print(f"[red]Batch failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    table = Table(title="Batch Distances")
    table.add_column("pair_id")
    for name in settings.metrics:
        table.add_column(name, justify="right")
    table.add_column("skipped", justify="right")

    for record in results:
        table.add_row(
            escape(record.pair_id),
            *(str(record.distances.get(name, "")) for name in settings.metrics),
            str(int(record.skipped)),
        )

    console.print(table)
    console.print(f"Artefacts written to [green]{escape(str(run_dir))}[/green]")


@app.command()
def report(
    run_path: Path = typer.Argument(..., help="Run directory containing trace.jsonl")
) -> None:
    if not run_path.exists():
        console.print(f"[red]Run path not found:[/red] {escape(str(run_path))}")
        raise typer.Exit(code=1)

    records = reports.load_trace(run_path)
    summary = reports.summarise(records)

    table = Table(title="Run Metrics")
    table.add_column("metric")
    table.add_column("value")
    for key, value in summary.items():
        table.add_row(escape(key), f"{value:.3f}" if isinstance(value, float) else str(value))

    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
