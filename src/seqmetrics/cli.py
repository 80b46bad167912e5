from __future__ import annotations

"""CLI entrypoint for seqmetrics."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import JobConfig, load_job_config
from .metrics import InvalidParameterError, damerau_levenshtein, tversky as tversky_index
from .runner.runner import PairRunner
from .scoring import reports
from .utils.helpers import squeeze as squeeze_operand
from .utils.logs import configure_logging

app = typer.Typer(help="Edit-distance and set-overlap metrics over symbol sequences.")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging threshold (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)


@app.command()
def distance(
    a: str = typer.Argument(..., help="First sequence."),
    b: str = typer.Argument(..., help="Second sequence."),
    squeeze: bool = typer.Option(
        False, "--squeeze", help="Drop consecutive duplicate symbols first."
    ),
    tokens: bool = typer.Option(
        False, "--tokens", help="Treat whitespace-separated words as symbols."
    ),
) -> None:
    """Print the Damerau-Levenshtein distance between A and B."""

    left = a.split() if tokens else a
    right = b.split() if tokens else b
    if squeeze:
        left, right = squeeze_operand(left), squeeze_operand(right)
    console.print(damerau_levenshtein(left, right))


@app.command()
def tversky(
    x: str = typer.Argument(..., help="First sequence."),
    y: str = typer.Argument(..., help="Second sequence."),
    alpha: float = typer.Option(1.0, "--alpha", help="Weight of symbols only in X."),
    beta: float = typer.Option(1.0, "--beta", help="Weight of symbols only in Y."),
    symmetric: bool = typer.Option(False, "--symmetric", help="Use the symmetric variant."),
) -> None:
    """Print the Tversky index between the symbol sets of X and Y."""

    try:
        value = tversky_index(x, y, alpha=alpha, beta=beta, symmetric=symmetric)
    except InvalidParameterError as exc:
        console.print(f"[red]Invalid parameters:[/red] {exc}")
        raise typer.Exit(code=1)
    console.print(f"{value:.3f}")


@app.command()
def batch(
    pairs: Path = typer.Argument(..., help="JSONL file of {id, a, b} pairs."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML job configuration."
    ),
    run_path: Optional[Path] = typer.Option(
        None, "--run-path", help="Directory to store run artefacts."
    ),
) -> None:
    """Score every pair of a pair file."""

    try:
        job = load_job_config(config) if config is not None else JobConfig()
        runner = PairRunner(job)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        run_dir = run_path or Path("runs") / f"{timestamp}_{job.metric}"
        results = runner.run_file(pairs, run_dir=run_dir)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Batch failed:[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"seqmetrics {job.metric}")
    table.add_column("pair_id")
    table.add_column("len_a", justify="right")
    table.add_column("len_b", justify="right")
    table.add_column("score", justify="right")

    for record in results:
        table.add_row(
            record.pair_id,
            str(record.a_length),
            str(record.b_length),
            f"{record.score:g}",
        )

    console.print(table)
    console.print(f"Artefacts written to [green]{run_dir}[/green]")


@app.command()
def report(
    run_path: Path = typer.Argument(..., help="Run directory containing results.jsonl")
) -> None:
    """Summarise a finished run."""

    if not run_path.exists():
        console.print(f"[red]Run path not found:[/red] {run_path}")
        raise typer.Exit(code=1)

    try:
        records = reports.load_results(run_path)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Report failed:[/red] {exc}")
        raise typer.Exit(code=1)
    summary = reports.summarise(records)

    table = Table(title="Run Metrics")
    table.add_column("metric")
    table.add_column("value")
    for key, value in summary.items():
        table.add_row(key, f"{value:.3f}" if isinstance(value, float) else str(value))

    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
