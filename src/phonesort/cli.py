from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from .complexity import fit_models
from .config import load_config
from .errors import ArgumentError, PhoneSortError
from .runner import append_result, run_phone_sort
from .sorting import SortMethod
from .summarize import summarize_runs

app = typer.Typer(
    help="Generate random phone numbers and sort them with a [bold]naive[/bold] or [bold]bitwise[/bold] sort.",
    rich_markup_mode="rich",
    add_completion=False,
)
summary_app = typer.Typer(
    help="Summarize phonesort run records written with --results.",
    rich_markup_mode="rich",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

# plain non-negative decimal, no sign, separators or padding
_COUNT_PATTERN = re.compile(r"\d+", re.ASCII)


def parse_command_line(count: Optional[str], method: Optional[str]) -> Tuple[int, SortMethod]:
    if count is None or not _COUNT_PATTERN.fullmatch(count):
        raise ArgumentError("Specify a count of phone numbers.")
    return int(count), SortMethod.parse(method)


@app.command()
def main(
    count: Optional[str] = typer.Argument(None, help="Number of phone numbers to generate"),
    method: Optional[str] = typer.Argument(None, help="Sort method: naive or bitwise"),
    config: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Path to YAML config"),
    out_dir: Optional[Path] = typer.Option(None, file_okay=False, help="Directory for the input and output files"),
    seed: Optional[int] = typer.Option(None, help="Random seed for the generated numbers"),
    results: Optional[Path] = typer.Option(None, dir_okay=False, help="Append a JSONL run record to this file"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress progress output"),
):
    """Create InputPhoneNumbers.txt, then sort it into OutputPhoneNumbers.txt.

    [bold]Example:[/bold]
        phonesort 1000000 bitwise
    """
    def notify(message: str, elapsed: float) -> None:
        if not quiet:
            console.print(f"[dim]{elapsed:8.3f}s[/dim]  {message}", highlight=False)

    try:
        phone_number_count, sort_method = parse_command_line(count, method)
        cfg = load_config(config)
        if out_dir is not None:
            cfg.files.directory = out_dir
        if seed is not None:
            cfg.seed = seed
        if results is not None:
            cfg.results = results

        result = run_phone_sort(phone_number_count, sort_method, cfg, notify=notify)
        console.print(f"Generation took {result.generate_seconds:.3f} seconds.", highlight=False)
        console.print(f"Sort took {result.sort_seconds:.3f} seconds.", highlight=False)
        if cfg.results is not None:
            append_result(result, cfg.results)
            if not quiet:
                console.print(f"[green]✓[/green] Appended run to [bold]{cfg.results}[/bold]")
        console.print()
    except (PhoneSortError, OSError, ValueError) as exc:
        err_console.print(f"{type(exc).__name__}: {exc}", style="bold red", markup=False, highlight=False)
        raise typer.Exit(1)


@summary_app.command()
def summary(
    runs: Path = typer.Option(Path("runs.jsonl"), exists=True, dir_okay=False, help="Path to JSONL run records"),
    out_csv: Optional[Path] = typer.Option(None, dir_okay=False, help="Optional path to save the summary CSV"),
    fit: bool = typer.Option(False, help="Fit growth models to sort time per method"),
):
    """Show median and mean timings per sort method and count."""
    df = summarize_runs(runs)
    skipped = df.attrs.get("skipped", 0)
    if skipped:
        console.print(f"[yellow]Skipped {skipped} malformed line(s) in {runs}.[/yellow]")
    if df.empty:
        console.print("[yellow]No runs found in the file.[/yellow]")
        return

    table = Table(title="Phone number sort runs")
    table.add_column("Method")
    table.add_column("Count", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Generate (s)", justify="right")
    table.add_column("Sort median (s)", justify="right")
    table.add_column("Sort mean (s)", justify="right")
    table.add_column("RSS after run (MB)", justify="right")
    for _, row in df.iterrows():
        table.add_row(
            str(row["method"]),
            f"{int(row['count']):,}",
            str(int(row["runs"])),
            f"{row['generate_seconds_median']:.3f}",
            f"{row['sort_seconds_median']:.3f}",
            f"{row['sort_seconds_mean']:.3f}",
            f"{row['rss_mb_median']:.2f}",
        )
    console.print(table)

    if out_csv:
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out_csv, index=False)
        console.print(f"Wrote summary to {out_csv}")

    if fit:
        fits = fit_models(df)
        if fits.empty:
            console.print("[yellow]Need at least two counts per method to fit a model.[/yellow]")
            return
        for _, row in fits.iterrows():
            console.print(f"[bold]{row['method']}[/bold]: best fit {row['model']}")


if __name__ == "__main__":
    app()
