from __future__ import annotations

from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from parsebench.domain.models import BenchmarkResult, SweepRow

PAIR_HEADER = f"{'FailureRate':>11}  {'Try-Catch':>15}  {'TryParse':>15}  {'Difference':>16}\n"
SINGLE_HEADER = f"{'FailureRate':>11}  {'ExecutionTime':>15}\n"


def format_duration(seconds: float, signed: bool = False) -> str:
    """
    Render seconds as H:MM:SS.ffffff.

    Negative values keep a leading minus; `signed=True` adds a plus for
    positive ones (used for differences).
    """
    sign = "-" if seconds < 0 else ("+" if signed else "")
    total = round(abs(seconds), 6)
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{sign}{int(hours)}:{int(minutes):02d}:{secs:09.6f}"


def format_row(row: SweepRow) -> str:
    """
    One report line: error rate, try/catch time, try-parse time, difference.
    """
    return (
        f"{row.error_rate:>11.2%}  "
        f"{format_duration(row.try_catch.duration_seconds):>15}  "
        f"{format_duration(row.try_parse.duration_seconds):>15}  "
        f"{format_duration(row.difference_seconds, signed=True):>16}\n"
    )


def render_plain(rows: Sequence[SweepRow]) -> str:
    return PAIR_HEADER + "".join(format_row(row) for row in rows)


def render_strategy_plain(results: Sequence[BenchmarkResult]) -> str:
    lines = [
        f"{result.error_rate:>11.2%}  {format_duration(result.duration_seconds):>15}\n"
        for result in results
    ]
    return SINGLE_HEADER + "".join(lines)


def _title(sample: Optional[BenchmarkResult], heading: str) -> str:
    if sample is None:
        return heading
    return (
        f"{heading}\n[dim]scenario={sample.scenario.value} │ mode={sample.mode.value} "
        f"│ entries={sample.count:,}[/dim]"
    )


def print_results(rows: List[SweepRow], console: Optional[Console] = None) -> None:
    """
    Render paired sweep rows as a rich table.

    Differences are positive when the exception-guarded path was slower.
    """
    console = console or Console()

    if not rows:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(
        title=_title(rows[0].try_catch, "Exception vs Status-Return Parsing"),
        box=box.ROUNDED,
        caption="Difference = Try-Catch - TryParse",
    )
    table.add_column("FailureRate", justify="right", style="cyan", no_wrap=True)
    table.add_column("Try-Catch", justify="right", style="magenta")
    table.add_column("TryParse", justify="right", style="green")
    table.add_column("Difference", justify="right")

    for row in rows:
        diff = format_duration(row.difference_seconds, signed=True)
        diff_style = "red" if row.difference_seconds > 0 else "green"
        table.add_row(
            f"{row.error_rate:.2%}",
            format_duration(row.try_catch.duration_seconds),
            format_duration(row.try_parse.duration_seconds),
            f"[{diff_style}]{diff}[/{diff_style}]",
        )

    console.print(table)


def print_strategy_results(
    results: List[BenchmarkResult], console: Optional[Console] = None
) -> None:
    """Render a single-strategy sweep as a rich table."""
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(title=_title(results[0], f"Strategy: {results[0].strategy}"), box=box.ROUNDED)
    table.add_column("FailureRate", justify="right", style="cyan", no_wrap=True)
    table.add_column("ExecutionTime", justify="right", style="green")
    has_profile = any(r.peak_rss_bytes is not None for r in results)
    if has_profile:
        table.add_column("Peak Memory (MB)", justify="right", style="yellow")
        table.add_column("CPU %", justify="right", style="red")

    for result in results:
        cells = [f"{result.error_rate:.2%}", format_duration(result.duration_seconds)]
        if has_profile:
            mem_mb = (result.peak_rss_bytes or 0) / (1024 * 1024)
            cells.append(f"{mem_mb:.2f}")
            cells.append(f"{result.cpu_percent or 0.0:.1f}")
        table.add_row(*cells)

    console.print(table)


__all__ = [
    "format_duration",
    "format_row",
    "print_results",
    "print_strategy_results",
    "render_plain",
    "render_strategy_plain",
]
