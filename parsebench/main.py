from __future__ import annotations

import json
import sys
from typing import List, Optional

import typer

from parsebench.config import get_settings
from parsebench.domain.materialization import to_record
from parsebench.domain.models import Scenario, TimingMode
from parsebench.generator import generate
from parsebench.infrastructure.xml_codec import build_document, serialize_document
from parsebench.orchestrator import (
    ParityError,
    RunConfig,
    available_strategies,
    resolve_strategy,
    run_strategy_sweep,
    run_sweep,
    verify_parity,
)
from parsebench.reporter import (
    print_results,
    print_strategy_results,
    render_plain,
    render_strategy_plain,
)
from parsebench.utils.logging import configure_logging

app = typer.Typer(help="Parse Bench CLI: exception-guarded vs status-return integer parsing.")


def _scenarios(scenario: str) -> List[Scenario]:
    if scenario == "all":
        return [Scenario.PRIMITIVE, Scenario.RECORDS]
    try:
        return [Scenario(scenario)]
    except ValueError:
        raise typer.BadParameter(
            f"Unknown scenario '{scenario}'. Use primitive, records or all.", param_hint="--scenario"
        ) from None


def _mode(mode: Optional[str]) -> Optional[TimingMode]:
    if mode is None:
        return None
    try:
        return TimingMode(mode)
    except ValueError:
        raise typer.BadParameter(
            f"Unknown timing mode '{mode}'. Use parse-only or full-pipeline.", param_hint="--mode"
        ) from None


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"seed={settings.benchmark_seed} count={settings.benchmark_count} "
        f"sweep={settings.benchmark_sweep_points}x{settings.benchmark_sweep_step} "
        f"bad_prefix={settings.benchmark_bad_prefix!r} | "
        f"primitive: fallback={settings.primitive_fallback} mode={settings.primitive_timing_mode} | "
        f"records: fallback={settings.record_fallback} mode={settings.record_timing_mode}"
    )


@app.command()
def strategies() -> None:
    """
    List available conversion strategies.
    """
    for name in available_strategies():
        strategy = resolve_strategy(name, fallback=0)
        typer.echo(f"{name}: {strategy.description}")


@app.command()
def run(
    scenario: str = typer.Option(
        "all",
        "--scenario",
        "-s",
        help="Scenario to run (primitive, records, all).",
    ),
    strategy: str = typer.Option(
        "both",
        "--strategy",
        help="Time both strategies side by side, or a single one (try_catch, try_parse).",
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", min=0, help="Entries per pass (default from settings)."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Generator seed (default from settings)."),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Timing window: parse-only or full-pipeline (default per scenario from settings).",
    ),
    fallback: Optional[int] = typer.Option(
        None, "--fallback", help="Value substituted for malformed input (default per scenario)."
    ),
    plain: bool = typer.Option(False, "--plain", help="Emit plain text lines instead of a table."),
    as_json: bool = typer.Option(False, "--json", help="Emit results as JSON."),
    profile: bool = typer.Option(False, "--profile", help="Attach peak RSS and CPU % per timing."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON on stderr."),
) -> None:
    """
    Sweep error rates 0%..90% and time each strategy at every point.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=json_logs or settings.log_json)

    if strategy != "both" and strategy not in available_strategies():
        raise typer.BadParameter(
            f"Unknown strategy '{strategy}'. Available: both, {', '.join(available_strategies())}",
            param_hint="--strategy",
        )
    timing_mode = _mode(mode)

    payload = []
    for selected in _scenarios(scenario):
        config = RunConfig(
            scenario=selected,
            count=count,
            seed=seed,
            mode=timing_mode,
            fallback=fallback,
            profile=profile,
        )
        if strategy == "both":
            rows = run_sweep(config)
            payload.append(
                {
                    "scenario": selected.value,
                    "rows": [row.model_dump(mode="json") for row in rows],
                }
            )
            if as_json:
                continue
            if plain:
                typer.echo(f"# {selected.value}")
                typer.echo(render_plain(rows), nl=False)
            else:
                print_results(rows)
        else:
            results = run_strategy_sweep(strategy, config)
            payload.append(
                {
                    "scenario": selected.value,
                    "results": [result.model_dump(mode="json") for result in results],
                }
            )
            if as_json:
                continue
            if plain:
                typer.echo(f"# {selected.value} / {strategy}")
                typer.echo(render_strategy_plain(results), nl=False)
            else:
                print_strategy_results(results)

    if as_json:
        typer.echo(json.dumps(payload, indent=2))


@app.command()
def sample(
    count: int = typer.Option(5, "--count", "-n", min=0, help="Number of items."),
    error_rate: float = typer.Option(
        0.5, "--error-rate", "-e", min=0.0, max=1.0, help="Fraction of corrupted ItemCost values."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Generator seed (default from settings)."),
) -> None:
    """
    Print the XML sample document fed to the records scenario.
    """
    settings = get_settings()
    records = generate(
        seed if seed is not None else settings.benchmark_seed,
        count,
        error_rate,
        settings.benchmark_bad_prefix,
    )
    tree = build_document(to_record(record) for record in records)
    typer.echo(serialize_document(tree, pretty=True).decode("utf-8"), nl=False)


@app.command()
def check(
    scenario: str = typer.Option("all", "--scenario", "-s", help="primitive, records or all."),
    count: int = typer.Option(10_000, "--count", "-n", min=0, help="Entries to compare."),
    error_rate: float = typer.Option(0.5, "--error-rate", "-e", min=0.0, max=1.0),
    seed: Optional[int] = typer.Option(None, "--seed", help="Generator seed (default from settings)."),
) -> None:
    """
    Verify both strategies produce identical values on the same input.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    for selected in _scenarios(scenario):
        try:
            report = verify_parity(
                RunConfig(scenario=selected, count=count, seed=seed), error_rate=error_rate
            )
        except ParityError as exc:
            typer.echo(f"{selected.value}: MISMATCH - {exc}", err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(
            f"{selected.value}: {report.checked} entries agree "
            f"({report.malformed} malformed -> fallback {report.fallback})"
        )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
