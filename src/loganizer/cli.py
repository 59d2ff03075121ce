import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.analyzer import LogAnalyzer
from .core.loader import read_configs
from .core.records import LogResult
from .core.reporter import export_report, results_to_json, summarize
from .utils.config import Config
from .utils.constants import GENERIC_MESSAGE_TEMPLATE, MESSAGE_TEMPLATES
from .utils.helpers import ConfigError, ExportError, format_duration
from .utils.logging_utils import log_duration, setup_logging

console = Console()
logger = logging.getLogger(__name__)


def create_analyzer(
    settings: Config,
    seed: Optional[int] = None,
    failure_rate: Optional[float] = None,
    max_workers: Optional[int] = None,
) -> LogAnalyzer:
    """Create an analyzer from settings, with command line overrides applied"""
    if seed is not None:
        settings.set("analysis.seed", seed)
    if failure_rate is not None:
        settings.set("analysis.failure_rate", failure_rate)
    if max_workers is not None:
        settings.set("processing.max_workers", max_workers)
    return LogAnalyzer.from_config(settings)


def print_results(results: List[LogResult], verbose: bool = False) -> None:
    """Print analysis results as a table"""
    table = Table(title="Analysis Results")
    table.add_column("ID")
    table.add_column("Status")
    table.add_column("Time", justify="right")
    table.add_column("Details")

    for result in results:
        if result.succeeded:
            status = f"[green]{result.status.value}[/green]"
            details = result.message
        else:
            status = f"[red]{result.status.value}[/red]"
            details = result.error.describe() if verbose else result.error_details
        table.add_row(
            escape(result.log_id), status, format_duration(result.process_time), escape(details)
        )

    console.print(table)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--settings",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON settings file (delays, failure rate, workers)",
)
@click.option("--log-file", type=click.Path(dir_okay=False), help="Write JSON logs to this file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings: Optional[str], log_file: Optional[str]):
    """Loganizer - concurrent batch log file analysis"""
    setup_logging(
        logging.DEBUG if verbose else logging.INFO,
        log_file=log_file,
        console=Console(stderr=True),
    )
    try:
        config = Config(settings)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))

    ctx.ensure_object(dict)
    ctx.obj["settings"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option(
    "--config", "-c", "config_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Path to the JSON configuration file",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    help="Path to export the analysis report to JSON",
)
@click.option("--seed", type=int, help="Seed for simulated delays and failures")
@click.option(
    "--failure-rate",
    type=click.FloatRange(0.0, 1.0),
    help="Probability of a simulated parsing failure",
)
@click.option("--max-workers", type=click.IntRange(min=1), help="Cap on concurrent workers")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
@click.pass_context
def analyze(
    ctx: click.Context,
    config_path: str,
    output: Optional[str],
    seed: Optional[int],
    failure_rate: Optional[float],
    max_workers: Optional[int],
    output_format: str,
):
    """Analyze the log files listed in a configuration file"""
    settings: Config = ctx.obj["settings"]
    verbose: bool = ctx.obj["verbose"]

    try:
        configs = read_configs(config_path)
    except ConfigError as e:
        console.print(f"[red]Error reading configuration file:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    try:
        analyzer = create_analyzer(settings, seed, failure_rate, max_workers)
    except ValueError as e:
        raise click.ClickException(f"Invalid settings: {e}")

    if output_format == "text":
        console.print(
            f"Successfully loaded {len(configs)} log configurations from {escape(config_path)}.",
            soft_wrap=True,
        )
        console.print("Starting concurrent analysis...")

    start_time = time.perf_counter()
    with log_duration(logger, "Batch analysis took {duration}", level=logging.DEBUG):
        results = analyzer.analyze_all(configs)
    total_time = time.perf_counter() - start_time

    if output_format == "json":
        click.echo(results_to_json(results, indent=settings.get("output.indent", 2)))
    else:
        console.print(f"\nAnalysis completed in {format_duration(total_time)}")
        console.print(f"Processed {len(results)} log files\n")
        print_results(results, verbose=verbose)
        summary = summarize(results)
        console.print(
            f"\nSummary: {summary['successful']} successful, {summary['failed']} failed"
        )

    if output:
        if output_format == "text":
            console.print(f"\nExporting results to {escape(output)}...", soft_wrap=True)
        try:
            export_report(Path(output), results, indent=settings.get("output.indent", 2))
        except ExportError as e:
            console.print(f"[red]Error exporting results:[/red] {escape(str(e))}", soft_wrap=True)
            sys.exit(1)
        if output_format == "text":
            console.print("Export complete.")
    elif output_format == "text":
        console.print("\nOutput path not provided. Results will not be exported to a file.")


@cli.command("log-types")
def log_types():
    """List the log types with dedicated analysis messages"""
    table = Table(title="Recognized Log Types")
    table.add_column("Type")
    table.add_column("Message")

    for log_type, template in MESSAGE_TEMPLATES.items():
        table.add_row(log_type, template.format(count="N"))
    table.add_row("[dim]other[/dim]", GENERIC_MESSAGE_TEMPLATE.format(count="N"))

    console.print(table)


if __name__ == "__main__":
    cli()
