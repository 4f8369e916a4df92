"""Command-line interface for comparing lolbench results between toolchains."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .analysis.comparison import compare
from .analysis.join import build_benchmark_table
from .errors import CompareError
from .report import format_json, format_pipe_table, print_rich_table
from .storage.loader import load_measurements, load_run_plans

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
OUTPUT_FORMATS = ["pipe", "table", "json"]


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout carries only the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@click.command()
@click.version_option(version=__version__)
@click.argument(
    "data_dir",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.argument("base_toolchain")
@click.argument("new_toolchain")
@click.argument("event")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="pipe",
    show_default=True,
    help="Report format",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
def main(
    data_dir: Path,
    base_toolchain: str,
    new_toolchain: str,
    event: str,
    output_format: str,
    verbose: bool,
) -> None:
    """Compare lolbench results of two toolchains.

    DATA_DIR must contain the run-plans/ and measurements/ directories written
    by lolbench. EVENT names the measured event to compare, for example
    "instructions" or "nanoseconds". Benchmarks are listed by the size of
    their percentage change, largest first.

    Example:
        lolbench-compare ./data stable nightly instructions
    """
    configure_logging(verbose)

    try:
        run_plans = load_run_plans(data_dir)
        measurements = load_measurements(data_dir)
        table = build_benchmark_table(run_plans, measurements, event)
        rows = compare(table, base_toolchain, new_toolchain)
    except CompareError as e:
        logger.debug("Comparison failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "table":
        print_rich_table(rows, base_toolchain, new_toolchain)
    elif output_format == "json":
        click.echo(format_json(rows, base_toolchain, new_toolchain, event))
    else:
        for line in format_pipe_table(rows, base_toolchain, new_toolchain):
            click.echo(line)


if __name__ == "__main__":
    main()
