"""
jsoncompare CLI - Command line interface for structural document comparison.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import DEFAULT_CONFIG_PATH, load_config
from ..core.loader import FORMATS, load_document
from ..diff.engine import DiffEngine
from ..diff.models import ComparisonResult
from ..exceptions import JSONCompareError
from ..report.csv_export import CSVExporter
from ..report.renderer import DiffRenderer

logger = logging.getLogger(__name__)

EXIT_DIFFERENCES = 1
EXIT_SETUP_ERROR = 2


def _fail(error: JSONCompareError) -> None:
    """Report a setup error and stop."""
    logger.debug("Setup error", exc_info=error)
    click.echo(f"Error: {error}", err=True)
    sys.exit(EXIT_SETUP_ERROR)


def _render(
    result: ComparisonResult,
    format: str,
    color: bool,
    first_name: Optional[str] = None,
    second_name: Optional[str] = None,
) -> str:
    renderer = DiffRenderer(color=color)
    if format == "json":
        return renderer.render_json(result, first_name, second_name)
    return renderer.render_terminal(result, first_name, second_name)


@click.group()
@click.version_option(version=__version__, prog_name="jsoncompare")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose):
    """
    jsoncompare - Structural diff for JSON and YAML documents

    Report every missing key, type mismatch, array length mismatch and
    value mismatch between two documents.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("file_a", type=click.Path(dir_okay=False))
@click.argument("file_b", type=click.Path(dir_okay=False))
@click.option("--format", "-f", type=click.Choice(["text", "json"]), default="text")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False), help="Also write a CSV report")
@click.option("--input-format", type=click.Choice(FORMATS), help="Force the document format")
@click.option("--sort-keys/--no-sort-keys", default=True, help="Visit object keys in sorted order")
@click.option("--color/--no-color", default=True, help="Colorize text output")
@click.option("--fail-on-diff", is_flag=True, help="Exit with status 1 when differences exist")
def diff(file_a, file_b, format, csv_path, input_format, sort_keys, color, fail_on_diff):
    """
    Compare two documents and show differences.

    FILE_A is the baseline document.
    FILE_B is the comparison document.
    """
    try:
        left = load_document(file_a, format=input_format)
        right = load_document(file_b, format=input_format)

        result = DiffEngine(sort_keys=sort_keys).compare(left, right)

        if csv_path:
            CSVExporter(Path(file_a).name, Path(file_b).name).write(result, csv_path)
    except JSONCompareError as e:
        _fail(e)

    click.echo(_render(result, format, color and format == "text", file_a, file_b), nl=False)
    if format == "json":
        click.echo()
    if csv_path:
        click.echo(f"CSV written to: {csv_path}", err=True)

    if fail_on_diff and not result.identical:
        sys.exit(EXIT_DIFFERENCES)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    envvar="JSONCOMPARE_CONFIG",
    type=click.Path(dir_okay=False),
    help="Path to the YAML configuration file",
)
@click.option("--fail-on-diff", is_flag=True, help="Exit with status 1 when differences exist")
def run(config_path, fail_on_diff):
    """
    Compare the two documents named in a configuration file.

    Prints the summary and writes the CSV report configured under
    output.csv_path.
    """
    try:
        config = load_config(config_path)

        left = load_document(config.input.first_path)
        right = load_document(config.input.second_path)

        result = DiffEngine(sort_keys=config.output.sort_keys).compare(left, right)

        if config.output.format == "json":
            click.echo(DiffRenderer(color=False).render_json(
                result, config.input.file_name_1, config.input.file_name_2
            ))
        else:
            click.echo(DiffRenderer(color=False).render_summary(result))

        if config.output.csv_path:
            CSVExporter(config.input.file_name_1, config.input.file_name_2).write(
                result, config.output.csv_path
            )
    except JSONCompareError as e:
        _fail(e)

    if fail_on_diff and not result.identical:
        sys.exit(EXIT_DIFFERENCES)


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
