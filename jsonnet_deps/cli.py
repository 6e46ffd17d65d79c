"""Click CLI with deps and analyze subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from jsonnet_deps import __version__
from jsonnet_deps.config import build_config
from jsonnet_deps.errors import JsonnetDepsError
from jsonnet_deps.formatter import format_analysis, format_results
from jsonnet_deps.models import OutputFormat
from jsonnet_deps.pipeline import run_analyze, run_deps

_FORMAT_CHOICES = [fmt.value for fmt in OutputFormat]

_jpath_option = click.option(
    "-J", "--jpath", "jpaths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Library search directory, checked after the importing file's directory. "
         "Repeatable; JSONNET_PATH entries are searched after these.",
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details to stderr")
def cli(verbose: bool):
    """jsonnet-deps: list the files a Jsonnet file depends on."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("roots", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@_jpath_option
@click.option("--format", "-f", "output_format", type=click.Choice(_FORMAT_CHOICES), default="text",
              help="Output format")
@click.option("--keep-going", "-k", is_flag=True,
              help="Keep resolving the remaining roots after one fails")
@click.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, path_type=Path),
              help="Write the result to a file instead of stdout")
def deps(
    roots: tuple[Path, ...],
    jpaths: tuple[Path, ...],
    output_format: str,
    keep_going: bool,
    output_file: Path | None,
):
    """Print every file that can affect the output of each ROOT."""
    config = build_config(roots, jpaths, output_format, keep_going)

    try:
        results = run_deps(config)
    except JsonnetDepsError as e:
        raise click.ClickException(str(e))

    text = format_results(results, config.output_format)
    if output_file:
        output_file.write_text(text)
    else:
        click.echo(text, nl=False)

    failures = [r for r in results if not r.ok]
    for result in failures:
        click.echo(click.style(f"Error: {result.error}", fg="red"), err=True)
    if failures:
        raise click.exceptions.Exit(1)


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@_jpath_option
def analyze(files: tuple[Path, ...], jpaths: tuple[Path, ...]):
    """Print the direct imports of each FILE, split into leaf and deep."""
    config = build_config(files, jpaths)

    try:
        analyses = run_analyze(config)
    except JsonnetDepsError as e:
        raise click.ClickException(str(e))

    for path, analysis in analyses:
        click.echo(format_analysis(path, analysis), nl=False)


if __name__ == "__main__":
    cli()
