"""Definition of the command line interface."""

from __future__ import annotations

import sys

import click

from lcovgate import __version__
from lcovgate.cli.errors import EXIT_FAILURE
from lcovgate.cli.util import GateOptions, _configure_runtime, run_gate
from lcovgate.core import (
    BRANCHES_MIN_ENV,
    DEFAULT_EXTENSION,
    DEFAULT_LABEL,
    DEFAULT_LCOV_PATH,
    DEFAULT_MINIMUM,
    DEFAULT_SOURCE_DIR,
    LINES_MIN_ENV,
)
from lcovgate.errors import LcovGateError


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("lcov_path", required=False, default=DEFAULT_LCOV_PATH, metavar="[LCOV_PATH]")
# thresholds
@click.option(
    "--lines-min",
    envvar=LINES_MIN_ENV,
    default=DEFAULT_MINIMUM,
    show_default=True,
    show_envvar=True,
    help="Minimum line coverage percentage",
)
@click.option(
    "--branches-min",
    envvar=BRANCHES_MIN_ENV,
    default=DEFAULT_MINIMUM,
    show_default=True,
    show_envvar=True,
    help="Minimum branch coverage percentage",
)
# record selection
@click.option(
    "--source-dir",
    default=DEFAULT_SOURCE_DIR,
    show_default=True,
    help="Only count files under this directory",
)
@click.option(
    "--extension",
    default=DEFAULT_EXTENSION,
    show_default=True,
    help="Only count files with this suffix",
)
# output
@click.option("--label", default=DEFAULT_LABEL, show_default=True, help="Prefix of the coverage summary lines")
@click.option("--files", "show_files", is_flag=True, help="Print a per-file coverage table")
@click.option("--debug", is_flag=True, help="Show full tracebacks for errors")
@click.option("-q", "--quiet", is_flag=True, help="Suppress logs, emit only errors")
@click.option("-v", "--verbose", is_flag=True, help="Emit diagnostic logging")
@click.version_option(__version__, "--version", message="%(version)s", help="Show the version and exit")
def cli(
    *,
    lcov_path: str,
    lines_min: str,
    branches_min: str,
    source_dir: str,
    extension: str,
    label: str,
    show_files: bool,
    debug: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Check LCOV line and branch coverage against minimum percentages.

    Reads LCOV_PATH (default coverage/lcov.info), counts only records for
    files under --source-dir ending in --extension, and exits with status 1
    when a minimum is not met.
    """
    opts = GateOptions(
        debug=debug,
        quiet=quiet,
        verbose=verbose,
        lcov_path=lcov_path,
        source_dir=source_dir,
        extension=extension,
        lines_min=lines_min,
        branches_min=branches_min,
        label=label,
        show_files=show_files,
    )
    _configure_runtime(quiet=quiet, verbose=verbose, debug=debug)

    try:
        status = run_gate(opts)
    except LcovGateError as e:
        click.echo(str(e), err=True)
        if opts.debug:
            raise
        sys.exit(EXIT_FAILURE)

    sys.exit(status)


def main() -> None:
    """Console-script entry point."""
    cli(prog_name="lcovgate")


__all__ = ["cli", "main"]
