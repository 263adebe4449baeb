"""Helpers that carry out the work behind the ``lcovgate`` command."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import TYPE_CHECKING

import click

from lcovgate import logger
from lcovgate._format import format_number
from lcovgate.core import (
    DEFAULT_EXTENSION,
    DEFAULT_LABEL,
    DEFAULT_LCOV_PATH,
    DEFAULT_SOURCE_DIR,
    LOG_FORMAT,
    SourceFilter,
    aggregate,
    evaluate_thresholds,
    load_thresholds,
    pct,
    read_report,
)
from lcovgate.render.tty_summary import render_tty_summary

from .errors import EXIT_FAILURE, EXIT_OK

if TYPE_CHECKING:  # pragma: no cover
    from lcovgate.core import CoverageTotals, Thresholds


@dataclasses.dataclass(slots=True)
class GateOptions:
    """Collected CLI options after parsing."""

    # --- global flags --------------------------------------------------- #
    debug: bool = False
    quiet: bool = False
    verbose: bool = False

    # --- input ---------------------------------------------------------- #
    lcov_path: str = DEFAULT_LCOV_PATH
    source_dir: str = DEFAULT_SOURCE_DIR
    extension: str = DEFAULT_EXTENSION

    # --- thresholds (raw strings, validated after the report is read) --- #
    lines_min: str | None = None
    branches_min: str | None = None

    # --- output --------------------------------------------------------- #
    label: str = DEFAULT_LABEL
    show_files: bool = False


def _configure_runtime(*, quiet: bool, verbose: bool, debug: bool) -> None:
    """Configure logging based on *quiet*/*verbose*/*debug*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose or debug else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    if debug:
        logger.debug("debug mode active")


def format_ratio(hit: int, found: int) -> str:
    """Return ``hit/found (pct%)``."""
    return f"{hit}/{found} ({format_number(pct(hit, found))}%)"


def write_summary(totals: CoverageTotals, thresholds: Thresholds, *, label: str = DEFAULT_LABEL) -> None:
    """Print the coverage ratios and the configured minimums to stdout."""
    click.echo(f"{label} line coverage: {format_ratio(totals.lines_hit, totals.lines_found)}")
    click.echo(f"{label} branch coverage: {format_ratio(totals.branches_hit, totals.branches_found)}")
    click.echo(
        f"Minimums - lines: {format_number(thresholds.lines)}%, "
        f"branches: {format_number(thresholds.branches)}%"
    )


def run_gate(opts: GateOptions) -> int:
    """Analyse the report described by *opts* and return the exit status.

    Missing input and invalid minimums propagate as
    :class:`~lcovgate.errors.LcovGateError`; threshold violations are printed
    to stderr and turned into :data:`EXIT_FAILURE`.
    """
    lines = read_report(opts.lcov_path)
    source_filter = SourceFilter(source_dir=opts.source_dir, extension=opts.extension)
    logger.debug("counting records under %s ending with %s", " or ".join(source_filter.prefixes), opts.extension)
    report = aggregate(lines, source_filter)

    thresholds = load_thresholds(opts.lines_min, opts.branches_min)

    if opts.show_files:
        click.echo(
            render_tty_summary(
                report,
                color=sys.stdout.isatty(),
                lines_min=thresholds.lines,
                branches_min=thresholds.branches,
            )
        )
    write_summary(report.totals, thresholds, label=opts.label)

    violations = evaluate_thresholds(report.totals, thresholds)
    for violation in violations:
        click.echo(str(violation), err=True)
    return EXIT_FAILURE if violations else EXIT_OK


__all__ = ["GateOptions", "format_ratio", "run_gate", "write_summary"]
