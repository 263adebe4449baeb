"""Central configuration and constants for ``lcovgate``."""

from __future__ import annotations

# Report read when no path is given on the command line.
DEFAULT_LCOV_PATH = "coverage/lcov.info"

# Environment variables holding the coverage minimums (percentages).
LINES_MIN_ENV = "COVERAGE_LINES_MIN"
BRANCHES_MIN_ENV = "COVERAGE_BRANCHES_MIN"
DEFAULT_MINIMUM = "0"

# Only records for files under this directory with this suffix are counted.
DEFAULT_SOURCE_DIR = "src"
DEFAULT_EXTENSION = ".sol"

# Prefix of the two coverage summary lines.
DEFAULT_LABEL = "Solidity"

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


__all__ = [
    "BRANCHES_MIN_ENV",
    "DEFAULT_EXTENSION",
    "DEFAULT_LABEL",
    "DEFAULT_LCOV_PATH",
    "DEFAULT_MINIMUM",
    "DEFAULT_SOURCE_DIR",
    "LINES_MIN_ENV",
    "LOG_FORMAT",
]
