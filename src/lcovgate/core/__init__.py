"""Core LCOV analysis: reading, filtering, aggregating and threshold checks."""

from __future__ import annotations

from .config import (
    BRANCHES_MIN_ENV,
    DEFAULT_EXTENSION,
    DEFAULT_LABEL,
    DEFAULT_LCOV_PATH,
    DEFAULT_MINIMUM,
    DEFAULT_SOURCE_DIR,
    LINES_MIN_ENV,
    LOG_FORMAT,
)
from .files import read_report, split_lines
from .lcov import CoverageTotals, ReportCoverage, aggregate, parse_count
from .path_filter import SourceFilter, is_included_file, normalize_report_path
from .thresholds import Thresholds, check_thresholds, evaluate_thresholds, load_thresholds, pct

__all__ = [
    "BRANCHES_MIN_ENV",
    "DEFAULT_EXTENSION",
    "DEFAULT_LABEL",
    "DEFAULT_LCOV_PATH",
    "DEFAULT_MINIMUM",
    "DEFAULT_SOURCE_DIR",
    "LINES_MIN_ENV",
    "LOG_FORMAT",
    "CoverageTotals",
    "ReportCoverage",
    "SourceFilter",
    "Thresholds",
    "aggregate",
    "check_thresholds",
    "evaluate_thresholds",
    "is_included_file",
    "load_thresholds",
    "normalize_report_path",
    "parse_count",
    "pct",
    "read_report",
    "split_lines",
]
