"""Single-pass aggregation of LCOV line and branch data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lcovgate import logger
from lcovgate._format import to_number

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

SOURCE_FILE = "SF:"
LINE_DATA = "DA:"
BRANCH_DATA = "BRDA:"
END_OF_RECORD = "end_of_record"

# BRDA count for a branch that was never taken (or not instrumented).
_BRANCH_NOT_TAKEN = "-"


@dataclass(slots=True)
class CoverageTotals:
    """Running hit/found counters for lines and branches."""

    lines_found: int = 0
    lines_hit: int = 0
    branches_found: int = 0
    branches_hit: int = 0

    def add_line(self, count: float) -> None:
        self.lines_found += 1
        if count > 0:
            self.lines_hit += 1

    def add_branch(self, count: float) -> None:
        self.branches_found += 1
        if count > 0:
            self.branches_hit += 1


@dataclass(slots=True)
class ReportCoverage:
    """Aggregate counters plus the per-file breakdown they were summed from."""

    totals: CoverageTotals = field(default_factory=CoverageTotals)
    files: dict[str, CoverageTotals] = field(default_factory=dict)


def parse_count(raw: str) -> float:
    """Convert an LCOV execution count leniently.

    Blank counts are ``0``; anything that is not a number (``"abc"``,
    ``"1_0"``) comes back as ``nan`` so that it never compares ``> 0``.
    """
    return to_number(raw)


def aggregate(lines: Iterable[str], include: Callable[[str], bool]) -> ReportCoverage:
    """Accumulate ``DA``/``BRDA`` counts for every record *include* accepts.

    Records are delimited by ``SF:`` and ``end_of_record``. Rows with too few
    comma separated fields are skipped; other prefixes are ignored.
    """
    report = ReportCoverage()
    current: CoverageTotals | None = None

    for line in lines:
        if line.startswith(SOURCE_FILE):
            path = line[len(SOURCE_FILE) :].strip()
            current = report.files.setdefault(path, CoverageTotals()) if include(path) else None
            continue

        if line == END_OF_RECORD:
            current = None
            continue

        if current is None:
            continue

        if line.startswith(LINE_DATA):
            parts = line[len(LINE_DATA) :].split(",")
            if len(parts) >= 2:  # noqa: PLR2004
                count = parse_count(parts[1])
                current.add_line(count)
                report.totals.add_line(count)
            continue

        if line.startswith(BRANCH_DATA):
            parts = line[len(BRANCH_DATA) :].split(",")
            if len(parts) >= 4:  # noqa: PLR2004
                raw = parts[3]
                count = 0.0 if raw == _BRANCH_NOT_TAKEN else parse_count(raw)
                current.add_branch(count)
                report.totals.add_branch(count)

    logger.debug(
        "aggregated %d included file(s): lines %d/%d, branches %d/%d",
        len(report.files),
        report.totals.lines_hit,
        report.totals.lines_found,
        report.totals.branches_hit,
        report.totals.branches_found,
    )
    return report


__all__ = [
    "BRANCH_DATA",
    "END_OF_RECORD",
    "LINE_DATA",
    "SOURCE_FILE",
    "CoverageTotals",
    "ReportCoverage",
    "aggregate",
    "parse_count",
]
