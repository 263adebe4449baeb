"""Coverage threshold parsing and evaluation utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lcovgate._format import to_number
from lcovgate.errors import ConfigError, ThresholdViolation

from .config import BRANCHES_MIN_ENV, DEFAULT_MINIMUM, LINES_MIN_ENV

if TYPE_CHECKING:
    from .lcov import CoverageTotals

_FULL_PERCENT = 100.0


@dataclass(frozen=True, slots=True)
class Thresholds:
    """Minimum acceptable line and branch coverage, in percent."""

    lines: float = 0.0
    branches: float = 0.0


def pct(hit: int, found: int) -> float:
    """Return ``hit / found`` as a percentage rounded half-up to two places.

    A metric with nothing to cover counts as fully covered.
    """
    if found == 0:
        return _FULL_PERCENT
    return math.floor((hit / found) * 10000 + 0.5) / 100


def _parse_minimum(raw: str) -> float:
    text = raw.strip()
    if not text:
        return 0.0
    value = to_number(text)
    if math.isnan(value):
        msg = f"not a number: {raw!r}"
        raise ValueError(msg)
    return value


def load_thresholds(lines_min: str | None = None, branches_min: str | None = None) -> Thresholds:
    """Return :class:`Thresholds` parsed from their string settings.

    ``None`` means unset and falls back to ``0``. Raises :class:`ConfigError`
    when either value is not numeric.
    """
    try:
        lines = _parse_minimum(DEFAULT_MINIMUM if lines_min is None else lines_min)
        branches = _parse_minimum(DEFAULT_MINIMUM if branches_min is None else branches_min)
    except ValueError as exc:
        msg = f"{LINES_MIN_ENV} and {BRANCHES_MIN_ENV} must be numbers."
        raise ConfigError(msg) from exc
    return Thresholds(lines=lines, branches=branches)


def evaluate_thresholds(totals: CoverageTotals, thresholds: Thresholds) -> list[ThresholdViolation]:
    """Return one violation per metric whose coverage is below its minimum."""
    violations: list[ThresholdViolation] = []
    line_pct = pct(totals.lines_hit, totals.lines_found)
    if line_pct < thresholds.lines:
        violations.append(ThresholdViolation("line", line_pct, thresholds.lines))
    branch_pct = pct(totals.branches_hit, totals.branches_found)
    if branch_pct < thresholds.branches:
        violations.append(ThresholdViolation("branch", branch_pct, thresholds.branches))
    return violations


def check_thresholds(totals: CoverageTotals, thresholds: Thresholds) -> None:
    """Raise the first :class:`ThresholdViolation` found, if any."""
    violations = evaluate_thresholds(totals, thresholds)
    if violations:
        raise violations[0]


__all__ = [
    "Thresholds",
    "check_thresholds",
    "evaluate_thresholds",
    "load_thresholds",
    "pct",
]
