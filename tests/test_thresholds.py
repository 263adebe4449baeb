import math

import pytest

from lcovgate.core import CoverageTotals, Thresholds, check_thresholds, evaluate_thresholds, load_thresholds, pct
from lcovgate.errors import ConfigError, ThresholdViolation


@pytest.mark.parametrize(
    ("hit", "found", "expected"),
    [
        (0, 0, 100),
        (5, 0, 100),
        (1, 2, 50),
        (2, 3, 66.67),
        (1, 3, 33.33),
        (1, 8, 12.5),
        (0, 7, 0),
        (7, 7, 100),
        (5, 40000, 0.01),
        (1, 80000, 0),
    ],
)
def test_pct(hit: int, found: int, expected: float) -> None:
    assert pct(hit, found) == expected


@pytest.mark.parametrize(
    ("lines_min", "branches_min", "expected"),
    [
        (None, None, Thresholds(0.0, 0.0)),
        ("60", None, Thresholds(60.0, 0.0)),
        (" 80.5 ", "12", Thresholds(80.5, 12.0)),
        ("", "", Thresholds(0.0, 0.0)),
        ("1e1", "-5", Thresholds(10.0, -5.0)),
        ("0x10", "Infinity", Thresholds(16.0, math.inf)),
    ],
)
def test_load_thresholds(lines_min: str | None, branches_min: str | None, expected: Thresholds) -> None:
    assert load_thresholds(lines_min, branches_min) == expected


@pytest.mark.parametrize(
    ("lines_min", "branches_min"),
    [
        ("abc", "0"),
        ("0", "abc"),
        ("nan", "0"),
        ("80%", None),
        (None, "1,5"),
        ("1_0", None),
        ("inf", None),
        (None, "0x"),
    ],
)
def test_load_thresholds_rejects_non_numbers(lines_min: str | None, branches_min: str | None) -> None:
    with pytest.raises(ConfigError, match="COVERAGE_LINES_MIN and COVERAGE_BRANCHES_MIN must be numbers"):
        load_thresholds(lines_min, branches_min)


def test_evaluate_thresholds_passes_at_boundaries() -> None:
    totals = CoverageTotals(lines_found=10, lines_hit=8, branches_found=4, branches_hit=3)
    assert evaluate_thresholds(totals, Thresholds(lines=80, branches=75)) == []


def test_evaluate_thresholds_reports_each_metric() -> None:
    totals = CoverageTotals(lines_found=3, lines_hit=2, branches_found=2, branches_hit=1)
    violations = evaluate_thresholds(totals, Thresholds(lines=70, branches=60))
    assert violations == [
        ThresholdViolation("line", 66.67, 70.0),
        ThresholdViolation("branch", 50.0, 60.0),
    ]
    assert [str(v) for v in violations] == [
        "Line coverage 66.67% is below minimum 70%.",
        "Branch coverage 50% is below minimum 60%.",
    ]


def test_evaluate_thresholds_vacuous_full_coverage() -> None:
    assert evaluate_thresholds(CoverageTotals(), Thresholds(lines=100, branches=100)) == []
    violations = evaluate_thresholds(CoverageTotals(), Thresholds(lines=100.5))
    assert violations == [ThresholdViolation("line", 100.0, 100.5)]


def test_check_thresholds_raises_first_violation() -> None:
    totals = CoverageTotals(lines_found=2, lines_hit=1)
    check_thresholds(totals, Thresholds(lines=50))
    with pytest.raises(ThresholdViolation, match="Line coverage 50% is below minimum 60%.") as info:
        check_thresholds(totals, Thresholds(lines=60))
    assert info.value.metric == "line"


def test_infinite_minimum_message() -> None:
    violations = evaluate_thresholds(CoverageTotals(), load_thresholds("Infinity"))
    assert [str(v) for v in violations] == ["Line coverage 100% is below minimum Infinity%."]
