from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lcovgate._format import format_number
from lcovgate.core.thresholds import pct

if TYPE_CHECKING:
    from lcovgate.core.lcov import CoverageTotals, ReportCoverage


def _style_percent(value: float, minimum: float) -> str:
    text = f"{format_number(value)}%"
    if value < minimum:
        return f"[red]{text}[/red]"
    return f"[green]{text}[/green]"


def _row(label: str, counts: CoverageTotals, lines_min: float, branches_min: float) -> list[str]:
    return [
        escape(label),
        f"{counts.lines_hit}/{counts.lines_found}",
        _style_percent(pct(counts.lines_hit, counts.lines_found), lines_min),
        f"{counts.branches_hit}/{counts.branches_found}",
        _style_percent(pct(counts.branches_hit, counts.branches_found), branches_min),
    ]


def render_tty_summary(
    report: ReportCoverage,
    *,
    color: bool = True,
    lines_min: float = 0.0,
    branches_min: float = 0.0,
) -> str:
    """Render a Rich table with one row per included source file.

    Percentages below the matching minimum are highlighted in red. Paths are
    shown exactly as they appear on the report's ``SF:`` lines.
    """
    table = Table(title="Coverage Report", box=box.SIMPLE_HEAVY, header_style="bold", expand=True)

    table.add_column("File", overflow="fold")
    table.add_column("Lines\nHit/Found", justify="right")
    table.add_column("Lines\nCov.", justify="right")
    table.add_column("Branches\nHit/Found", justify="right")
    table.add_column("Branches\nCov.", justify="right")

    for path, counts in report.files.items():
        table.add_row(*_row(path, counts, lines_min, branches_min))

    table.add_section()
    totals = _row("Overall", report.totals, lines_min, branches_min)
    table.add_row(*(f"[bold]{cell}[/bold]" for cell in totals))

    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=100)
    console.print(table)
    return buf.getvalue().rstrip()


__all__ = ["render_tty_summary"]
