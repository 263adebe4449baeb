from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import pytest
from click.testing import CliRunner

RecordSpec = Mapping[str, Iterable[str]]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def lcov_content() -> Callable[..., str]:
    def build(records: RecordSpec, *, newline: str = "\n") -> str:
        lines = ["TN:"]
        for path, data in records.items():
            lines.append(f"SF:{path}")
            lines.extend(data)
            lines.append("end_of_record")
        return newline.join(lines) + newline

    return build


@pytest.fixture
def lcov_file(tmp_path: Path, lcov_content: Callable[..., str]) -> Callable[..., Path]:
    def write(records: RecordSpec, *, filename: str = "lcov.info", newline: str = "\n") -> Path:
        report = tmp_path / filename
        report.parent.mkdir(parents=True, exist_ok=True)
        report.write_bytes(lcov_content(records, newline=newline).encode("utf-8"))
        return report

    return write
