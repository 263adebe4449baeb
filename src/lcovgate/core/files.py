"""Reading LCOV reports from disk."""

from __future__ import annotations

import re
from pathlib import Path

from lcovgate import logger
from lcovgate.errors import MissingInputError

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    r"""Split *text* on ``\n`` optionally preceded by ``\r``.

    Unlike :meth:`str.splitlines` no other separators are honoured, and a
    trailing newline yields a final empty string.
    """
    return _LINE_BREAK.split(text)


def read_report(path: str | Path) -> list[str]:
    """Return the lines of the LCOV report at *path*.

    Raises :class:`MissingInputError` if *path* is not an existing file.
    Bytes that are not valid UTF-8 are replaced rather than rejected.
    """
    report = Path(path)
    if not report.is_file():
        raise MissingInputError(str(path))
    text = report.read_text(encoding="utf-8", errors="replace")
    lines = split_lines(text)
    logger.debug("read %d lines from %s", len(lines), report)
    return lines


__all__ = ["read_report", "split_lines"]
