"""Deciding which ``SF:`` records of a report are counted."""

from __future__ import annotations

import posixpath
import re
from pathlib import Path

from lcovgate import logger

from .config import DEFAULT_EXTENSION, DEFAULT_SOURCE_DIR

_LEADING_DOT_SLASH = re.compile(r"^\./+")


def normalize_report_path(path: str) -> str:
    """Return *path* with forward slashes, ``.``/``..`` collapsed and no leading ``./``.

    Normalisation is purely lexical; the filesystem is never consulted. A
    trailing slash is kept, so directory entries never match a file suffix.
    """
    slashed = path.replace("\\", "/")
    normalized = posixpath.normpath(slashed)
    if slashed.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return _LEADING_DOT_SLASH.sub("", normalized)


class SourceFilter:
    """Match report paths against a source directory and file extension.

    A path is included when it ends with *extension* and lies under
    *source_dir*, either relative to *base* or as an absolute path below it.
    *base* defaults to the current working directory at construction time.
    """

    def __init__(
        self,
        *,
        source_dir: str = DEFAULT_SOURCE_DIR,
        extension: str = DEFAULT_EXTENSION,
        base: str | Path | None = None,
    ) -> None:
        root = str(base if base is not None else Path.cwd()).replace("\\", "/")
        source = source_dir.replace("\\", "/").strip("/")
        self._extension = extension
        self._prefixes = (f"{source}/", f"{root.rstrip('/')}/{source}/")

    @property
    def prefixes(self) -> tuple[str, str]:
        """The relative and absolute prefixes a path must start with."""
        return self._prefixes

    def __call__(self, path: str) -> bool:
        return self.allow(path)

    def allow(self, path: str) -> bool:
        """Return ``True`` if the record for *path* should be counted."""
        normalized = normalize_report_path(path)
        allowed = normalized.endswith(self._extension) and normalized.startswith(self._prefixes)
        logger.debug("source filter %s -> %s include=%s", path, normalized, allowed)
        return allowed


def is_included_file(
    path: str,
    *,
    base: str | Path | None = None,
    source_dir: str = DEFAULT_SOURCE_DIR,
    extension: str = DEFAULT_EXTENSION,
) -> bool:
    """Return ``True`` if *path* is a ``.sol`` file under ``src/`` (by default)."""
    return SourceFilter(source_dir=source_dir, extension=extension, base=base).allow(path)


__all__ = ["SourceFilter", "is_included_file", "normalize_report_path"]
