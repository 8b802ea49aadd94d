"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from filefinder.models import FileRecord


def _is_hidden(path: Path, base: Path) -> bool:
    try:
        parts = path.relative_to(base).parts
    except ValueError:
        parts = path.parts
    return any(part.startswith(".") for part in parts)


def iter_file_paths(inputs: Iterable[Path], *, include_hidden: bool = False) -> Iterator[Path]:
    """Yield regular file paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            for child in sorted(item.rglob("*")):
                if not include_hidden and _is_hidden(child, item):
                    continue
                if child.is_file():
                    yield child
        elif item.is_file():
            yield item


def build_record(path: Path) -> FileRecord:
    """Create a FileRecord from a file on disk."""
    stat = path.stat()
    return FileRecord(name=path.name, size=stat.st_size, path=path)
