"""Core FileFinder data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, eq=False)
class FileRecord:
    """A file entry shared by reference between the indexes.

    Equality and hashing are by identity: two files with the same name and
    size are still distinct records.
    """

    name: str
    size: int
    path: Path | None = None

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"File size must be non-negative, got {self.size}")
