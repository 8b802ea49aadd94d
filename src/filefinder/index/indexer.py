"""File indexing pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence, Set

from filefinder.index.prefix import PrefixIndex
from filefinder.index.range_index import RangeIndex
from filefinder.models import FileRecord
from filefinder.utils.files import build_record, iter_file_paths

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexStats:
    indexed: int = 0
    failed: int = 0
    total_bytes: int = 0
    processed_files: list[Path] = field(default_factory=list)

    def increment(self, status: str, path: Path, size: int = 0) -> None:
        if status == "indexed":
            self.indexed += 1
            self.total_bytes += size
        else:
            self.failed += 1
        self.processed_files.append(path)


class FileCatalog:
    """Keeps the name and size indexes in step over one record set."""

    def __init__(self) -> None:
        self.names = PrefixIndex()
        self.sizes = RangeIndex()

    def __len__(self) -> int:
        return len(self.sizes)

    def add(self, record: FileRecord) -> None:
        self.names.insert(record)
        self.sizes.insert(record)

    def add_many(self, records: Iterable[FileRecord]) -> int:
        count = 0
        for record in records:
            self.add(record)
            count += 1
        return count

    def by_prefix(self, prefix: str) -> Set[FileRecord]:
        return self.names.query_prefix(prefix)

    def by_size(self, low: int, high: int) -> List[FileRecord]:
        return self.sizes.query(low, high)

    def close(self) -> None:
        self.names.close()
        self.sizes = RangeIndex()


class Indexer:
    """Scans paths on disk and feeds the records into a catalog."""

    def __init__(self, catalog: FileCatalog, *, include_hidden: bool = False) -> None:
        self.catalog = catalog
        self.include_hidden = include_hidden

    def index(self, paths: Sequence[Path]) -> IndexStats:
        """Index every file found under the given paths."""
        stats = IndexStats()
        for path in iter_file_paths(paths, include_hidden=self.include_hidden):
            try:
                record = build_record(path)
            except OSError as exc:
                LOGGER.error("Failed to stat %s: %s", path, exc)
                stats.increment("failed", path)
                continue

            LOGGER.debug("Indexing %s (%d bytes)", path, record.size)
            self.catalog.add(record)
            stats.increment("indexed", path, record.size)

        if not stats.processed_files:
            LOGGER.warning("No files found")
        return stats
