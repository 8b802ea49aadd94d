"""Search interface over a file catalog."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from filefinder.index.indexer import FileCatalog
from filefinder.models import FileRecord
from filefinder.utils.text import normalize_name


@dataclass(slots=True)
class SearchResult:
    path: Path | None
    name: str
    size: int


def _to_results(records: Iterable[FileRecord], limit: int | None) -> List[SearchResult]:
    results: List[SearchResult] = []
    for record in records:
        if limit is not None and len(results) >= limit:
            break
        results.append(SearchResult(path=record.path, name=record.name, size=record.size))
    return results


class Searcher:
    """High-level API to query a catalog by name prefix or size range."""

    def __init__(self, catalog: FileCatalog) -> None:
        self.catalog = catalog

    def by_prefix(self, prefix: str, *, limit: int | None = None) -> List[SearchResult]:
        records = sorted(
            self.catalog.by_prefix(prefix),
            key=lambda record: (normalize_name(record.name), str(record.path or "")),
        )
        return _to_results(records, limit)

    def by_size(self, low: int, high: int, *, limit: int | None = None) -> List[SearchResult]:
        return _to_results(self.catalog.by_size(low, high), limit)
