"""Tests for the search interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from filefinder.index.indexer import FileCatalog
from filefinder.index.search import SearchResult, Searcher
from filefinder.models import FileRecord


@pytest.fixture
def catalog() -> FileCatalog:
    catalog = FileCatalog()
    catalog.add_many(
        [
            FileRecord(name="beta.txt", size=15, path=Path("/d/beta.txt")),
            FileRecord(name="Album.txt", size=20, path=Path("/d/Album.txt")),
            FileRecord(name="alpha.txt", size=10, path=Path("/d/alpha.txt")),
        ]
    )
    return catalog


class TestSearchResult:
    """Test SearchResult dataclass."""

    def test_create_search_result(self) -> None:
        """Should create SearchResult with all fields."""
        result = SearchResult(path=Path("/x.txt"), name="x.txt", size=3)

        assert result.path == Path("/x.txt")
        assert result.name == "x.txt"
        assert result.size == 3


class TestSearcher:
    """Test Searcher class."""

    def test_by_prefix_sorted_by_name(self, catalog: FileCatalog) -> None:
        """Should return prefix matches ordered case-insensitively."""
        results = Searcher(catalog).by_prefix("AL")

        assert [r.name for r in results] == ["Album.txt", "alpha.txt"]

    def test_by_prefix_no_match(self, catalog: FileCatalog) -> None:
        """Should return an empty list for unknown prefixes."""
        assert Searcher(catalog).by_prefix("z") == []

    def test_by_prefix_limit(self, catalog: FileCatalog) -> None:
        """Should cap the number of results."""
        results = Searcher(catalog).by_prefix("", limit=2)

        assert [r.name for r in results] == ["Album.txt", "alpha.txt"]

    def test_by_size_ascending(self, catalog: FileCatalog) -> None:
        """Should keep ascending size order."""
        results = Searcher(catalog).by_size(20, 10)

        assert [(r.name, r.size) for r in results] == [
            ("alpha.txt", 10),
            ("beta.txt", 15),
            ("Album.txt", 20),
        ]
        assert results[0].path == Path("/d/alpha.txt")

    def test_by_size_limit(self, catalog: FileCatalog) -> None:
        """Should return only the smallest matches when limited."""
        results = Searcher(catalog).by_size(0, 100, limit=1)

        assert [r.size for r in results] == [10]

    def test_empty_catalog(self) -> None:
        """Should handle an empty catalog."""
        searcher = Searcher(FileCatalog())

        assert searcher.by_prefix("") == []
        assert searcher.by_size(0, 10) == []
