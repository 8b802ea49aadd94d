"""Tests for FileCatalog and Indexer."""

from pathlib import Path
from unittest.mock import patch

import pytest

from filefinder.index.indexer import FileCatalog, IndexStats, Indexer
from filefinder.models import FileRecord


class TestIndexStats:
    """Test IndexStats tracking."""

    def test_init_defaults(self):
        """Test default initialization."""
        stats = IndexStats()
        assert stats.indexed == 0
        assert stats.failed == 0
        assert stats.total_bytes == 0
        assert stats.processed_files == []

    def test_increment_indexed(self):
        """Test incrementing indexed count."""
        stats = IndexStats()
        path = Path("/tmp/test.txt")

        stats.increment("indexed", path, 120)

        assert stats.indexed == 1
        assert stats.failed == 0
        assert stats.total_bytes == 120
        assert path in stats.processed_files

    def test_increment_failed(self):
        """Test incrementing failed count for any other status."""
        stats = IndexStats()
        path = Path("/tmp/test.txt")

        stats.increment("failed", path, 99)

        assert stats.indexed == 0
        assert stats.failed == 1
        assert stats.total_bytes == 0
        assert path in stats.processed_files


class TestFileCatalog:
    """Test FileCatalog keeps both indexes in step."""

    def test_add_feeds_both_indexes(self):
        catalog = FileCatalog()
        record = FileRecord(name="alpha.txt", size=10)

        catalog.add(record)

        assert catalog.by_prefix("AL") == {record}
        assert catalog.by_size(0, 100) == [record]
        assert len(catalog) == 1

    def test_add_many(self):
        catalog = FileCatalog()
        records = [FileRecord(name=f"f{i}", size=i) for i in range(5)]

        assert catalog.add_many(records) == 5
        assert catalog.by_prefix("") == set(records)
        assert catalog.by_size(4, 1) == records[1:5]

    def test_empty_catalog(self):
        catalog = FileCatalog()
        assert catalog.by_prefix("") == set()
        assert catalog.by_size(0, 10) == []
        assert len(catalog) == 0

    def test_close(self):
        catalog = FileCatalog()
        catalog.add(FileRecord(name="a", size=1))

        catalog.close()

        assert len(catalog) == 0
        assert catalog.by_prefix("") == set()


class TestIndexer:
    """Test Indexer scanning."""

    def test_index_directory(self, tmp_path: Path):
        (tmp_path / "alpha.txt").write_bytes(b"a" * 10)
        (tmp_path / "album.txt").write_bytes(b"b" * 20)
        (tmp_path / "beta.txt").write_bytes(b"c" * 15)
        catalog = FileCatalog()

        stats = Indexer(catalog).index([tmp_path])

        assert stats.indexed == 3
        assert stats.failed == 0
        assert stats.total_bytes == 45
        assert {r.name for r in catalog.by_prefix("al")} == {"alpha.txt", "album.txt"}
        assert [r.name for r in catalog.by_size(20, 10)] == ["alpha.txt", "beta.txt", "album.txt"]

    def test_index_empty_directory_logs_warning(self, tmp_path: Path, caplog):
        catalog = FileCatalog()

        with caplog.at_level("WARNING"):
            stats = Indexer(catalog).index([tmp_path])

        assert stats.indexed == 0
        assert "No files found" in caplog.text

    def test_hidden_files(self, tmp_path: Path):
        (tmp_path / ".hidden").write_text("x")
        (tmp_path / "shown").write_text("x")

        default = FileCatalog()
        Indexer(default).index([tmp_path])
        with_hidden = FileCatalog()
        Indexer(with_hidden, include_hidden=True).index([tmp_path])

        assert len(default) == 1
        assert len(with_hidden) == 2

    def test_stat_failure_is_counted(self, tmp_path: Path, caplog):
        (tmp_path / "ok.txt").write_text("ok")
        (tmp_path / "broken.txt").write_text("broken")
        catalog = FileCatalog()

        def fake_build(path: Path) -> FileRecord:
            if path.name == "broken.txt":
                raise PermissionError("denied")
            return FileRecord(name=path.name, size=2, path=path)

        with patch("filefinder.index.indexer.build_record", side_effect=fake_build):
            stats = Indexer(catalog).index([tmp_path])

        assert stats.indexed == 1
        assert stats.failed == 1
        assert len(stats.processed_files) == 2
        assert "Failed to stat" in caplog.text
        assert {r.name for r in catalog.by_prefix("")} == {"ok.txt"}
