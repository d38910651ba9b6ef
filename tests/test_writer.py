"""
Unit tests for CSV output.
"""

import csv

import pytest

from zotero_tropy.core.errors import OutputError
from zotero_tropy.writer import build_rows, write_csv

SHORT = [("dc:title", "A"), ("dc:type", "text")]
LONG = SHORT + [("tropy:path", "files/K-a.jpg"), ("tropy:note", "")]


class TestBuildRows:
    """Tests for build_rows."""

    def test_header_from_widest_item(self):
        rows = build_rows([SHORT, LONG])
        assert rows[0] == ["dc:title", "dc:type", "tropy:path", "tropy:note"]

    def test_short_rows_are_padded(self):
        rows = build_rows([SHORT, LONG])
        assert rows[1] == ["A", "text", "", ""]
        assert rows[2] == ["A", "text", "files/K-a.jpg", ""]

    def test_no_items(self):
        assert build_rows([]) == []


class TestWriteCsv:
    """Tests for write_csv."""

    def test_every_cell_quoted(self, tmp_path):
        path = tmp_path / "out.csv"
        assert write_csv(path, [SHORT]) == 1

        assert path.read_text(encoding="utf-8").splitlines() == [
            '"dc:title","dc:type"',
            '"A","text"',
        ]

    def test_embedded_quotes_and_newlines(self, tmp_path):
        path = tmp_path / "out.csv"
        write_csv(path, [[("dc:title", 'He said "hi"\nthen left')]])

        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert rows == [["dc:title"], ['He said "hi"\nthen left']]

    def test_replaces_existing_file(self, tmp_path):
        path = tmp_path / "out.csv"
        path.write_text("old content\n" * 10, encoding="utf-8")
        write_csv(path, [SHORT])
        assert "old content" not in path.read_text(encoding="utf-8")

    def test_empty_export_writes_empty_file(self, tmp_path):
        path = tmp_path / "out.csv"
        assert write_csv(path, []) == 0
        assert path.read_text(encoding="utf-8") == ""

    def test_unencodable_value_keeps_existing_file(self, tmp_path):
        """Test that a lone surrogate is reported without truncating the file."""
        path = tmp_path / "out.csv"
        path.write_text("previous export\n", encoding="utf-8")

        with pytest.raises(OutputError, match="not valid UTF-8"):
            write_csv(path, [[("dc:title", "Bad \ud800 title")]])

        assert path.read_text(encoding="utf-8") == "previous export\n"

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OutputError):
            write_csv(tmp_path / "missing" / "out.csv", [SHORT])
