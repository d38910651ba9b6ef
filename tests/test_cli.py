"""
Tests for the command-line entry point.
"""

import csv
import json

import pytest

from zotero_tropy.__main__ import build_parser, main
from zotero_tropy.core.config import LAYOUT_ENV_VAR


@pytest.fixture(autouse=True)
def clear_layout_env(monkeypatch):
    monkeypatch.delenv(LAYOUT_ENV_VAR, raising=False)


def read_rows(path):
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


class TestParser:
    """Tests for argument parsing."""

    def test_layout_flags(self):
        parser = build_parser()
        assert parser.parse_args(["in.json", "out.csv"]).layout is None
        assert parser.parse_args(["in.json", "out.csv", "--nested"]).layout == "nested"
        assert parser.parse_args(["in.json", "out.csv", "--flat"]).layout == "flat"

    def test_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["in.json", "out.csv", "--flat", "--nested"])


class TestMain:
    """End-to-end runs of main()."""

    def test_flat_export(self, export_file, tmp_path):
        output = tmp_path / "tropy.csv"
        assert main([str(export_file), str(output)]) == 0

        header, row = read_rows(output)
        assert len(header) == len(row) == 21
        assert row[header.index("dc:title")] == "View of the harbour"
        assert row[-4] == "files/ABCD1234-photo.jpg"

    def test_nested_export(self, export_file, tmp_path):
        output = tmp_path / "tropy.csv"
        assert main([str(export_file), str(output), "--nested"]) == 0
        assert read_rows(output)[1][-4] == "./storage/ABCD1234/photo.jpg"

    def test_config_file(self, export_file, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"layout": "nested"}), encoding="utf-8")
        output = tmp_path / "tropy.csv"

        assert main([str(export_file), str(output), "--config", str(config)]) == 0
        assert read_rows(output)[1][-2] == "./storage/EFGH5678/verso.jpg"

    def test_missing_input(self, tmp_path):
        output = tmp_path / "tropy.csv"
        assert main([str(tmp_path / "missing.json"), str(output)]) == 1
        assert not output.exists()

    def test_malformed_attachment_path(self, tmp_path):
        export = tmp_path / "export.json"
        export.write_text(
            json.dumps({"items": [{"title": "T", "attachments": [{"path": "a/b"}]}]}),
            encoding="utf-8",
        )
        output = tmp_path / "tropy.csv"
        assert main([str(export), str(output), "--flat"]) == 1
        assert not output.exists()

    def test_unencodable_title(self, tmp_path):
        export = tmp_path / "export.json"
        export.write_text('{"items": [{"title": "Bad \\ud800 title"}]}', encoding="utf-8")
        output = tmp_path / "tropy.csv"

        assert main([str(export), str(output)]) == 1
        assert not output.exists()
