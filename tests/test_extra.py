"""
Unit tests for Extra field mapping.
"""

from zotero_tropy.field_mappers.map_extra import (
    ExtraLine,
    map_extra,
    parse_extra,
    parse_extra_line,
)


class TestParseExtraLine:
    """Tests for single line parsing."""

    def test_labelled_line(self):
        assert parse_extra_line("Source: Library X") == ExtraLine(
            content="Library X", field="Source"
        )

    def test_untagged_line(self):
        assert parse_extra_line("Part One") == ExtraLine(content="Part One")

    def test_label_ends_at_first_colon_space(self):
        """Test that only the first ': ' separates label and content."""
        line = parse_extra_line("Note: see: below")
        assert line.field == "Note"
        assert line.content == "see: below"

    def test_url_is_content(self):
        """Test that a colon without a following space is not a label."""
        line = parse_extra_line("https://example.org/a")
        assert line.field is None
        assert line.content == "https://example.org/a"

    def test_empty_line(self):
        assert parse_extra_line("") is None


class TestMapExtra:
    """Tests for isPartOf/relation output."""

    def test_untagged_first_line_is_part_of(self):
        assert map_extra("Part One\nSource: Library X") == ("Part One", "Library X")

    def test_labelled_first_line(self):
        """Test that a labelled first line stays in the relation."""
        assert map_extra("Source: Library X\nCopy: Library Y") == (
            "",
            "Library X --- Library Y",
        )

    def test_blank_lines_dropped(self):
        extra = "\nSeries A\n\nOriginal: Box 1\nOther line"
        assert map_extra(extra) == ("Series A", "Box 1 --- Other line")

    def test_only_first_line_is_part_of(self):
        assert map_extra("Series A\nSeries B") == ("Series A", "Series B")

    def test_absent(self):
        assert map_extra(None) == ("", "")
        assert map_extra("") == ("", "")
        assert map_extra("\n\n") == ("", "")

    def test_parse_does_not_consume_input(self):
        """Test that parsing twice gives the same lines."""
        extra = "Series A\nOriginal: Box 1"
        assert parse_extra(extra) == parse_extra(extra)
        assert map_extra(extra) == map_extra(extra)

    def test_splits_on_newline_only(self):
        """Test that other line boundary characters stay inside the line."""
        assert map_extra("Series\u2028A") == ("Series\u2028A", "")
        assert map_extra("Series A\x0c\nOriginal: Box 1") == ("Series A\x0c", "Box 1")

    def test_crlf_line_endings(self):
        assert map_extra("Series A\r\nOriginal: Box 1\r\n") == ("Series A", "Box 1")
