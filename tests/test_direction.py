"""
Unit tests for camera direction parsing and the compass table.
"""

from unittest.mock import MagicMock

import pytest

from zotero_tropy.core import compass
from zotero_tropy.core.compass import CardinalDirection
from zotero_tropy.field_mappers import map_direction as map_direction_module
from zotero_tropy.field_mappers.map_direction import (
    direction_to_bearing,
    format_bearing,
    map_direction,
    parse_abstract,
)


class TestCardinalDirection:
    """Tests for the compass table."""

    @pytest.mark.parametrize(
        "name,degrees",
        [
            ("North", 0.0),
            ("North-northeast", 22.5),
            ("Northeast", 45.0),
            ("East", 90.0),
            ("Southeast", 135.0),
            ("South-southwest", 202.5),
            ("West", 270.0),
            ("North-northwest", 337.5),
        ],
    )
    def test_names(self, name, degrees):
        assert CardinalDirection.from_name(name).degrees == degrees

    def test_spelling_variants(self):
        """Test that case, spaces and hyphens are ignored."""
        assert CardinalDirection.from_name("north east") is CardinalDirection.NORTHEAST
        assert CardinalDirection.from_name("North-East") is CardinalDirection.NORTHEAST
        assert CardinalDirection.from_name("SOUTHWEST") is CardinalDirection.SOUTHWEST

    def test_abbreviations(self):
        assert CardinalDirection.NORTH_NORTHEAST.abbreviation == "NNE"
        assert CardinalDirection.from_name("NNE") is CardinalDirection.NORTH_NORTHEAST
        assert CardinalDirection.from_name("w") is CardinalDirection.WEST

    def test_unknown(self):
        assert CardinalDirection.from_name("sea") is None
        assert CardinalDirection.from_name("") is None
        assert CardinalDirection.from_name(None) is None

    def test_sixteen_points(self):
        assert len(CardinalDirection) == 16

    def test_lookup_table(self):
        """Test that every point is keyed by full name and abbreviation only."""
        assert len(compass._DIRECTIONS_BY_KEY) == 32
        assert compass._DIRECTIONS_BY_KEY["NORTHNORTHEAST"] is CardinalDirection.NORTH_NORTHEAST
        assert compass._DIRECTIONS_BY_KEY["NNE"] is CardinalDirection.NORTH_NORTHEAST
        assert not hasattr(compass, "_direction")


class TestParseAbstract:
    """Tests for direction sentence extraction."""

    def test_direction_line_removed(self):
        parsed = parse_abstract("Boats at the quay.\nTaken facing the Northeast.")
        assert parsed.description == ("Boats at the quay.",)
        assert parsed.direction == "Northeast"

    def test_case_insensitive(self):
        """Test that the sentence matches regardless of case."""
        parsed = parse_abstract("taken FACING the northeast.")
        assert parsed.direction == "Northeast"
        assert parsed.description == ()

    def test_only_first_match_removed(self):
        abstract = "Taken facing the North.\nMiddle.\nTaken facing the South."
        parsed = parse_abstract(abstract)
        assert parsed.direction == "North"
        assert parsed.description == ("Middle.", "Taken facing the South.")

    def test_no_direction(self):
        parsed = parse_abstract("Line one\n\nLine two")
        assert parsed.direction is None
        assert parsed.description == ("Line one", "", "Line two")

    def test_splits_on_newline_only(self):
        """Test that vertical tabs and form feeds do not start a new line."""
        parsed = parse_abstract("Scan\x0bdamaged.\x0cRetouched.")
        assert parsed.description == ("Scan\x0bdamaged.\x0cRetouched.",)

    def test_crlf_line_endings(self):
        parsed = parse_abstract("Boats.\r\nTaken facing the West.\r\nCalm day.")
        assert parsed.description == ("Boats.", "Calm day.")
        assert parsed.direction == "West"

    def test_requires_period(self):
        parsed = parse_abstract("Taken facing the North")
        assert parsed.direction is None

    def test_absent(self):
        parsed = parse_abstract(None)
        assert parsed.description == ()
        assert parsed.direction is None


class TestMapDirection:
    """Tests for bearing output."""

    def test_bearing(self):
        description, bearing = map_direction("A street.\nTaken facing the Northeast.")
        assert description == ("A street.",)
        assert bearing == "45"

    def test_fractional_bearing(self):
        assert map_direction("Taken facing the East-northeast.")[1] == "67.5"

    def test_north_is_zero(self):
        assert map_direction("Taken facing the North.")[1] == "0"

    def test_no_sentence(self):
        assert map_direction("Just a description.") == (("Just a description.",), "")

    def test_unknown_direction_degrades(self, monkeypatch):
        """Test that an unknown direction is logged and yields no bearing."""
        logger = MagicMock()
        monkeypatch.setattr(map_direction_module, "logger", logger)

        description, bearing = map_direction("Taken facing the sea.\nCalm day.")

        assert bearing == ""
        assert description == ("Calm day.",)
        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["extra"] == {"direction": "Sea"}

    def test_helpers(self):
        assert direction_to_bearing(None) is None
        assert direction_to_bearing("Northeast") == 45.0
        assert format_bearing(None) == ""
        assert format_bearing(22.5) == "22.5"
