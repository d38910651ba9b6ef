"""Abstract parsing for camera direction (exif:gpsImgDirection).

Photographs in the collection record the direction the camera faced as a
sentence in the abstract:

    "Looking down Main Street.
     Taken facing the Northeast."

The sentence is removed from the description text and the compass point is
converted into a bearing in degrees. Abstracts without such a sentence, or
naming a direction that is not a compass point, produce no bearing.
"""

import logging
import re
from dataclasses import dataclass

from zotero_tropy.core.compass import CardinalDirection
from zotero_tropy.field_mappers.text_utils import split_lines

logger = logging.getLogger(__name__)

DIRECTION_PATTERN = re.compile(
    r"taken facing the (?P<direction>[^.]+)\.", re.IGNORECASE
)


@dataclass(frozen=True)
class ParsedAbstract:
    """An abstract split into description lines and camera direction.

    Attributes:
        description: Abstract lines without the direction sentence, in order
        direction: Direction phrase as written (e.g. "Northeast"), if found
    """

    description: tuple[str, ...] = ()
    direction: str | None = None


def normalize_direction(phrase: str) -> str:
    """Normalize a direction phrase: trimmed, first letter capitalized."""
    return phrase.strip().capitalize()


def parse_abstract(abstract: str | None) -> ParsedAbstract:
    """Split an abstract into description lines and the camera direction.

    Only the first line containing "Taken facing the <direction>." is
    treated as the direction sentence and removed. Matching is
    case-insensitive.

    Args:
        abstract: Abstract text from the export.

    Returns:
        ParsedAbstract with the remaining lines and the normalized direction.
    """
    if not abstract:
        return ParsedAbstract()

    lines = split_lines(abstract)
    for index, line in enumerate(lines):
        match = DIRECTION_PATTERN.search(line)
        if match is not None:
            return ParsedAbstract(
                description=tuple(lines[:index] + lines[index + 1 :]),
                direction=normalize_direction(match.group("direction")),
            )

    return ParsedAbstract(description=tuple(lines))


def direction_to_bearing(direction: str | None) -> float | None:
    """Convert a compass point name into a bearing in degrees.

    Unknown names are logged and yield None.

    Example:
        >>> direction_to_bearing("Northeast")
        45.0
        >>> direction_to_bearing("North")
        0.0
    """
    if not direction:
        return None

    cardinal = CardinalDirection.from_name(direction)
    if cardinal is None:
        logger.warning(
            "Unrecognized camera direction, no bearing exported",
            extra={"direction": direction},
        )
        return None
    return cardinal.degrees


def format_bearing(bearing: float | None) -> str:
    """Format a bearing for output ("45", "22.5"), empty when absent."""
    if bearing is None:
        return ""
    return f"{bearing:g}"


def map_direction(abstract: str | None) -> tuple[tuple[str, ...], str]:
    """Map the abstract to (description lines, gps-direction) output values.

    Args:
        abstract: Abstract text from the export.

    Returns:
        Tuple of the description lines (direction sentence removed) and the
        formatted bearing (empty string when there is none).

    Example:
        >>> map_direction("A street.\\nTaken facing the Northeast.")
        (('A street.',), '45')
    """
    parsed = parse_abstract(abstract)
    return parsed.description, format_bearing(direction_to_bearing(parsed.direction))
