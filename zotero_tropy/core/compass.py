"""Compass point table for converting direction names into bearings.

Sixteen points, numbered clockwise from North. Each step is 22.5 degrees.
"""

from enum import Enum
from typing import Optional


class CardinalDirection(Enum):
    """16-point compass rose."""
    NORTH = 0
    NORTH_NORTHEAST = 1
    NORTHEAST = 2
    EAST_NORTHEAST = 3
    EAST = 4
    EAST_SOUTHEAST = 5
    SOUTHEAST = 6
    SOUTH_SOUTHEAST = 7
    SOUTH = 8
    SOUTH_SOUTHWEST = 9
    SOUTHWEST = 10
    WEST_SOUTHWEST = 11
    WEST = 12
    WEST_NORTHWEST = 13
    NORTHWEST = 14
    NORTH_NORTHWEST = 15

    @property
    def degrees(self) -> float:
        """Bearing in degrees clockwise from North (0-337.5)."""
        return self.value * 22.5

    @property
    def abbreviation(self) -> str:
        """Compass abbreviation (e.g. "NNE")."""
        return "".join(_abbreviate(part) for part in _split_name(self.name))

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["CardinalDirection"]:
        """Resolve a compass point from its name or abbreviation.

        Matching ignores case, spaces and hyphens, so "Northeast",
        "north-east" and "NE" all resolve to NORTHEAST.

        Returns:
            The matching direction, or None if the name is not a compass point
        """
        if not name:
            return None
        key = name.replace("-", "").replace(" ", "").replace("_", "").upper()
        return _DIRECTIONS_BY_KEY.get(key)


def _split_name(member_name: str) -> list[str]:
    # NORTH_NORTHEAST -> ["north", "northeast"]
    return [part.lower() for part in member_name.split("_")]


def _abbreviate(word: str) -> str:
    for full, short in (("north", "N"), ("south", "S"), ("east", "E"), ("west", "W")):
        word = word.replace(full, short)
    return word


def _build_lookup() -> dict[str, CardinalDirection]:
    # Keys: "NORTHNORTHEAST" and "NNE" for each point
    lookup = {}
    for direction in CardinalDirection:
        lookup[direction.name.replace("_", "")] = direction
        lookup[direction.abbreviation] = direction
    return lookup


_DIRECTIONS_BY_KEY: dict[str, CardinalDirection] = _build_lookup()
