"""Field mapper modules for Tropy CSV conversion.

This package contains one pure mapping module per field group. Each mapper
takes plain values from an Item and returns output strings (or term/value
pairs); none of them keeps state between calls.

Modules:
    map_titles: title / alternative title
    map_people: creator / contributor
    map_rights: rights statement / rights holder
    map_descriptive: source, format, type, tags
    map_extra: isPartOf / relation from the Extra field
    map_direction: camera bearing from the abstract
    map_attachments: per-photo path / note pairs
    text_utils: line splitting shared by the mappers
"""

__all__ = [
    "map_titles",
    "map_people",
    "map_rights",
    "map_descriptive",
    "map_extra",
    "map_direction",
    "map_attachments",
    "text_utils",
]
