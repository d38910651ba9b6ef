"""Descriptive field mapping for dc:source, dc:format, dcterms:type and tags."""

from collections.abc import Iterable

# Zotero item types that Tropy should treat as something other than text
ITEM_TYPE_MAPPINGS: dict[str, str] = {
    "artwork": "image",
    "map": "image",
    "audioRecording": "sound",
}
DEFAULT_TYPE = "text"

TAG_SEPARATOR = ", "


def _join(*parts: str | None) -> str:
    return " ".join(part for part in parts if part)


def map_source(
    archive: str | None,
    archive_location: str | None,
    library_catalog: str | None,
    call_number: str | None,
) -> str:
    """Combine archive and catalog information into dc:source.

    Example:
        >>> map_source("City Archives", "Box 4", None, "MS 12")
        'City Archives Box 4 MS 12'
    """
    return _join(
        _join(archive, archive_location),
        _join(library_catalog, call_number),
    )


def map_format(
    artwork_size: str | None,
    scale: str | None,
    running_time: str | None,
    medium: str | None,
) -> str:
    """Combine physical description fields into dc:format."""
    return _join(artwork_size, scale, running_time, medium)


def map_type(item_type: str | None) -> str:
    """Map a Zotero item type to a DCMI type name."""
    return ITEM_TYPE_MAPPINGS.get(item_type or "", DEFAULT_TYPE)


def map_tags(tags: Iterable[str] | None) -> str:
    return TAG_SEPARATOR.join(tags or ())
