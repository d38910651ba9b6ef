"""Data models for Zotero export records.

These dataclasses mirror the subset of a Zotero (Better BibTeX) JSON export
that the converter reads. They are built once from the parsed JSON and are
never modified by conversion.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CreatorType(Enum):
    """Creator role enumeration."""
    ARTIST = "artist"
    AUTHOR = "author"
    CARTOGRAPHER = "cartographer"
    CONTRIBUTOR = "contributor"
    DIRECTOR = "director"
    EDITOR = "editor"
    PERFORMER = "performer"


def _text(value: Any) -> Optional[str]:
    """Return ``value`` as a string, or None when it is missing."""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return value


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class Creator:
    """A person or organisation credited on an item."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None  # Single-field name, used when first/last are absent
    creator_type: str = CreatorType.AUTHOR.value

    @property
    def role(self) -> Optional[CreatorType]:
        """The creator role, or None if the export uses an unknown value."""
        try:
            return CreatorType(self.creator_type)
        except ValueError:
            return None

    @property
    def is_contributor(self) -> bool:
        return self.role is CreatorType.CONTRIBUTOR

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Creator":
        """Create a Creator from an export dictionary."""
        return cls(
            first_name=_text(data.get("firstName")),
            last_name=_text(data.get("lastName")),
            name=_text(data.get("name")),
            creator_type=_text(data.get("creatorType")) or CreatorType.AUTHOR.value,
        )


@dataclass(frozen=True)
class Attachment:
    """A file attached to an item.

    ``path`` is storage-relative (``storage/<container id>/<filename>``);
    linked URLs have no path and are not exported.
    """

    path: Optional[str] = None
    title: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Attachment":
        """Create an Attachment from an export dictionary."""
        return cls(
            path=_text(data.get("path")) or None,
            title=_text(data.get("title")) or "",
        )


# Export key -> Item attribute for the plain string fields
_ITEM_FIELDS = {
    "itemType": "item_type",
    "itemKey": "item_key",
    "title": "title",
    "date": "date",
    "language": "language",
    "url": "url",
    "rights": "rights",
    "extra": "extra",
    "publisher": "publisher",
    "archive": "archive",
    "archiveLocation": "archive_location",
    "libraryCatalog": "library_catalog",
    "callNumber": "call_number",
    "artworkSize": "artwork_size",
    "scale": "scale",
    "runningTime": "running_time",
    "medium": "medium",
}


@dataclass(frozen=True)
class Item:
    """A single Zotero item (one row of the Tropy CSV)."""

    item_type: str = ""
    item_key: Optional[str] = None
    title: Optional[str] = None
    date: Optional[str] = None
    language: Optional[str] = None
    url: Optional[str] = None
    rights: Optional[str] = None
    creators: tuple[Creator, ...] = ()
    extra: Optional[str] = None
    tags: tuple[str, ...] = ()
    abstract: Optional[str] = None
    attachments: tuple[Attachment, ...] = ()
    notes: tuple[str, ...] = ()

    # Descriptive fields combined into source/format/publisher
    publisher: Optional[str] = None
    archive: Optional[str] = None
    archive_location: Optional[str] = None
    library_catalog: Optional[str] = None
    call_number: Optional[str] = None
    artwork_size: Optional[str] = None
    scale: Optional[str] = None
    running_time: Optional[str] = None
    medium: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Create an Item from one entry of the export's ``items`` list.

        Tags may be ``{"tag": "..."}`` objects or plain strings; notes may be
        ``{"note": "..."}`` objects or plain strings. The abstract is read
        from ``abstractNote`` and falls back to ``abstract``.
        """
        values: dict[str, Any] = {
            attr: _text(data.get(key)) for key, attr in _ITEM_FIELDS.items()
        }
        values["item_type"] = values["item_type"] or ""

        abstract = data.get("abstractNote")
        if abstract is None:
            abstract = data.get("abstract")
        values["abstract"] = _text(abstract)

        values["creators"] = tuple(
            Creator.from_dict(c) for c in _list(data.get("creators")) if isinstance(c, dict)
        )
        values["attachments"] = tuple(
            Attachment.from_dict(a)
            for a in _list(data.get("attachments"))
            if isinstance(a, dict)
        )

        tags = []
        for tag in _list(data.get("tags")):
            if isinstance(tag, dict):
                tag = tag.get("tag")
            if tag:
                tags.append(str(tag))
        values["tags"] = tuple(tags)

        notes = []
        for note in _list(data.get("notes")):
            if isinstance(note, dict):
                note = note.get("note")
            if note:
                notes.append(str(note))
        values["notes"] = tuple(notes)

        return cls(**values)
