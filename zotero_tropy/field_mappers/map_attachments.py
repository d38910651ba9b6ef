"""Attachment mapping for tropy:path and tropy:note.

Each attachment with a stored file becomes one Tropy photo: a path column
and a note column. Zotero keeps files under ``storage/<container id>/<file>``.
In the flat layout (the default) the files are expected to be copied into a
single ``files/`` directory with the container id prefixed to avoid name
clashes; in the nested layout the storage tree is kept as is.

The first photo carries the item's description and notes as its note;
further photos get an empty note so the text is not repeated.
"""

from collections.abc import Iterable, Sequence

from zotero_tropy import vocabulary
from zotero_tropy.core.errors import AttachmentPathError
from zotero_tropy.core.models import Attachment

FLAT_DIRECTORY = "files"
STORAGE_SEGMENTS = 3


def flatten_path(path: str, item_key: str | None = None) -> str:
    """Rewrite ``<prefix>/<container id>/<file>`` as ``files/<container id>-<file>``.

    Raises:
        AttachmentPathError: If the path does not have exactly three segments.

    Example:
        >>> flatten_path("storage/ABCD1234/photo.jpg")
        'files/ABCD1234-photo.jpg'
    """
    segments = path.split("/")
    if len(segments) != STORAGE_SEGMENTS:
        raise AttachmentPathError(path, item_key=item_key)
    _, container_id, filename = segments
    return f"{FLAT_DIRECTORY}/{container_id}-{filename}"


def map_attachment_path(path: str, flat: bool, item_key: str | None = None) -> str:
    """Map a storage-relative path for the configured layout.

    Example:
        >>> map_attachment_path("storage/ABCD1234/photo.jpg", flat=False)
        './storage/ABCD1234/photo.jpg'
    """
    if flat:
        return flatten_path(path, item_key=item_key)
    return f"./{path}"


def compose_note(description: Iterable[str], notes: Iterable[str]) -> str:
    """Join description lines and note texts, skipping empty entries."""
    entries = [*description, *notes]
    return vocabulary.VALUE_SEPARATOR.join(entry for entry in entries if entry)


def map_attachments(
    attachments: Iterable[Attachment] | None,
    notes: Iterable[str] | None = None,
    description: Sequence[str] | None = None,
    flat: bool = True,
    item_key: str | None = None,
) -> list[tuple[str, str]]:
    """Map attachments to path/note output pairs.

    Attachments without a path (linked URLs) are skipped. Each remaining
    attachment adds exactly two pairs, in input order.

    Args:
        attachments: Attachments from the export.
        notes: Note texts of the item.
        description: Abstract lines with the direction sentence removed.
        flat: True for the flat ``files/`` layout, False for nested paths.
        item_key: Item key, used in error messages.

    Returns:
        List of (term, value) pairs.

    Raises:
        AttachmentPathError: In flat layout, if a path is malformed.
    """
    stored = [a for a in attachments or () if a.path]
    if not stored:
        return []

    first_note = compose_note(description or (), notes or ())

    pairs: list[tuple[str, str]] = []
    for index, attachment in enumerate(stored):
        pairs.append(
            (vocabulary.PATH, map_attachment_path(attachment.path, flat, item_key))
        )
        pairs.append((vocabulary.NOTE, first_note if index == 0 else ""))
    return pairs
