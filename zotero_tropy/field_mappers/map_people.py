"""Creator field mapping for dc:creator and dcterms:contributor.

Tropy takes a single creator and a single contributor per item. The
creator is the first credited person whose role is anything other than
"contributor"; the contributor is the first person with that role.

Names are rendered "Last, First" when both parts are known, otherwise
whichever part exists, otherwise the single-field name.
"""

from collections.abc import Iterable

from zotero_tropy.core.models import Creator


def format_creator(creator: Creator | None) -> str:
    """Render a creator as a display name.

    Args:
        creator: Creator to render, or None.

    Returns:
        Display name, empty string if the creator has no name at all.

    Example:
        >>> format_creator(Creator(first_name="Ada", last_name="Lovelace"))
        'Lovelace, Ada'
        >>> format_creator(Creator(name="Library of Congress"))
        'Library of Congress'
    """
    if creator is None:
        return ""
    if creator.first_name and creator.last_name:
        return f"{creator.last_name}, {creator.first_name}"
    return creator.first_name or creator.last_name or creator.name or ""


def find_creator(
    creators: Iterable[Creator] | None,
    contributor: bool,
) -> Creator | None:
    """Find the first creator with (or without) the contributor role.

    Args:
        creators: Creators in credit order.
        contributor: True to look for a contributor, False for anyone else.

    Returns:
        The first matching creator, or None.
    """
    if not creators:
        return None
    return next((c for c in creators if c.is_contributor == contributor), None)


def map_creators(creators: Iterable[Creator] | None) -> tuple[str, str]:
    """Map a creator list to (creator, contributor) output values.

    Args:
        creators: Creators in credit order.

    Returns:
        Tuple of creator and contributor display names; each is an empty
        string when no creator matches.

    Example:
        >>> map_creators([
        ...     Creator(last_name="X", creator_type="contributor"),
        ...     Creator(first_name="A", last_name="B", creator_type="author"),
        ... ])
        ('B, A', 'X')
    """
    creators = tuple(creators or ())
    return (
        format_creator(find_creator(creators, contributor=False)),
        format_creator(find_creator(creators, contributor=True)),
    )
