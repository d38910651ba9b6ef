"""Record mapper turning Zotero items into Tropy CSV term/value pairs.

``convert_item`` runs every field mapper once and flattens the results into
a fixed sequence: the ITEM_TERMS columns in order, always present (empty
strings where the item has no data), then one path/note pair per stored
attachment.

``ItemConverter`` wraps it with an ExportConfig for batch conversion:

    >>> converter = ItemConverter(ExportConfig(flat_layout=False))
    >>> rows = converter.convert_all(items)
"""

import logging
import time
from collections.abc import Iterable

from zotero_tropy import vocabulary
from zotero_tropy.core.config import ExportConfig
from zotero_tropy.core.models import Item
from zotero_tropy.field_mappers import (
    map_attachments,
    map_descriptive,
    map_direction,
    map_extra,
    map_people,
    map_rights,
    map_titles,
)

logger = logging.getLogger(__name__)

Pair = tuple[str, str]


def convert_item(item: Item, flat: bool = True) -> list[Pair]:
    """Convert one item into its ordered (term, value) pairs.

    Args:
        item: Item to convert.
        flat: Attachment layout, True for ``files/<id>-<name>`` paths.

    Returns:
        List of (term, value) pairs; every value is a string.

    Raises:
        AttachmentPathError: In flat layout, if an attachment path is malformed.
            No pairs are returned for the item in that case.
    """
    title, alternative = map_titles.map_title(item.title)
    rights, rights_holder = map_rights.map_rights(item.rights)
    creator, contributor = map_people.map_creators(item.creators)
    is_part_of, relation = map_extra.map_extra(item.extra)
    description, bearing = map_direction.map_direction(item.abstract)

    pairs: list[Pair] = [
        (vocabulary.TITLE, title),
        (vocabulary.ALTERNATIVE, alternative),
        (vocabulary.DATE, item.date or ""),
        (vocabulary.LANGUAGE, item.language or ""),
        (vocabulary.IDENTIFIER, item.url or ""),
        (vocabulary.RIGHTS, rights),
        (vocabulary.RIGHTS_HOLDER, rights_holder),
        (vocabulary.CREATOR, creator),
        (vocabulary.CONTRIBUTOR, contributor),
        (
            vocabulary.SOURCE,
            map_descriptive.map_source(
                item.archive,
                item.archive_location,
                item.library_catalog,
                item.call_number,
            ),
        ),
        (
            vocabulary.FORMAT,
            map_descriptive.map_format(
                item.artwork_size, item.scale, item.running_time, item.medium
            ),
        ),
        (vocabulary.PUBLISHER, item.publisher or ""),
        (vocabulary.TYPE, map_descriptive.map_type(item.item_type)),
        (vocabulary.IS_PART_OF, is_part_of),
        (vocabulary.RELATION, relation),
        (vocabulary.TAG, map_descriptive.map_tags(item.tags)),
        (vocabulary.GPS_DIRECTION, bearing),
    ]

    pairs.extend(
        map_attachments.map_attachments(
            item.attachments,
            notes=item.notes,
            description=description,
            flat=flat,
            item_key=item.item_key,
        )
    )
    return pairs


class ItemConverter:
    """Converts items using an export configuration.

    Holds no state besides the configuration, so one instance can be
    reused (or shared between threads) for any number of batches.
    """

    def __init__(self, config: ExportConfig | None = None):
        self.config = config or ExportConfig()

    def convert(self, item: Item) -> list[Pair]:
        """Convert a single item."""
        return convert_item(item, flat=self.config.flat_layout)

    def convert_all(self, items: Iterable[Item]) -> list[list[Pair]]:
        """Convert a batch of items, in order.

        Raises:
            AttachmentPathError: If any item has a malformed attachment path
                (flat layout). The whole batch is refused.
        """
        start_time = time.perf_counter()
        converted = [self.convert(item) for item in items]
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "Conversion completed",
            extra={
                "item_count": len(converted),
                "layout": self.config.layout,
                "max_pairs": max((len(pairs) for pairs in converted), default=0),
                "duration_ms": round(duration_ms, 3),
            },
        )
        return converted
