"""Loading of Zotero JSON exports.

Reads the whole export into memory and builds Item models. Each raw item
is validated first; warnings are logged and the item is still loaded,
errors abort the load with InputFormatError.
"""

import json
import logging
from pathlib import Path
from typing import Any

from zotero_tropy.core.errors import InputFormatError
from zotero_tropy.core.models import Item
from zotero_tropy.validation import validate_item

logger = logging.getLogger(__name__)


def load_export(path: Path | str) -> list[Item]:
    """Read a Zotero JSON export file into Item models.

    Args:
        path: Path to the export (UTF-8 JSON)

    Returns:
        Items in export order

    Raises:
        InputFormatError: If the file cannot be read, is not JSON, or holds
            invalid items
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise InputFormatError("Export file not found", source=str(path)) from e
    except json.JSONDecodeError as e:
        raise InputFormatError(
            "Export is not valid JSON", source=str(path), details=str(e)
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputFormatError(
            "Could not read export", source=str(path), details=str(e)
        ) from e

    return items_from_export(data, source=str(path))


def items_from_export(data: Any, source: str | None = None) -> list[Item]:
    """Build Item models from a parsed export.

    Accepts either ``{"items": [...]}`` (the Zotero / Better BibTeX layout)
    or a bare list of items.

    Raises:
        InputFormatError: If there is no items list or an item is invalid
    """
    if isinstance(data, dict):
        raw_items = data.get("items")
    else:
        raw_items = data

    if not isinstance(raw_items, list):
        raise InputFormatError(
            "Export has no 'items' list",
            source=source,
            details=f"got {type(raw_items).__name__}",
        )

    items: list[Item] = []
    errors: list[str] = []
    for index, raw_item in enumerate(raw_items):
        validation = validate_item(raw_item, index)

        for issue in validation.warnings:
            logger.warning(
                issue.message,
                extra={"field_path": issue.field_path, "source_value": issue.source_value},
            )

        if not validation.is_valid:
            errors.extend(
                f"{issue.field_path}: {issue.message}" for issue in validation.errors
            )
            continue

        items.append(Item.from_dict(raw_item))

    if errors:
        raise InputFormatError(
            "Export contains invalid items", source=source, details="; ".join(errors)
        )

    logger.debug("Loaded export", extra={"source": source, "item_count": len(items)})
    return items
