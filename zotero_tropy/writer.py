"""CSV output for Tropy import.

Items with more attachments have more columns, so the header is taken from
the converted item with the most pairs; shorter rows are padded with empty
cells. Every cell is quoted.
"""

import csv
import io
import logging
from collections.abc import Sequence
from pathlib import Path

from zotero_tropy.core.errors import OutputError

logger = logging.getLogger(__name__)


def build_rows(converted: Sequence[Sequence[tuple[str, str]]]) -> list[list[str]]:
    """Build the header row and value rows for converted items.

    Args:
        converted: Term/value pairs per item, as returned by the converter

    Returns:
        Header row followed by one row per item, or an empty list if there
        are no items
    """
    if not converted:
        return []

    widest = max(converted, key=len)
    header = [term for term, _ in widest]

    rows = [header]
    for pairs in converted:
        values = [value for _, value in pairs]
        values.extend([""] * (len(header) - len(values)))
        rows.append(values)
    return rows


def write_csv(path: Path | str, converted: Sequence[Sequence[tuple[str, str]]]) -> int:
    """Write converted items to a CSV file, replacing any existing file.

    Args:
        path: Output file path
        converted: Term/value pairs per item

    Returns:
        Number of item rows written (header excluded)

    Raises:
        OutputError: If a value cannot be encoded as UTF-8 or the file cannot
            be written. An existing file is left untouched on encoding errors.
    """
    path = Path(path)
    rows = build_rows(converted)

    buffer = io.StringIO(newline="")
    csv.writer(buffer, quoting=csv.QUOTE_ALL).writerows(rows)
    try:
        content = buffer.getvalue().encode("utf-8")
    except UnicodeEncodeError as e:
        raise OutputError(str(path), f"value is not valid UTF-8: {e}") from e

    try:
        path.write_bytes(content)
    except OSError as e:
        raise OutputError(str(path), str(e)) from e

    if not rows:
        logger.warning("No items to export, wrote empty file", extra={"path": str(path)})
        return 0

    logger.info(
        "Wrote CSV",
        extra={
            "path": str(path),
            "row_count": len(rows) - 1,
            "column_count": len(rows[0]),
        },
    )
    return len(rows) - 1
