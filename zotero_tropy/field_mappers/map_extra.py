"""Extra field mapping for dcterms:isPartOf and dc:relation.

Zotero's "Extra" field is a free-text block. For this collection it holds
an optional untagged first line naming the series or album the item is
part of, followed by "Label: value" lines describing related resources:

    Harbour views, 1890-1910
    Original: Municipal Archives, box 12
    Copy: Private collection

The untagged first line becomes isPartOf; the values of all other lines
are joined into relation ("Municipal Archives, box 12 --- Private collection").
"""

import re
from dataclasses import dataclass

from zotero_tropy.field_mappers.text_utils import split_lines
from zotero_tropy.vocabulary import VALUE_SEPARATOR

# Optional label ending at the first ": ", then the rest of the line
EXTRA_LINE_PATTERN = re.compile(r"^(?:(?P<field>[^:]+): )?(?P<content>.+)")


@dataclass(frozen=True)
class ExtraLine:
    """A single parsed line of the Extra field."""

    content: str
    field: str | None = None


def parse_extra_line(line: str) -> ExtraLine | None:
    """Parse one line of the Extra field.

    Returns:
        ExtraLine, or None for an empty line.

    Example:
        >>> parse_extra_line("Source: Library X")
        ExtraLine(content='Library X', field='Source')
        >>> parse_extra_line("Part One")
        ExtraLine(content='Part One', field=None)
    """
    match = EXTRA_LINE_PATTERN.match(line)
    if match is None:
        return None
    return ExtraLine(content=match.group("content"), field=match.group("field"))


def parse_extra(extra: str | None) -> tuple[ExtraLine, ...]:
    """Parse the Extra field into its non-empty lines, in order."""
    if not extra:
        return ()
    parsed = (parse_extra_line(line) for line in split_lines(extra))
    return tuple(line for line in parsed if line is not None)


def map_extra(extra: str | None) -> tuple[str, str]:
    """Map the Extra field to (is-part-of, relation) output values.

    Args:
        extra: Extra field text from the export.

    Returns:
        Tuple of the untagged first line (empty if the first line has a
        label) and the remaining line contents joined with VALUE_SEPARATOR.

    Example:
        >>> map_extra("Part One\\nSource: Library X")
        ('Part One', 'Library X')
    """
    lines = parse_extra(extra)
    if not lines:
        return "", ""

    is_part_of = ""
    if lines[0].field is None:
        is_part_of = lines[0].content
        lines = lines[1:]

    relation = VALUE_SEPARATOR.join(line.content for line in lines)
    return is_part_of, relation
