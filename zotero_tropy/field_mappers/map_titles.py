"""Title field mapping for dc:title and dcterms:alternative.

Zotero items often carry an alternative title (a translation or the title
in the original script) in square brackets after the main title:

    "View of the harbour [Vue du port]"

This module splits such strings into the main title and the bracketed
alternative. Items without a usable title export as "Untitled".
"""

import re
from dataclasses import dataclass

DEFAULT_TITLE = "Untitled"

# Optional plain title up to the first "[", then an optional bracketed
# alternative running greedily to the final "]" at the end of a line.
TITLE_PATTERN = re.compile(
    r"^(?:(?P<title>[^\[]+))?(?:\[(?P<alternative>.+)\])?$", re.MULTILINE
)


@dataclass(frozen=True)
class ParsedTitle:
    """Result of splitting a raw title.

    Attributes:
        title: Main title text
        alternative: Bracketed alternative title, if any
    """

    title: str
    alternative: str | None = None


def parse_title(raw_title: str | None) -> ParsedTitle | None:
    """Split a raw title into its main and alternative parts.

    If the string holds only a bracketed segment, the bracketed text is
    promoted to the main title.

    Args:
        raw_title: Title string from the export.

    Returns:
        ParsedTitle, or None if no title text could be found.

    Example:
        >>> parse_title("Foo [Bar]")
        ParsedTitle(title='Foo', alternative='Bar')
        >>> parse_title("[Bar]")
        ParsedTitle(title='Bar', alternative=None)
        >>> parse_title("") is None
        True
    """
    if not raw_title:
        return None

    match = TITLE_PATTERN.search(raw_title)
    if match is None:
        return None

    # Whitespace-only titles count as missing and export as DEFAULT_TITLE
    title = (match.group("title") or "").strip()
    alternative = (match.group("alternative") or "").strip()

    if title:
        return ParsedTitle(title=title, alternative=alternative or None)
    if alternative:
        return ParsedTitle(title=alternative)
    return None


def map_title(raw_title: str | None) -> tuple[str, str]:
    """Map a raw title to (title, alternative) output values.

    Args:
        raw_title: Title string from the export.

    Returns:
        Tuple of title (DEFAULT_TITLE when unresolved) and alternative
        title (empty string when absent).
    """
    parsed = parse_title(raw_title)
    if parsed is None:
        return DEFAULT_TITLE, ""
    return parsed.title, parsed.alternative or ""
