"""Text helpers shared by the field mappers."""


def split_lines(text: str | None) -> list[str]:
    """Split a multi-line field on newlines.

    Only "\\n" separates lines; a trailing "\\r" is dropped so CRLF exports
    parse the same. Other Unicode line boundaries (U+2028, form feed, ...)
    stay inside the line.

    Example:
        >>> split_lines("a\\r\\nb\\u2028c")
        ['a', 'b\\u2028c']
    """
    if not text:
        return []
    return [line.removesuffix("\r") for line in text.split("\n")]
