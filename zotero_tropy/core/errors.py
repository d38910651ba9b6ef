"""Custom exceptions for zotero-tropy."""


class ZoteroTropyError(Exception):
    """Base exception for zotero-tropy errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(ZoteroTropyError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str = "Configuration error", details: str | None = None):
        super().__init__(message, details)


class InputFormatError(ZoteroTropyError):
    """Exception raised when the Zotero export cannot be read."""

    def __init__(
        self,
        message: str = "Invalid Zotero export",
        source: str | None = None,
        details: str | None = None,
    ):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message, details)


class AttachmentPathError(ZoteroTropyError, ValueError):
    """Exception raised when an attachment path cannot be flattened.

    Flat layout expects ``<prefix>/<container id>/<filename>``. Anything else
    would produce a wrong path in the output, so the record is refused.
    """

    def __init__(self, path: str, item_key: str | None = None):
        self.path = path
        self.item_key = item_key
        details = f"expected 3 path segments, got {len(path.split('/'))} in '{path}'"
        if item_key:
            details += f" (item {item_key})"
        super().__init__("Malformed attachment path", details)


class OutputError(ZoteroTropyError):
    """Exception raised when the CSV file cannot be written."""

    def __init__(self, path: str, details: str | None = None):
        self.path = path
        super().__init__(f"Could not write CSV ({path})", details)
