"""Core module for zotero-tropy."""

from zotero_tropy.core.version import __version__
from zotero_tropy.core.config import ExportConfig, resolve_config
from zotero_tropy.core.compass import CardinalDirection
from zotero_tropy.core.models import Attachment, Creator, CreatorType, Item
from zotero_tropy.core.errors import (
    ZoteroTropyError,
    ConfigurationError,
    InputFormatError,
    AttachmentPathError,
    OutputError,
)

__all__ = [
    "__version__",
    "ExportConfig",
    "resolve_config",
    "CardinalDirection",
    "Attachment",
    "Creator",
    "CreatorType",
    "Item",
    "ZoteroTropyError",
    "ConfigurationError",
    "InputFormatError",
    "AttachmentPathError",
    "OutputError",
]
