"""Version information for zotero-tropy."""

__version__ = "0.1.0"
