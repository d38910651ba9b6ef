"""Zotero to Tropy converter.

Maps Zotero export records onto the Dublin Core / Tropy vocabulary used by
Tropy's CSV import.
"""

from zotero_tropy.core.version import __version__
from zotero_tropy.converter import ItemConverter, convert_item

__all__ = ["__version__", "ItemConverter", "convert_item"]
