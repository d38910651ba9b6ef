"""Shared fixtures for zotero-tropy tests."""

import json

import pytest


@pytest.fixture
def raw_item():
    """A fully populated photograph record as exported by Zotero."""
    return {
        "itemType": "artwork",
        "itemKey": "QX7ZP2LM",
        "title": "View of the harbour [Vue du port]",
        "date": "1895",
        "language": "fr",
        "url": "https://example.org/items/42",
        "rights": "CC BY-NC (Musée [municipal])",
        "creators": [
            {"creatorType": "contributor", "lastName": "Archivist"},
            {"creatorType": "artist", "firstName": "Louise", "lastName": "Martin"},
        ],
        "extra": "Harbour views\nOriginal: Municipal Archives, box 12",
        "tags": [{"tag": "harbour"}, {"tag": "boats", "type": 1}],
        "abstractNote": "Fishing boats at the quay.\nTaken facing the Northeast.",
        "attachments": [
            {"title": "Scan", "path": "storage/ABCD1234/photo.jpg"},
            {"title": "Catalogue page", "url": "https://example.org/catalogue"},
            {"title": "Verso", "path": "storage/EFGH5678/verso.jpg"},
        ],
        "notes": [{"note": "Glass plate negative."}],
        "archive": "Municipal Archives",
        "archiveLocation": "Box 12",
        "libraryCatalog": "City Library",
        "callNumber": "PH 1895.42",
        "artworkSize": "13 x 18 cm",
        "medium": "Albumen print",
        "publisher": "Studio Martin",
    }


@pytest.fixture
def export_file(tmp_path, raw_item):
    """Write a one-item export to disk and return its path."""
    path = tmp_path / "export.json"
    path.write_text(json.dumps({"items": [raw_item]}), encoding="utf-8")
    return path
