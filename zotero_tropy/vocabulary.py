"""Output vocabulary for Tropy CSV import.

Every converted item emits these terms in this exact order, followed by one
path/note pair per exported attachment. Tropy maps the column headers onto
its Dublin Core, EXIF and Tropy properties.

Reference: https://docs.tropy.org/using-tropy/import#csv
"""

DC = "http://purl.org/dc/elements/1.1/"
DCTERMS = "http://purl.org/dc/terms/"
EXIF = "http://www.w3.org/2003/12/exif/ns#"
TROPY = "https://tropy.org/v1/tropy#"

TITLE = DC + "title"
ALTERNATIVE = DCTERMS + "alternative"
DATE = DC + "date"
LANGUAGE = DC + "language"
IDENTIFIER = DC + "identifier"
RIGHTS = DC + "rights"
RIGHTS_HOLDER = DCTERMS + "rightsHolder"
CREATOR = DC + "creator"
CONTRIBUTOR = DCTERMS + "contributor"
SOURCE = DC + "source"
FORMAT = DC + "format"
PUBLISHER = DC + "publisher"
TYPE = DCTERMS + "type"
IS_PART_OF = DCTERMS + "isPartOf"
RELATION = DC + "relation"
TAG = TROPY + "tag"
GPS_DIRECTION = EXIF + "gpsImgDirection"

# Per-attachment columns
PATH = TROPY + "path"
NOTE = TROPY + "note"

ITEM_TERMS: tuple[str, ...] = (
    TITLE,
    ALTERNATIVE,
    DATE,
    LANGUAGE,
    IDENTIFIER,
    RIGHTS,
    RIGHTS_HOLDER,
    CREATOR,
    CONTRIBUTOR,
    SOURCE,
    FORMAT,
    PUBLISHER,
    TYPE,
    IS_PART_OF,
    RELATION,
    TAG,
    GPS_DIRECTION,
)

# Joins multi-valued text (relations, notes) within a single cell
VALUE_SEPARATOR = " --- "
