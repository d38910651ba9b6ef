"""Rights field mapping for dc:rights and dcterms:rightsHolder.

The Rights field is written as a license code optionally followed by the
rights holder in parentheses:

    "CC BY-SA (Jane Doe)"
    "InC (Estate of J. Smith [deceased])"
    "NoC-US"

Known license codes are expanded to their canonical Creative Commons or
RightsStatements.org URI; anything else is passed through as written.
Parentheses cannot appear inside the holder, so square brackets are used
instead and converted back to parentheses on export.
"""

import re

# License text, then an optional "(holder)" group at the end of the string
RIGHTS_PATTERN = re.compile(r"^(?P<license>[^()]*?)\s*(?:\((?P<holder>[^()]*)\))?$")

CREATIVE_COMMONS_URIS: dict[str, str] = {
    "CC BY": "https://creativecommons.org/licenses/by/4.0/",
    "CC BY-SA": "https://creativecommons.org/licenses/by-sa/4.0/",
    "CC BY-ND": "https://creativecommons.org/licenses/by-nd/4.0/",
    "CC BY-NC": "https://creativecommons.org/licenses/by-nc/4.0/",
    "CC BY-NC-SA": "https://creativecommons.org/licenses/by-nc-sa/4.0/",
    "CC BY-NC-ND": "https://creativecommons.org/licenses/by-nc-nd/4.0/",
    "CC0": "https://creativecommons.org/publicdomain/zero/1.0/",
    "PDM": "https://creativecommons.org/publicdomain/mark/1.0/",
}

RIGHTS_STATEMENT_URIS: dict[str, str] = {
    "InC": "http://rightsstatements.org/vocab/InC/1.0/",
    "InC-OW-EU": "http://rightsstatements.org/vocab/InC-OW-EU/1.0/",
    "InC-EDU": "http://rightsstatements.org/vocab/InC-EDU/1.0/",
    "InC-NC": "http://rightsstatements.org/vocab/InC-NC/1.0/",
    "InC-RUU": "http://rightsstatements.org/vocab/InC-RUU/1.0/",
    "NoC-CR": "http://rightsstatements.org/vocab/NoC-CR/1.0/",
    "NoC-NC": "http://rightsstatements.org/vocab/NoC-NC/1.0/",
    "NoC-OKLR": "http://rightsstatements.org/vocab/NoC-OKLR/1.0/",
    "NoC-US": "http://rightsstatements.org/vocab/NoC-US/1.0/",
    "CNE": "http://rightsstatements.org/vocab/CNE/1.0/",
    "UND": "http://rightsstatements.org/vocab/UND/1.0/",
    "NKC": "http://rightsstatements.org/vocab/NKC/1.0/",
}

LICENSE_URIS: dict[str, str] = {**CREATIVE_COMMONS_URIS, **RIGHTS_STATEMENT_URIS}

# Lookup is case-insensitive ("cc by-sa" == "CC BY-SA")
_LICENSE_URIS_BY_KEY: dict[str, str] = {
    code.upper(): uri for code, uri in LICENSE_URIS.items()
}


def resolve_license(license_text: str) -> str:
    """Expand a license code to its canonical URI.

    Args:
        license_text: License code or free text.

    Returns:
        The canonical URI for a known code, otherwise the text unchanged.

    Example:
        >>> resolve_license("CC BY-SA")
        'https://creativecommons.org/licenses/by-sa/4.0/'
        >>> resolve_license("All rights reserved")
        'All rights reserved'
    """
    return _LICENSE_URIS_BY_KEY.get(license_text.strip().upper(), license_text)


def format_holder(holder: str) -> str:
    """Restore parentheses written as square brackets in a holder name."""
    return holder.replace("[", "(").replace("]", ")").strip()


def map_rights(rights: str | None) -> tuple[str, str]:
    """Map the Rights field to (rights, rights-holder) output values.

    Args:
        rights: Rights string from the export.

    Returns:
        Tuple of the rights statement and the holder name. Both are empty
        strings when the field is absent or cannot be parsed.

    Example:
        >>> map_rights("CC BY-SA (Jane Doe)")
        ('https://creativecommons.org/licenses/by-sa/4.0/', 'Jane Doe')
        >>> map_rights("InC (Smith [heirs])")
        ('http://rightsstatements.org/vocab/InC/1.0/', 'Smith (heirs)')
    """
    if not rights:
        return "", ""

    match = RIGHTS_PATTERN.match(rights.strip())
    if match is None:
        return "", ""

    license_text = match.group("license")
    holder = match.group("holder")

    return (
        resolve_license(license_text) if license_text else "",
        format_holder(holder) if holder else "",
    )
