"""Validation of raw export items before conversion.

Conversion itself never fails on odd field content, so most findings are
warnings: they explain why a value will be empty or missing in the CSV.
Errors are reserved for structurally broken items that cannot be modelled.
"""

from dataclasses import dataclass, field
from typing import Any

from zotero_tropy.core.models import CreatorType

VALID_CREATOR_TYPES = frozenset(t.value for t in CreatorType)

LIST_FIELDS = ("creators", "attachments", "notes", "tags")


@dataclass(frozen=True)
class ValidationIssue:
    """A problem found in one raw item.

    ``field_path`` is dot-notation into the export (``items.3.attachments.0``).
    """

    field_path: str
    message: str
    source_value: Any | None = None


@dataclass
class ValidationResult:
    """Warnings and errors found in one raw item."""

    warnings: list[ValidationIssue] = field(default_factory=list)
    errors: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_warning(
        self, field_path: str, message: str, source_value: Any | None = None
    ) -> None:
        self.warnings.append(ValidationIssue(field_path, message, source_value))

    def add_error(
        self, field_path: str, message: str, source_value: Any | None = None
    ) -> None:
        self.errors.append(ValidationIssue(field_path, message, source_value))


def validate_item(raw_item: Any, index: int = 0) -> ValidationResult:
    """Validate one raw entry of the export's ``items`` list.

    Checks:
    - The item is a JSON object (error)
    - List fields (creators, attachments, notes, tags) are lists (error)
    - A title is present (warning, exported as "Untitled")
    - Attachments have a path (warning, attachment is skipped)
    - Creator types are known (warning, treated as a primary creator)

    Args:
        raw_item: The item as parsed from JSON
        index: Position of the item in the export, used in field paths

    Returns:
        ValidationResult with is_valid=False if the item cannot be converted
    """
    result = ValidationResult()
    base_path = f"items.{index}"

    if not isinstance(raw_item, dict):
        result.add_error(
            field_path=base_path,
            message=f"Item must be an object, got {type(raw_item).__name__}",
            source_value=type(raw_item).__name__,
        )
        return result

    for list_field in LIST_FIELDS:
        value = raw_item.get(list_field)
        if value is not None and not isinstance(value, list):
            result.add_error(
                field_path=f"{base_path}.{list_field}",
                message=f"'{list_field}' must be a list, got {type(value).__name__}",
                source_value=type(value).__name__,
            )
    if not result.is_valid:
        return result

    title = raw_item.get("title")
    if not title or not str(title).strip():
        result.add_warning(
            field_path=f"{base_path}.title",
            message="Item has no title, exporting as 'Untitled'",
        )

    for i, attachment in enumerate(raw_item.get("attachments") or []):
        if not isinstance(attachment, dict) or not attachment.get("path"):
            result.add_warning(
                field_path=f"{base_path}.attachments.{i}",
                message="Attachment has no stored file, skipping",
                source_value=(
                    attachment.get("title") if isinstance(attachment, dict) else None
                ),
            )

    for i, creator in enumerate(raw_item.get("creators") or []):
        creator_type = creator.get("creatorType") if isinstance(creator, dict) else None
        if creator_type and creator_type not in VALID_CREATOR_TYPES:
            result.add_warning(
                field_path=f"{base_path}.creators.{i}.creatorType",
                message=f"Unknown creator type '{creator_type}', treating as creator",
                source_value=creator_type,
            )

    return result
