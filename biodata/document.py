"""
Render plan shared by every renderer back-end.

build_document validates the record, builds the content model and runs the
section planner once. Renderers receive the resulting BiodataDocument and
never select content on their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Final, Optional

from utils.formatting import format_timestamp

from .content import BiodataContent
from .models import BiodataRecord, Section, Variant
from .planner import plan_sections


SUBTITLES: Final[dict[Variant, str]] = {
    Variant.MINIMAL: "Minimal biodata (required essentials)",
    Variant.COMPREHENSIVE: "Comprehensive biodata",
}

META_SEPARATOR: Final[str] = "  •  "
DEFAULT_FILENAME_STEM: Final[str] = "biodata"


def biodata_filename(full_name: Optional[str], variant: Variant) -> str:
    """Download filename: trimmed name with spaces as underscores, plus variant."""
    stem = (full_name or "").strip() or DEFAULT_FILENAME_STEM
    return f"{stem.replace(' ', '_')}-{variant.value}.pdf"


@dataclass(frozen=True)
class BiodataDocument:
    """
    Everything a renderer needs to draw one biodata page.

    Header and footer fields are resolved here so both back-ends show the
    same title, badge, meta line and identifier.
    """
    record: BiodataRecord
    variant: Variant
    sections: tuple[Section, ...]
    title: str
    subtitle: str
    status_badge: Optional[str]
    meta_line: Optional[str]
    generated_at: datetime
    document_id: str
    filename: str

    @property
    def generated_label(self) -> str:
        return f"Generated on {format_timestamp(self.generated_at)}"

    def content_pairs(self) -> list[tuple[str, str]]:
        """Ordered (section heading, row label) pairs selected for this document."""
        return [
            (section.heading, row.label)
            for section in self.sections
            for row in section.rows
        ]


def _document_id(record: BiodataRecord) -> str:
    parts = ["Biodata" if record.id is None else f"Biodata #{record.id}"]
    if record.token and record.token.strip():
        parts.append(f"Token: {record.token.strip()}")
    return " • ".join(parts)


def build_document(
    record: BiodataRecord,
    variant: Variant = Variant.COMPREHENSIVE,
    today: Optional[date] = None,
    generated_at: Optional[datetime] = None,
) -> BiodataDocument:
    """
    Validate a record and build its render plan.

    Args:
        record: Finalized biodata record
        variant: Detail level (default comprehensive)
        today: Reference date for age derivation (defaults to the current date)
        generated_at: Timestamp printed in the footer (defaults to now)

    Raises:
        InvalidRecordError: If full name or gender is missing
    """
    record.require_valid()
    generated_at = generated_at or datetime.now()
    today = today or generated_at.date()

    content = BiodataContent(record, today=today)
    sections = tuple(plan_sections(content, variant))

    status_badge = content.display("status")
    meta_parts = [
        part for part in (
            content.display("profession"),
            content.location(),
            content.display("religion"),
        ) if part
    ]

    return BiodataDocument(
        record=record,
        variant=variant,
        sections=sections,
        title=content.text("full_name"),
        subtitle=SUBTITLES[variant],
        status_badge=status_badge,
        meta_line=META_SEPARATOR.join(meta_parts) or None,
        generated_at=generated_at,
        document_id=_document_id(record),
        filename=biodata_filename(record.full_name, variant),
    )
