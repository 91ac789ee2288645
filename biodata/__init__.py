"""
Biodata content layer.

Renderer-independent content selection for biodata documents:
record model, content model, section planner and render plan.

Usage:
    from biodata import BiodataRecord, Variant, build_document

    record = BiodataRecord.from_dict(payload)
    document = build_document(record, Variant.MINIMAL)
    for section in document.sections:
        print(section.heading, [row.label for row in section.rows])
"""

from .models import (
    BiodataRecord,
    InvalidRecordError,
    Row,
    Section,
    Variant,
    create_sample_biodata,
)
from .content import BiodataContent, is_present, prettify_enum
from .planner import SECTION_SPECS, plan_sections
from .document import BiodataDocument, biodata_filename, build_document

__all__ = [
    # Models
    "BiodataRecord",
    "InvalidRecordError",
    "Row",
    "Section",
    "Variant",
    "create_sample_biodata",
    # Content model
    "BiodataContent",
    "is_present",
    "prettify_enum",
    # Planner
    "SECTION_SPECS",
    "plan_sections",
    # Render plan
    "BiodataDocument",
    "biodata_filename",
    "build_document",
]
