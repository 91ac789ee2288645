"""
Section planner.

Decides which sections exist, which rows each contains and in what order,
for a given detail variant. The planner is the single source of content
selection: every renderer draws exactly what plan_sections returns.

Rules:
- Section order is fixed and identical for both variants
- Row order within a section is the declared candidate order
- Absent rows are never emitted
- MINIMAL drops free-text block rows regardless of presence
- An empty section is kept (zero rows) in COMPREHENSIVE and omitted in MINIMAL
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .content import BiodataContent
from .models import Row, Section, Variant


@dataclass(frozen=True)
class RowSpec:
    """A candidate row: display label, content key, and block flag."""
    label: str
    key: str
    block: bool = False


@dataclass(frozen=True)
class SectionSpec:
    """A candidate section with its fixed row list."""
    heading: str
    description: str
    rows: tuple[RowSpec, ...]


# =============================================================================
# Candidate Sections (fixed order)
# =============================================================================

SECTION_SPECS: Final[tuple[SectionSpec, ...]] = (
    SectionSpec(
        heading="Basic Information",
        description="Essential personal details",
        rows=(
            RowSpec("Gender", "gender"),
            RowSpec("Date of Birth", "date_of_birth"),
            RowSpec("Age", "age"),
            RowSpec("Marital Status", "marital_status"),
            RowSpec("Height", "height"),
            RowSpec("Weight", "weight"),
            RowSpec("Complexion", "complexion"),
            RowSpec("Blood Group", "blood_group"),
            RowSpec("Nationality", "nationality"),
        ),
    ),
    SectionSpec(
        heading="Contact & Location",
        description="Where and how to reach",
        rows=(
            RowSpec("Phone", "phone"),
            RowSpec("Email", "email"),
            RowSpec("Address", "full_address"),
        ),
    ),
    SectionSpec(
        heading="Education",
        description="Educational background",
        rows=(
            RowSpec("Education Level", "education_level"),
            RowSpec("Education Details", "education_details", block=True),
        ),
    ),
    SectionSpec(
        heading="Career & Income",
        description="Professional background",
        rows=(
            RowSpec("Profession", "profession"),
            RowSpec("Annual Income", "annual_income"),
            RowSpec("Work Location", "work_location"),
            RowSpec("Occupation Details", "occupation", block=True),
        ),
    ),
    SectionSpec(
        heading="Family Information",
        description="Family background",
        rows=(
            RowSpec("Father's Name", "father_name"),
            RowSpec("Father's Occupation", "father_occupation"),
            RowSpec("Mother's Name", "mother_name"),
            RowSpec("Mother's Occupation", "mother_occupation"),
            RowSpec("Siblings", "siblings_count"),
            RowSpec("Siblings Details", "siblings_details", block=True),
        ),
    ),
    SectionSpec(
        heading="Religious Practice",
        description="Background and practices",
        rows=(
            RowSpec("Religion", "religion"),
            RowSpec("Sect", "sect"),
            RowSpec("Practice", "religious_practice"),
            RowSpec("Prayer Frequency", "prayer_frequency"),
            RowSpec("Fasting", "fasting"),
            RowSpec("Quran Reading", "quran_reading"),
        ),
    ),
    SectionSpec(
        heading="About",
        description="Personal notes",
        rows=(
            RowSpec("About Me", "about_me", block=True),
            RowSpec("Hobbies & Interests", "hobbies", block=True),
            RowSpec("Languages", "languages"),
        ),
    ),
    SectionSpec(
        heading="Marriage Preferences",
        description="What they're looking for",
        rows=(
            RowSpec("Preferred Age Range", "preferred_age_range"),
            RowSpec("Preferred Education", "preferred_education"),
            RowSpec("Preferred Profession", "preferred_profession"),
            RowSpec("Preferred Location", "preferred_location"),
            RowSpec("Willing To Relocate", "willing_to_relocate"),
            RowSpec("Expectations", "expectations", block=True),
            RowSpec("Other Preferences", "other_preferences", block=True),
        ),
    ),
)


# =============================================================================
# Planning
# =============================================================================


def plan_rows(spec: SectionSpec, content: BiodataContent, variant: Variant) -> tuple[Row, ...]:
    """Present rows of one section, in declared order."""
    rows = []
    for row_spec in spec.rows:
        if row_spec.block and variant is Variant.MINIMAL:
            continue
        value = content.display(row_spec.key)
        if value is None:
            continue
        rows.append(Row(label=row_spec.label, value=value, wrapped=row_spec.block))
    return tuple(rows)


def plan_sections(content: BiodataContent, variant: Variant) -> list[Section]:
    """
    Produce the ordered section list for a variant.

    Args:
        content: Content model over the record being rendered
        variant: Detail level

    Returns:
        Sections in fixed order. Under MINIMAL, sections without rows are
        omitted; under COMPREHENSIVE they are kept with an empty body.
    """
    sections = []
    for spec in SECTION_SPECS:
        rows = plan_rows(spec, content, variant)
        if not rows and variant is Variant.MINIMAL:
            continue
        sections.append(Section(heading=spec.heading, rows=rows, description=spec.description))
    return sections
