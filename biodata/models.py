"""
Data models for the biodata renderer.

Defines the finalized biodata record supplied by the data layer, the detail
variant selector, and the renderer-independent Section/Row projection.
All structures are immutable and recomputed on every render.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Final, Optional, Union


# =============================================================================
# Constants
# =============================================================================

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("full_name", "gender")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


# =============================================================================
# Errors
# =============================================================================


class InvalidRecordError(ValueError):
    """Raised when a record is missing fields required before rendering."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid biodata record: {'; '.join(errors)}")


# =============================================================================
# Enums
# =============================================================================


class Variant(Enum):
    """
    Detail level of a rendered document.

    MINIMAL is a strict subset of COMPREHENSIVE.
    """
    MINIMAL = "minimal"
    COMPREHENSIVE = "comprehensive"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Variant":
        """Convert string to Variant, case-insensitive. Empty means comprehensive."""
        if value is None or not value.strip():
            return cls.COMPREHENSIVE
        normalised = value.lower().strip()
        for member in cls:
            if member.value == normalised:
                return member
        raise ValueError(f"Unknown biodata variant: {value!r}")


# =============================================================================
# Record
# =============================================================================

DateLike = Union[date, datetime, str]


@dataclass(frozen=True)
class BiodataRecord:
    """
    A finalized biodata record.

    Every field may be absent except full_name and gender, which are
    required upstream. The record is read-only for the duration of a render.
    """
    full_name: Optional[str] = None
    gender: Optional[str] = None

    # Identity
    id: Optional[int] = None
    token: Optional[str] = None
    status: Optional[str] = None
    date_of_birth: Optional[DateLike] = None
    marital_status: Optional[str] = None
    nationality: Optional[str] = None

    # Physical
    height: Optional[str] = None
    weight: Optional[str] = None
    complexion: Optional[str] = None
    blood_group: Optional[str] = None

    # Contact & location
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None

    # Education
    education_level: Optional[str] = None
    education_details: Optional[str] = None

    # Career & income
    profession: Optional[str] = None
    occupation: Optional[str] = None
    annual_income: Optional[str] = None
    work_location: Optional[str] = None

    # Family
    father_name: Optional[str] = None
    father_occupation: Optional[str] = None
    mother_name: Optional[str] = None
    mother_occupation: Optional[str] = None
    siblings_count: Optional[int] = None
    siblings_details: Optional[str] = None

    # Religious practice
    religion: Optional[str] = None
    sect: Optional[str] = None
    religious_practice: Optional[str] = None
    prayer_frequency: Optional[str] = None
    fasting: Optional[str] = None
    quran_reading: Optional[str] = None

    # Marriage preferences
    preferred_age_min: Optional[int] = None
    preferred_age_max: Optional[int] = None
    preferred_education: Optional[str] = None
    preferred_profession: Optional[str] = None
    preferred_location: Optional[str] = None
    willing_to_relocate: Optional[bool] = None
    other_preferences: Optional[str] = None
    expectations: Optional[str] = None

    # Free text
    about_me: Optional[str] = None
    hobbies: Optional[str] = None
    languages: Optional[str] = None

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BiodataRecord":
        """
        Build a record from API/JSON data.

        Accepts both snake_case and camelCase keys (``fullName``,
        ``dateOfBirth``). Unknown keys such as photos or timestamps are
        ignored.
        """
        known = cls.field_names()
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = key if key in known else _CAMEL_BOUNDARY.sub("_", key).lower()
            if name in known:
                values[name] = value
        return cls(**values)

    def validate(self) -> tuple[bool, list[str]]:
        """
        Check the fields the renderer relies on.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or not str(value).strip():
                errors.append(f"Missing required field: {name}")
        return len(errors) == 0, errors

    def require_valid(self) -> "BiodataRecord":
        """Return self, or raise InvalidRecordError if required fields are missing."""
        is_valid, errors = self.validate()
        if not is_valid:
            raise InvalidRecordError(errors)
        return self


# =============================================================================
# Section Projection
# =============================================================================


@dataclass(frozen=True)
class Row:
    """
    One label/value pair within a section.

    wrapped=False is a short inline value drawn right-aligned on one
    baseline; wrapped=True is a free-text block drawn as a paragraph inside
    its own bordered sub-block.
    """
    label: str
    value: str
    wrapped: bool = False


@dataclass(frozen=True)
class Section:
    """A titled group of rows rendered as one bordered card."""
    heading: str
    rows: tuple[Row, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dict(self) -> dict[str, Any]:
        return {
            "heading": self.heading,
            "description": self.description,
            "rows": [
                {"label": row.label, "value": row.value, "wrapped": row.wrapped}
                for row in self.rows
            ],
        }


# =============================================================================
# Sample Data
# =============================================================================


def create_sample_biodata() -> BiodataRecord:
    """Create a fully populated sample record for previews and testing."""
    return BiodataRecord(
        id=1042,
        token="bd-7f3a9c",
        status="published",
        full_name="Amina Rahman",
        gender="female",
        date_of_birth="1997-03-05",
        marital_status="never_married",
        nationality="Bangladeshi",
        height="5'4\"",
        weight="54 kg",
        complexion="wheatish",
        blood_group="B+",
        phone="+880 1711 000000",
        email="amina.rahman@example.com",
        address="House 12, Road 5, Dhanmondi",
        city="Dhaka",
        state="Dhaka Division",
        country="Bangladesh",
        education_level="masters",
        education_details="MSc in Applied Mathematics, University of Dhaka. "
                          "Thesis on numerical methods for fluid simulation.",
        profession="Data Analyst",
        occupation="Works on reporting pipelines for a healthcare NGO, "
                   "with a focus on maternal health programmes.",
        annual_income="BDT 900,000",
        work_location="Dhaka",
        father_name="Abdul Rahman",
        father_occupation="Retired civil engineer",
        mother_name="Nasreen Rahman",
        mother_occupation="Homemaker",
        siblings_count=2,
        siblings_details="One elder brother (married, doctor) and one younger sister (student).",
        religion="islam",
        sect="sunni",
        religious_practice="practicing",
        prayer_frequency="five_times_daily",
        fasting="all_ramadan",
        quran_reading="regularly",
        preferred_age_min=28,
        preferred_age_max=34,
        preferred_education="Graduate or above",
        preferred_profession="Any halal profession",
        preferred_location="Dhaka",
        willing_to_relocate=False,
        other_preferences="Someone who values family and continued learning.",
        expectations="A kind, practicing partner who supports each other's careers.",
        about_me="Calm and curious. I enjoy long walks, reading history, and "
                 "volunteering at weekend literacy classes.",
        hobbies="Reading, calligraphy, cooking",
        languages="Bangla, English, Arabic (basic)",
    )
