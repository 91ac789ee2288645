"""
Content model for biodata rendering.

A normalized, read-only view of a BiodataRecord: one presence test and one
display form per field, plus composite and derived values. Both renderer
back-ends read record content exclusively through this model.

Absence is a first-class state here. Nothing in this module raises on a
missing or malformed optional field.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Callable, Final, Optional

from utils.formatting import format_date_display

from .models import BiodataRecord


# =============================================================================
# Constants
# =============================================================================

COMPOSITE_SEPARATOR: Final[str] = ", "

# Enum-like fields shown through prettify_enum
ENUM_FIELDS: Final[frozenset[str]] = frozenset({
    "gender",
    "status",
    "marital_status",
    "complexion",
    "education_level",
    "religion",
    "sect",
    "religious_practice",
    "prayer_frequency",
    "fasting",
    "quran_reading",
})

LOCATION_PARTS: Final[tuple[str, ...]] = ("city", "country")
FULL_ADDRESS_PARTS: Final[tuple[str, ...]] = ("address", "city", "state", "country")

MAX_PLAUSIBLE_AGE: Final[int] = 120

TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "yes", "1"})
FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "no", "0"})

# ASCII word characters only; non-Latin letters are left as written
_WORD_START = re.compile(r"\b\w", re.ASCII)


# =============================================================================
# Pure Helpers
# =============================================================================


def is_present(value: Any) -> bool:
    """
    Presence test shared by every field.

    Strings are present iff non-empty after trimming; any other value is
    present iff not None (0 and False count as present).
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def prettify_enum(value: str) -> str:
    """
    Turn an internal enum value into a display label.

    Underscores become spaces and each word gets an upper-case first letter:
    ``pending_review`` -> ``Pending Review``.
    """
    spaced = value.replace("_", " ")
    return _WORD_START.sub(lambda match: match.group(0).upper(), spaced)


def parse_date(value: Any) -> Optional[date]:
    """Parse a date, datetime or ISO-8601 string. Returns None when unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def calculate_age(born: date, today: date) -> int:
    """Whole years elapsed, using calendar month/day comparison."""
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def join_present(values: list[Any]) -> Optional[str]:
    """Join the present values with the composite separator, or None if none."""
    parts = [str(v).strip() for v in values if is_present(v)]
    if not parts:
        return None
    return COMPOSITE_SEPARATOR.join(parts)


# =============================================================================
# Content Model
# =============================================================================


class BiodataContent:
    """
    Read-only display view over a BiodataRecord.

    Usage:
        content = BiodataContent(record, today=date(2024, 6, 1))
        if content.present("marital_status"):
            label = content.display("marital_status")

    ``today`` is the reference date for age derivation. It is injected so
    that rendering the same record twice gives the same output.
    """

    def __init__(self, record: BiodataRecord, today: date):
        self.record = record
        self.today = today
        self._derived: dict[str, Callable[[], Optional[str]]] = {
            "location": self.location,
            "full_address": self.full_address,
            "age": self.age,
            "date_of_birth": self.date_of_birth,
            "preferred_age_range": self.preferred_age_range,
            "willing_to_relocate": self.willing_to_relocate,
        }

    # -------------------------------------------------------------------------
    # Raw access
    # -------------------------------------------------------------------------

    def raw(self, key: str) -> Any:
        return getattr(self.record, key, None)

    def text(self, key: str) -> str:
        """Trimmed string form of a raw field, empty when absent."""
        value = self.raw(key)
        if not is_present(value):
            return ""
        return str(value).strip()

    # -------------------------------------------------------------------------
    # Presence and display
    # -------------------------------------------------------------------------

    def present(self, key: str) -> bool:
        """True iff the field (or derived value) has something to show."""
        if key in self._derived:
            return self._derived[key]() is not None
        return is_present(self.raw(key))

    def prettify(self, key: str) -> str:
        """Prettified form of an enum-like field. Only call when present."""
        return prettify_enum(self.text(key))

    def display(self, key: str) -> Optional[str]:
        """Display string for a field, or None when the field is absent."""
        if key in self._derived:
            return self._derived[key]()
        if not self.present(key):
            return None
        if key in ENUM_FIELDS:
            return self.prettify(key)
        return self.text(key)

    # -------------------------------------------------------------------------
    # Composite fields
    # -------------------------------------------------------------------------

    def location(self) -> Optional[str]:
        """City and country, e.g. ``Dhaka, Bangladesh``."""
        return join_present([self.raw(k) for k in LOCATION_PARTS])

    def full_address(self) -> Optional[str]:
        """Address, city, state and country, skipping absent parts."""
        return join_present([self.raw(k) for k in FULL_ADDRESS_PARTS])

    # -------------------------------------------------------------------------
    # Derived fields
    # -------------------------------------------------------------------------

    def birth_date(self) -> Optional[date]:
        return parse_date(self.raw("date_of_birth"))

    def age(self) -> Optional[str]:
        born = self.birth_date()
        if born is None:
            return None
        years = calculate_age(born, self.today)
        if years < 0 or years > MAX_PLAUSIBLE_AGE:
            return None
        return str(years)

    def date_of_birth(self) -> Optional[str]:
        born = self.birth_date()
        if born is None:
            return None
        return format_date_display(born)

    def preferred_age_range(self) -> Optional[str]:
        low = self.text("preferred_age_min")
        high = self.text("preferred_age_max")
        if not (low and high):
            return None
        return f"{low} - {high} years"

    def willing_to_relocate(self) -> Optional[str]:
        """Yes/No for a bool or a yes/no-like string; anything else is absent."""
        value = self.raw("willing_to_relocate")
        if not is_present(value):
            return None
        if isinstance(value, bool):
            return "Yes" if value else "No"
        word = str(value).strip().lower()
        if word in TRUE_WORDS:
            return "Yes"
        if word in FALSE_WORDS:
            return "No"
        return None
