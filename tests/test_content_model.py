"""
Tests for the biodata record and content model

Tests covering:
1. Presence rule (blank strings absent, 0 and False present)
2. Enum prettifying
3. Derived fields (age, date of birth, ranges, yes/no)
4. Composite location and address fields
5. Record construction from API data and validation
"""

import pytest
from datetime import date

from biodata import (
    BiodataContent,
    BiodataRecord,
    InvalidRecordError,
    Variant,
    create_sample_biodata,
    is_present,
    prettify_enum,
)
from biodata.content import calculate_age, parse_date


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def reference_date():
    """Fixed reference date so derived ages are stable."""
    return date(2024, 6, 1)


@pytest.fixture
def sample_content(reference_date):
    return BiodataContent(create_sample_biodata(), today=reference_date)


def make_content(reference_date, **fields):
    record = BiodataRecord(full_name="Test Person", gender="male", **fields)
    return BiodataContent(record, today=reference_date)


# =============================================================================
# Presence
# =============================================================================


class TestPresence:
    """A single presence rule applies to every field."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_absent_values(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["x", " x ", 0, False, 3])
    def test_present_values(self, value):
        assert is_present(value) is True

    def test_whitespace_field_has_no_display(self, reference_date):
        content = make_content(reference_date, height="   ")
        assert content.present("height") is False
        assert content.display("height") is None

    def test_display_is_trimmed(self, reference_date):
        content = make_content(reference_date, nationality="  Bangladeshi ")
        assert content.display("nationality") == "Bangladeshi"

    def test_zero_siblings_is_present(self, reference_date):
        content = make_content(reference_date, siblings_count=0)
        assert content.display("siblings_count") == "0"


# =============================================================================
# Prettify
# =============================================================================


class TestPrettifyEnum:
    """Underscores become spaces and words are capitalised."""

    @pytest.mark.parametrize("raw,expected", [
        ("pending_review", "Pending Review"),
        ("never_married", "Never Married"),
        ("five_times_daily", "Five Times Daily"),
        ("islam", "Islam"),
        ("Published", "Published"),
    ])
    def test_prettify(self, raw, expected):
        assert prettify_enum(raw) == expected

    def test_non_latin_letters_left_as_written(self):
        assert prettify_enum("élan_vital") == "éLan Vital"
        assert prettify_enum("ঢাকা_city") == "ঢাকা City"

    def test_enum_fields_are_prettified(self, sample_content):
        assert sample_content.display("marital_status") == "Never Married"
        assert sample_content.display("status") == "Published"
        assert sample_content.display("gender") == "Female"

    def test_free_text_is_not_prettified(self, sample_content):
        assert sample_content.display("profession") == "Data Analyst"


# =============================================================================
# Derived Fields
# =============================================================================


class TestDerivedFields:
    """Age, date of birth and preference fields are derived on read."""

    def test_age_before_birthday(self):
        assert calculate_age(date(1997, 3, 5), date(2024, 3, 4)) == 26

    def test_age_on_birthday(self):
        assert calculate_age(date(1997, 3, 5), date(2024, 3, 5)) == 27

    def test_sample_age_and_date_of_birth(self, sample_content):
        assert sample_content.display("age") == "27"
        assert sample_content.display("date_of_birth") == "05 Mar 1997"

    def test_iso_datetime_string_is_parsed(self):
        assert parse_date("1997-03-05T00:00:00Z") == date(1997, 3, 5)

    def test_unparseable_date_of_birth_is_absent(self, reference_date):
        content = make_content(reference_date, date_of_birth="sometime in 1990")
        assert content.present("date_of_birth") is False
        assert content.present("age") is False

    def test_future_date_of_birth_has_no_age(self, reference_date):
        content = make_content(reference_date, date_of_birth="2030-01-01")
        assert content.display("age") is None
        assert content.display("date_of_birth") == "01 Jan 2030"

    def test_implausible_age_is_absent(self, reference_date):
        content = make_content(reference_date, date_of_birth="1850-01-01")
        assert content.display("age") is None

    def test_date_object_is_accepted(self, reference_date):
        content = make_content(reference_date, date_of_birth=date(2000, 1, 1))
        assert content.display("age") == "24"

    def test_preferred_age_range(self, sample_content):
        assert sample_content.display("preferred_age_range") == "28 - 34 years"

    def test_preferred_age_range_needs_both_ends(self, reference_date):
        content = make_content(reference_date, preferred_age_min=25)
        assert content.present("preferred_age_range") is False

    def test_willing_to_relocate_false_is_no(self, sample_content):
        assert sample_content.display("willing_to_relocate") == "No"

    def test_willing_to_relocate_unset_is_absent(self, reference_date):
        content = make_content(reference_date)
        assert content.display("willing_to_relocate") is None

    @pytest.mark.parametrize("value", ["", "   ", "maybe"])
    def test_willing_to_relocate_unrecognised_is_absent(self, reference_date, value):
        content = make_content(reference_date, willing_to_relocate=value)
        assert content.present("willing_to_relocate") is False
        assert content.display("willing_to_relocate") is None

    @pytest.mark.parametrize("value,expected", [
        (True, "Yes"),
        (False, "No"),
        ("true", "Yes"),
        (" Yes ", "Yes"),
        ("1", "Yes"),
        ("false", "No"),
        ("NO", "No"),
        ("0", "No"),
    ])
    def test_willing_to_relocate_values(self, reference_date, value, expected):
        content = make_content(reference_date, willing_to_relocate=value)
        assert content.display("willing_to_relocate") == expected

    def test_preferred_age_range_is_trimmed(self, reference_date):
        content = make_content(reference_date, preferred_age_min=" 28 ", preferred_age_max="34")
        assert content.display("preferred_age_range") == "28 - 34 years"

    def test_preferred_age_range_blank_bound_is_absent(self, reference_date):
        content = make_content(reference_date, preferred_age_min="  ", preferred_age_max="34")
        assert content.display("preferred_age_range") is None


# =============================================================================
# Composite Fields
# =============================================================================


class TestCompositeFields:
    """Composites join present parts and skip absent ones."""

    def test_location(self, sample_content):
        assert sample_content.location() == "Dhaka, Bangladesh"

    def test_full_address(self, sample_content):
        assert sample_content.full_address() == (
            "House 12, Road 5, Dhanmondi, Dhaka, Dhaka Division, Bangladesh"
        )

    def test_absent_parts_are_skipped(self, reference_date):
        content = make_content(reference_date, city="  ", country="Canada")
        assert content.location() == "Canada"
        assert content.full_address() == "Canada"

    def test_no_parts_means_absent(self, reference_date):
        content = make_content(reference_date)
        assert content.location() is None
        assert content.present("full_address") is False


# =============================================================================
# Record
# =============================================================================


class TestBiodataRecord:
    """Record construction and the required-field check."""

    def test_from_dict_accepts_camel_case(self):
        record = BiodataRecord.from_dict({
            "fullName": "Yusuf Ali",
            "gender": "male",
            "dateOfBirth": "1995-01-20",
            "quranReading": "daily",
            "preferredAgeMin": 24,
            "photoUrl": "https://example.com/photo.jpg",
        })
        assert record.full_name == "Yusuf Ali"
        assert record.date_of_birth == "1995-01-20"
        assert record.quran_reading == "daily"
        assert record.preferred_age_min == 24

    def test_from_dict_accepts_snake_case(self):
        record = BiodataRecord.from_dict({"full_name": "Yusuf Ali", "blood_group": "O+"})
        assert record.blood_group == "O+"

    def test_missing_required_fields(self):
        is_valid, errors = BiodataRecord(full_name="  ").validate()
        assert is_valid is False
        assert errors == [
            "Missing required field: full_name",
            "Missing required field: gender",
        ]

    def test_require_valid_raises(self):
        with pytest.raises(InvalidRecordError) as exc_info:
            BiodataRecord(full_name="Yusuf Ali").require_valid()
        assert exc_info.value.errors == ["Missing required field: gender"]

    def test_sample_is_valid(self):
        assert create_sample_biodata().validate() == (True, [])


class TestVariant:
    """Variant parsing."""

    def test_case_insensitive(self):
        assert Variant.from_string(" MINIMAL ") is Variant.MINIMAL

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_empty_means_comprehensive(self, value):
        assert Variant.from_string(value) is Variant.COMPREHENSIVE

    def test_unknown_variant_raises(self):
        with pytest.raises(ValueError):
            Variant.from_string("full")
