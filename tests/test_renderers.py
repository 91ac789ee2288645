"""
Tests for the biodata PDF renderers

Tests covering:
1. Both back-ends produce a single-page PDF
2. Deterministic bytes for the same document
3. Both back-ends draw only the planned sections, in order
4. Page clamp reported through dropped_sections
5. Markup-like text in records
"""

import re
import pytest
from datetime import date, datetime

from biodata import BiodataRecord, Variant, build_document, create_sample_biodata
from reporting import CanvasBiodataRenderer, FlowableBiodataRenderer
from reporting.composer import compose_page


RENDERER_CLASSES = [CanvasBiodataRenderer, FlowableBiodataRenderer]

PAGE_OBJECT = re.compile(rb"/Type\s*/Page\b")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def reference_date():
    return date(2024, 6, 1)


@pytest.fixture
def generated_at():
    return datetime(2024, 6, 1, 10, 30)


@pytest.fixture
def make_document(reference_date, generated_at):
    def _make(record=None, variant=Variant.COMPREHENSIVE):
        return build_document(
            record or create_sample_biodata(),
            variant,
            today=reference_date,
            generated_at=generated_at,
        )
    return _make


def page_count(content: bytes) -> int:
    return len(PAGE_OBJECT.findall(content))


# =============================================================================
# Output
# =============================================================================


@pytest.mark.parametrize("renderer_class", RENDERER_CLASSES)
class TestRenderedOutput:
    """Every back-end returns one A4 page of PDF bytes."""

    @pytest.mark.parametrize("variant", list(Variant))
    def test_pdf_bytes(self, renderer_class, variant, make_document):
        rendered = renderer_class().render(make_document(variant=variant))

        assert rendered.content.startswith(b"%PDF")
        assert rendered.media_type == "application/pdf"
        assert rendered.renderer == renderer_class.name
        assert rendered.filename == f"Amina_Rahman-{variant.value}.pdf"

    @pytest.mark.parametrize("variant", list(Variant))
    def test_single_page(self, renderer_class, variant, make_document):
        rendered = renderer_class().render(make_document(variant=variant))
        assert page_count(rendered.content) == 1

    def test_deterministic(self, renderer_class, make_document):
        document = make_document()
        first = renderer_class().render(document)
        second = renderer_class().render(document)
        assert first.content == second.content

    def test_bare_record_fits(self, renderer_class, make_document):
        record = BiodataRecord(full_name="Yusuf Ali", gender="male")
        rendered = renderer_class().render(make_document(record))

        assert rendered.dropped_sections == []
        assert rendered.placed_sections[0] == "Basic Information"

    def test_draws_only_planned_sections(self, renderer_class, make_document):
        document = make_document()
        rendered = renderer_class().render(document)
        planned = [s.heading for s in document.sections]

        assert sorted(rendered.placed_sections + rendered.dropped_sections) == sorted(planned)
        assert rendered.placed_sections == [h for h in planned if h in rendered.placed_sections]

    def test_markup_characters_in_text(self, renderer_class, make_document):
        record = BiodataRecord(
            full_name="Ali & <Sons>",
            gender="male",
            about_me="Likes <b>bold</b> & plain text",
            expectations="a < b > c",
        )
        rendered = renderer_class().render(make_document(record))
        assert rendered.content.startswith(b"%PDF")

    def test_very_long_free_text(self, renderer_class, make_document):
        record = BiodataRecord(
            full_name="Yusuf Ali",
            gender="male",
            about_me="word " * 2000,
            languages="Urdu",
        )
        rendered = renderer_class().render(make_document(record))

        assert page_count(rendered.content) == 1
        assert "About" in rendered.dropped_sections


# =============================================================================
# Back-end Specifics
# =============================================================================


class TestCanvasRenderer:
    """The canvas back-end follows the page composer exactly."""

    def test_matches_composer(self, make_document):
        document = make_document()
        layout = compose_page(list(document.sections))
        rendered = CanvasBiodataRenderer().render(document)

        assert rendered.placed_sections == layout.placed_headings
        assert rendered.dropped_sections == layout.dropped_headings

    def test_comprehensive_sample_is_clamped(self, make_document):
        rendered = CanvasBiodataRenderer().render(make_document())
        assert rendered.placed_sections[0] == "Basic Information"
        assert rendered.dropped_sections


class TestFlowableRenderer:
    """The flowable back-end exposes its tree."""

    def test_story_has_header_and_cards(self, make_document):
        document = make_document()
        story = FlowableBiodataRenderer().build_story(document)
        # header, then a spacer and a card per section
        assert len(story) == 1 + 2 * len(document.sections)

    def test_minimal_story(self, make_document):
        document = make_document(variant=Variant.MINIMAL)
        story = FlowableBiodataRenderer().build_story(document)
        assert len(story) == 1 + 2 * len(document.sections)
