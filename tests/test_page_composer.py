"""
Tests for the single-page composer

Tests covering:
1. Cards stacked top-down with a fixed gap
2. Whole-card drop when a card would cross the bottom clamp
3. Later cards still tried after a drop
4. Exact-fit boundary
"""

import logging

import pytest

from biodata import Row, Section
from reporting.composer import compose_page
from reporting.text_layout import DEFAULT_METRICS, LayoutMetrics


def make_section(heading, row_count):
    return Section(heading, rows=tuple(Row(f"Label {i}", "value") for i in range(row_count)))


class TestStacking:
    """Placed cards follow each other down the page."""

    def test_all_fit(self):
        sections = [make_section(h, 2) for h in ("A", "B", "C")]
        layout = compose_page(sections)

        assert layout.placed_headings == ["A", "B", "C"]
        assert layout.dropped == []

    def test_positions(self):
        layout = compose_page([make_section("A", 2), make_section("B", 1)])
        first, second = layout.placements

        assert first.top == pytest.approx(DEFAULT_METRICS.content_top)
        assert first.height == 82
        assert second.top == pytest.approx(first.bottom - DEFAULT_METRICS.section_gap)

    def test_lines_recorded_per_row(self):
        layout = compose_page([make_section("A", 3)])
        assert layout.placements[0].lines == (("value",), ("value",), ("value",))

    def test_empty_input(self):
        layout = compose_page([])
        assert layout.placements == []
        assert layout.cursor == pytest.approx(DEFAULT_METRICS.content_top)


class TestClamp:
    """A card crossing the bottom clamp line is dropped whole."""

    def test_drop_then_continue(self):
        # 20 rows -> 334pt card; two of them exceed the page
        sections = [make_section("A", 20), make_section("B", 20), make_section("C", 0)]
        layout = compose_page(sections)

        assert layout.placed_headings == ["A", "C"]
        assert layout.dropped_headings == ["B"]

        first, third = layout.placements
        assert third.top == pytest.approx(first.bottom - DEFAULT_METRICS.section_gap)

    def test_nothing_below_clamp(self):
        sections = [make_section(str(i), 6) for i in range(10)]
        layout = compose_page(sections)

        assert layout.dropped
        for placement in layout.placements:
            assert placement.bottom >= DEFAULT_METRICS.bottom_margin

    def test_cursor_unchanged_by_drop(self):
        layout = compose_page([make_section("Huge", 60)])
        assert layout.placements == []
        assert layout.cursor == pytest.approx(DEFAULT_METRICS.content_top)

    def test_exact_fit_is_placed(self):
        # content_top 244 leaves exactly 194pt above the clamp: 54 + 10 rows * 14
        metrics = LayoutMetrics(page_height=358)
        layout = compose_page([make_section("Fits", 10)], metrics)
        assert layout.placed_headings == ["Fits"]
        assert layout.placements[0].bottom == pytest.approx(metrics.bottom_margin)

    def test_one_point_over_is_dropped(self):
        metrics = LayoutMetrics(page_height=357)
        layout = compose_page([make_section("Fits", 10)], metrics)
        assert layout.dropped_headings == ["Fits"]

    def test_drop_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="reporting.composer"):
            compose_page([make_section("Huge", 60)])
        assert "Huge" in caplog.text
