"""
Text layout engine for the canvas renderer.

Character-budget word wrapping and card height computation. Heights are
computed here, once, and used by the page composer to decide whether a
section fits; they do not depend on which back-end finally draws the page.

Wrapping is a proxy for column width, not glyph measurement:
- Split on runs of whitespace
- Greedy fill up to max_chars per line
- A word longer than the budget sits alone on its own line
- No hyphenation, no truncation, no locale-aware segmentation
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4

from biodata.models import Row, Section


@dataclass(frozen=True)
class LayoutMetrics:
    """
    Fixed page geometry in PDF points (origin bottom-left).

    Defaults are A4 with a 90pt header band and a 50pt bottom clamp line.
    """
    page_width: float = A4[0]
    page_height: float = A4[1]
    margin_x: float = 44
    header_height: float = 90
    header_gap: float = 24
    bottom_margin: float = 50
    footer_baseline: float = 22

    line_height: float = 14
    heading_height: float = 18
    heading_gap: float = 8
    card_padding: float = 14
    section_gap: float = 14

    max_chars_per_line: int = 52
    label_column_width: float = 165

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin_x

    @property
    def content_top(self) -> float:
        """Starting cursor for the first section card."""
        return self.page_height - self.header_height - self.header_gap


DEFAULT_METRICS = LayoutMetrics()


def wrap_text(value: str, max_chars: int) -> list[str]:
    """
    Greedy word wrap against a character budget.

    Args:
        value: Text to wrap. Leading/trailing whitespace of the whole value
            is ignored; inner whitespace runs collapse to single spaces.
        max_chars: Maximum characters per line

    Returns:
        Lines in order. Empty for blank input.
    """
    lines: list[str] = []
    line = ""
    for word in value.split():
        candidate = f"{line} {word}" if line else word
        if len(candidate) > max_chars:
            if line:
                lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


def row_lines(row: Row, metrics: LayoutMetrics = DEFAULT_METRICS) -> list[str]:
    """Value lines for a row, at the value column budget."""
    return wrap_text(row.value, metrics.max_chars_per_line)


def row_line_count(row: Row, metrics: LayoutMetrics = DEFAULT_METRICS) -> int:
    return max(1, len(row_lines(row, metrics)))


def rows_height(rows: tuple[Row, ...], metrics: LayoutMetrics = DEFAULT_METRICS) -> float:
    return sum(row_line_count(row, metrics) for row in rows) * metrics.line_height


def section_height(section: Section, metrics: LayoutMetrics = DEFAULT_METRICS) -> float:
    """
    Rendered height of a section card.

    padding + heading + heading gap + row lines * line height + padding.
    An empty section still has its heading and padding.
    """
    return (
        metrics.card_padding
        + metrics.heading_height
        + metrics.heading_gap
        + rows_height(section.rows, metrics)
        + metrics.card_padding
    )
