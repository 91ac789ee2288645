"""
Single-page composer.

Places section cards top-down from a running cursor. A card that would
cross the bottom clamp line is dropped whole and the cursor stays where it
was; the next card is still tried. The page never grows and no card is ever
cut mid-row.

Header and footer bands are fixed and outside the clamp.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from biodata.models import Section

from .text_layout import DEFAULT_METRICS, LayoutMetrics, row_lines, section_height


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """A section card placed on the page."""
    section: Section
    top: float
    height: float
    lines: tuple[tuple[str, ...], ...]

    @property
    def bottom(self) -> float:
        return self.top - self.height


@dataclass
class PageLayout:
    """Result of composing one page."""
    placements: list[Placement] = field(default_factory=list)
    dropped: list[Section] = field(default_factory=list)
    cursor: float = 0.0

    @property
    def placed_headings(self) -> list[str]:
        return [p.section.heading for p in self.placements]

    @property
    def dropped_headings(self) -> list[str]:
        return [s.heading for s in self.dropped]


def compose_page(sections: list[Section], metrics: LayoutMetrics = DEFAULT_METRICS) -> PageLayout:
    """
    Apply the clamp policy to an ordered section list.

    Args:
        sections: Planned sections, in display order
        metrics: Page geometry

    Returns:
        PageLayout with whole-section placements and the dropped sections
    """
    layout = PageLayout(cursor=metrics.content_top)

    for section in sections:
        height = section_height(section, metrics)
        if layout.cursor - height < metrics.bottom_margin:
            logger.info(
                "Section %r dropped: card height %.1f exceeds remaining %.1f",
                section.heading,
                height,
                layout.cursor - metrics.bottom_margin,
            )
            layout.dropped.append(section)
            continue

        layout.placements.append(Placement(
            section=section,
            top=layout.cursor,
            height=height,
            lines=tuple(tuple(row_lines(row, metrics)) for row in section.rows),
        ))
        layout.cursor -= height + metrics.section_gap

    return layout
