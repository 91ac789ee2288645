"""
Declarative biodata renderer.

Builds a tree of ReportLab platypus flowables (nested Table boxes with
Paragraph leaves) and lets platypus measure glyphs, wrap lines and position
everything. Visual wrapping may differ from the canvas renderer's character
budget; the sections and rows drawn are exactly document.sections.

The page is single: cards are fitted against the frame height with the same
clamp rule the page composer applies (a card that does not fit is dropped
whole, later cards are still tried), using platypus-measured heights.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import List, Tuple
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfgen import canvas
from reportlab.platypus import (
    Flowable,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from biodata.document import BiodataDocument
from biodata.models import Row, Section

from .base import BiodataRenderer, RenderedBiodata
from .styles import FONT_REGULAR, Palette, get_biodata_styles, status_color


logger = logging.getLogger(__name__)


class FlowableBiodataRenderer(BiodataRenderer):
    """
    Renders a biodata page from a platypus flowable tree.

    Usage:
        renderer = FlowableBiodataRenderer()
        story = renderer.build_story(document)   # the UI tree
        rendered = renderer.render(document)     # PDF bytes
    """

    name = "declarative"

    PAGE_WIDTH, PAGE_HEIGHT = A4
    MARGIN_LEFT = 20
    MARGIN_RIGHT = 20
    MARGIN_TOP = 20
    MARGIN_BOTTOM = 36

    # SimpleDocTemplate's frame pads each edge by 6pt
    FRAME_PADDING = 6

    CARD_GAP = 12
    CARD_PADDING = 12
    BADGE_COLUMN = 140
    LABEL_SHARE = 0.42
    FOOTER_BASELINE = 18

    def __init__(self):
        """Initialize the renderer with styles."""
        self.styles = get_biodata_styles()

    @property
    def frame_width(self) -> float:
        return self.PAGE_WIDTH - self.MARGIN_LEFT - self.MARGIN_RIGHT - 2 * self.FRAME_PADDING

    @property
    def frame_height(self) -> float:
        return self.PAGE_HEIGHT - self.MARGIN_TOP - self.MARGIN_BOTTOM - 2 * self.FRAME_PADDING

    # =========================================================================
    # Public API
    # =========================================================================

    def build_story(self, document: BiodataDocument) -> List[Flowable]:
        """The full flowable tree: header followed by every section card."""
        story = self._build_header(document)
        for section in document.sections:
            story.append(Spacer(1, self.CARD_GAP))
            story.append(self._build_card(section))
        return story

    def render(self, document: BiodataDocument) -> RenderedBiodata:
        header = self._build_header(document)
        cards = [(section, self._build_card(section)) for section in document.sections]
        placed, dropped = self._fit_cards(header, cards)

        story: List[Flowable] = list(header)
        for _, card in placed:
            story.append(Spacer(1, self.CARD_GAP))
            story.append(card)

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=self.MARGIN_LEFT,
            rightMargin=self.MARGIN_RIGHT,
            topMargin=self.MARGIN_TOP,
            bottomMargin=self.MARGIN_BOTTOM,
            title=f"Biodata - {document.title}",
            author="SabrSpace",
            subject=document.subtitle,
            invariant=1,
        )

        def draw_page_frame(canvas_obj: canvas.Canvas, doc_template):
            self._draw_page_frame(canvas_obj, document)

        doc.build(story, onFirstPage=draw_page_frame, onLaterPages=draw_page_frame)

        return RenderedBiodata(
            content=buffer.getvalue(),
            renderer=self.name,
            filename=document.filename,
            placed_sections=[section.heading for section, _ in placed],
            dropped_sections=[section.heading for section in dropped],
        )

    # =========================================================================
    # Page Fitting
    # =========================================================================

    def _measure(self, flowable: Flowable) -> float:
        _, height = flowable.wrap(self.frame_width, self.frame_height)
        return height + flowable.getSpaceBefore() + flowable.getSpaceAfter()

    def _fit_cards(
        self,
        header: List[Flowable],
        cards: List[Tuple[Section, Table]],
    ) -> Tuple[List[Tuple[Section, Table]], List[Section]]:
        """Keep the cards that fit below the header; drop the rest whole."""
        remaining = self.frame_height - sum(self._measure(f) for f in header)
        placed = []
        dropped = []

        for section, card in cards:
            needed = self.CARD_GAP + self._measure(card)
            if needed > remaining:
                logger.info(
                    "Section %r dropped: card height %.1f exceeds remaining %.1f",
                    section.heading,
                    needed,
                    remaining,
                )
                dropped.append(section)
                continue
            placed.append((section, card))
            remaining -= needed

        return placed, dropped

    # =========================================================================
    # Page Frame
    # =========================================================================

    def _draw_page_frame(self, canvas_obj: canvas.Canvas, document: BiodataDocument):
        """Paper background and footer: timestamp left, identifier right."""
        canvas_obj.saveState()

        canvas_obj.setFillColor(Palette.PAPER)
        canvas_obj.rect(0, 0, self.PAGE_WIDTH, self.PAGE_HEIGHT, stroke=0, fill=1)

        canvas_obj.setFont(FONT_REGULAR, 8)
        canvas_obj.setFillColor(Palette.FAINT)
        canvas_obj.drawString(self.MARGIN_LEFT, self.FOOTER_BASELINE, document.generated_label)
        canvas_obj.drawRightString(
            self.PAGE_WIDTH - self.MARGIN_RIGHT,
            self.FOOTER_BASELINE,
            document.document_id,
        )

        canvas_obj.restoreState()

    # =========================================================================
    # Header
    # =========================================================================

    def _build_header(self, document: BiodataDocument) -> List[Flowable]:
        """Hero box: name, subtitle and meta line on the left, status badge right."""
        left = [
            Paragraph(escape(document.title), self.styles['BiodataTitle']),
            Paragraph(escape(document.subtitle), self.styles['BiodataSubtitle']),
        ]
        if document.meta_line:
            left.append(Paragraph(escape(document.meta_line), self.styles['BiodataMeta']))

        badge = ""
        if document.status_badge:
            badge_style = ParagraphStyle(
                name='BiodataBadgeStatus',
                parent=self.styles['BiodataBadge'],
                textColor=status_color(document.status_badge),
            )
            badge = Paragraph(escape(f"Status: {document.status_badge}"), badge_style)

        hero = Table(
            [[left, badge]],
            colWidths=[self.frame_width - self.BADGE_COLUMN, self.BADGE_COLUMN],
        )
        hero.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), Palette.HEADER_BAND),
            ('LINEABOVE', (0, 0), (-1, 0), 4, Palette.PRIMARY),
            ('BOX', (0, 0), (-1, -1), 0.75, Palette.BORDER),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('TOPPADDING', (0, 0), (-1, -1), 14),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 14),
            ('LEFTPADDING', (0, 0), (-1, -1), 16),
            ('RIGHTPADDING', (0, 0), (-1, -1), 16),
        ]))
        return [hero]

    # =========================================================================
    # Section Cards
    # =========================================================================

    def _build_card(self, section: Section) -> Table:
        """A bordered card: heading cell, then one cell per row."""
        inner_width = self.frame_width - 2 * self.CARD_PADDING
        cells = [[[
            Paragraph(escape(section.heading), self.styles['CardTitle']),
            Paragraph(escape(section.description), self.styles['CardDescription']),
        ]]]
        for index, row in enumerate(section.rows):
            last = index == len(section.rows) - 1
            if row.wrapped:
                cells.append([self._build_text_block(row, inner_width)])
            else:
                cells.append([self._build_info_row(row, inner_width, last)])

        card = Table(cells, colWidths=[self.frame_width])
        card.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), Palette.WHITE),
            ('BOX', (0, 0), (-1, -1), 0.75, Palette.BORDER),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('LEFTPADDING', (0, 0), (-1, -1), self.CARD_PADDING),
            ('RIGHTPADDING', (0, 0), (-1, -1), self.CARD_PADDING),
            ('TOPPADDING', (0, 0), (-1, -1), 0),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 0),
            ('TOPPADDING', (0, 0), (-1, 0), self.CARD_PADDING),
            ('BOTTOMPADDING', (0, -1), (-1, -1), self.CARD_PADDING),
        ]))
        return card

    def _build_info_row(self, row: Row, width: float, last: bool) -> Table:
        """Label left, value right-aligned on the same baseline."""
        label_width = width * self.LABEL_SHARE
        info = Table(
            [[
                Paragraph(escape(row.label), self.styles['RowLabel']),
                Paragraph(escape(row.value), self.styles['RowValue']),
            ]],
            colWidths=[label_width, width - label_width],
        )
        commands = [
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('LEFTPADDING', (0, 0), (-1, -1), 0),
            ('RIGHTPADDING', (0, 0), (-1, -1), 0),
            ('TOPPADDING', (0, 0), (-1, -1), 5),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
        ]
        if not last:
            commands.append(('LINEBELOW', (0, 0), (-1, -1), 0.5, Palette.BORDER))
        info.setStyle(TableStyle(commands))
        return info

    def _build_text_block(self, row: Row, width: float) -> Table:
        """Free text in its own bordered sub-block, wrapped by platypus."""
        block = Table(
            [
                [Paragraph(escape(row.label), self.styles['BlockLabel'])],
                [Paragraph(escape(row.value), self.styles['BlockText'])],
            ],
            colWidths=[width],
        )
        block.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, -1), Palette.BLOCK),
            ('BOX', (0, 0), (-1, -1), 0.5, Palette.BORDER),
            ('LEFTPADDING', (0, 0), (-1, -1), 8),
            ('RIGHTPADDING', (0, 0), (-1, -1), 8),
            ('TOPPADDING', (0, 0), (-1, 0), 6),
            ('TOPPADDING', (0, 1), (-1, 1), 0),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 0),
            ('BOTTOMPADDING', (0, 1), (-1, 1), 6),
        ]))
        return Table(
            [[block]],
            colWidths=[width],
            style=TableStyle([
                ('LEFTPADDING', (0, 0), (-1, -1), 0),
                ('RIGHTPADDING', (0, 0), (-1, -1), 0),
                ('TOPPADDING', (0, 0), (-1, -1), 6),
                ('BOTTOMPADDING', (0, 0), (-1, -1), 2),
            ]),
        )
