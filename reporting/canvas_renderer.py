"""
Imperative biodata renderer.

Draws directly onto a ReportLab canvas with explicit coordinates. There is
no layout engine behind it, so every measurement comes from text_layout and
every placement decision from the page composer.

Page structure (single A4 page, origin bottom-left):
1. Header band - name, variant subtitle, meta line, status badge
2. Section cards - top-down from the cursor, clamp policy applied
3. Footer - generation timestamp left, document identifier right
"""

from __future__ import annotations

from io import BytesIO

from reportlab.pdfgen import canvas

from biodata.document import BiodataDocument

from .base import BiodataRenderer, RenderedBiodata
from .composer import Placement, compose_page
from .styles import FONT_BOLD, FONT_REGULAR, Palette, status_color
from .text_layout import DEFAULT_METRICS, LayoutMetrics


class CanvasBiodataRenderer(BiodataRenderer):
    """
    Renders a biodata page with low-level canvas draw calls.

    Usage:
        renderer = CanvasBiodataRenderer()
        rendered = renderer.render(build_document(record, Variant.MINIMAL))

    Output is invariant: the same document always yields the same bytes.
    """

    name = "imperative"

    TITLE_SIZE = 20
    SUBTITLE_SIZE = 10
    META_SIZE = 9
    HEADING_SIZE = 12
    TEXT_SIZE = 10
    FOOTER_SIZE = 9

    ACCENT_STRIP = 6
    BADGE_WIDTH = 150
    BADGE_HEIGHT = 22
    BLOCK_INSET = 6

    def __init__(self, metrics: LayoutMetrics = DEFAULT_METRICS):
        self.metrics = metrics

    def render(self, document: BiodataDocument) -> RenderedBiodata:
        layout = compose_page(list(document.sections), self.metrics)

        buffer = BytesIO()
        canvas_obj = canvas.Canvas(
            buffer,
            pagesize=(self.metrics.page_width, self.metrics.page_height),
            invariant=1,
        )
        canvas_obj.setTitle(f"Biodata - {document.title}")
        canvas_obj.setAuthor("SabrSpace")
        canvas_obj.setSubject(document.subtitle)

        self._draw_background(canvas_obj)
        self._draw_header(canvas_obj, document)
        for placement in layout.placements:
            self._draw_section(canvas_obj, placement)
        self._draw_footer(canvas_obj, document)

        canvas_obj.showPage()
        canvas_obj.save()

        return RenderedBiodata(
            content=buffer.getvalue(),
            renderer=self.name,
            filename=document.filename,
            placed_sections=layout.placed_headings,
            dropped_sections=layout.dropped_headings,
        )

    # =========================================================================
    # Page Bands
    # =========================================================================

    def _draw_background(self, canvas_obj: canvas.Canvas):
        m = self.metrics
        canvas_obj.setFillColor(Palette.PAPER)
        canvas_obj.rect(0, 0, m.page_width, m.page_height, stroke=0, fill=1)

    def _draw_header(self, canvas_obj: canvas.Canvas, document: BiodataDocument):
        """Fixed header band: title, subtitle, meta line and status badge."""
        m = self.metrics
        top = m.page_height

        canvas_obj.saveState()

        canvas_obj.setFillColor(Palette.HEADER_BAND)
        canvas_obj.rect(0, top - m.header_height, m.page_width, m.header_height, stroke=0, fill=1)
        canvas_obj.setFillColor(Palette.PRIMARY)
        canvas_obj.rect(0, top - self.ACCENT_STRIP, m.page_width, self.ACCENT_STRIP, stroke=0, fill=1)

        canvas_obj.setFillColor(Palette.INK)
        canvas_obj.setFont(FONT_BOLD, self.TITLE_SIZE)
        canvas_obj.drawString(m.margin_x, top - 44, document.title)

        canvas_obj.setFillColor(Palette.MUTED)
        canvas_obj.setFont(FONT_REGULAR, self.SUBTITLE_SIZE)
        canvas_obj.drawString(m.margin_x, top - 62, document.subtitle)

        if document.meta_line:
            canvas_obj.setFont(FONT_REGULAR, self.META_SIZE)
            canvas_obj.drawString(m.margin_x, top - 77, document.meta_line)

        if document.status_badge:
            badge_x = m.page_width - m.margin_x - self.BADGE_WIDTH
            badge_y = top - 60
            canvas_obj.setFillColor(Palette.WHITE)
            canvas_obj.setStrokeColor(Palette.BORDER)
            canvas_obj.setLineWidth(1)
            canvas_obj.roundRect(badge_x, badge_y, self.BADGE_WIDTH, self.BADGE_HEIGHT, 6, stroke=1, fill=1)
            canvas_obj.setFillColor(status_color(document.status_badge))
            canvas_obj.setFont(FONT_BOLD, self.FOOTER_SIZE)
            canvas_obj.drawString(badge_x + 10, badge_y + 7, f"Status: {document.status_badge}")

        canvas_obj.restoreState()

    def _draw_footer(self, canvas_obj: canvas.Canvas, document: BiodataDocument):
        """Fixed footer: generation timestamp left, document identifier right."""
        m = self.metrics
        canvas_obj.saveState()
        canvas_obj.setFont(FONT_REGULAR, self.FOOTER_SIZE)
        canvas_obj.setFillColor(Palette.MUTED)
        canvas_obj.drawString(m.margin_x, m.footer_baseline, document.generated_label)
        canvas_obj.drawRightString(m.page_width - m.margin_x, m.footer_baseline, document.document_id)
        canvas_obj.restoreState()

    # =========================================================================
    # Section Cards
    # =========================================================================

    def _draw_section(self, canvas_obj: canvas.Canvas, placement: Placement):
        """Draw one placed card. Geometry comes from the composer."""
        m = self.metrics
        pad = m.card_padding
        right_edge = m.margin_x + m.content_width - pad
        label_x = m.margin_x + pad
        value_x = label_x + m.label_column_width

        canvas_obj.saveState()

        canvas_obj.setFillColor(Palette.CARD)
        canvas_obj.setStrokeColor(Palette.BORDER)
        canvas_obj.setLineWidth(1)
        canvas_obj.rect(m.margin_x, placement.bottom, m.content_width, placement.height, stroke=1, fill=1)

        canvas_obj.setFillColor(Palette.PRIMARY)
        canvas_obj.setFont(FONT_BOLD, self.HEADING_SIZE)
        canvas_obj.drawString(label_x, placement.top - pad - 4, placement.section.heading)

        y = placement.top - pad - m.heading_height - 4
        for row, lines in zip(placement.section.rows, placement.lines):
            units = max(1, len(lines))

            if row.wrapped:
                block_top = y + m.line_height - 4
                canvas_obj.setFillColor(Palette.BLOCK)
                canvas_obj.setStrokeColor(Palette.BORDER)
                canvas_obj.rect(
                    value_x - self.BLOCK_INSET,
                    block_top - units * m.line_height,
                    right_edge - value_x + self.BLOCK_INSET,
                    units * m.line_height,
                    stroke=1,
                    fill=1,
                )

            canvas_obj.setFillColor(Palette.INK)
            canvas_obj.setFont(FONT_BOLD, self.TEXT_SIZE)
            canvas_obj.drawString(label_x, y, row.label)

            canvas_obj.setFont(FONT_REGULAR, self.TEXT_SIZE)
            line_y = y
            for line in lines:
                if row.wrapped:
                    canvas_obj.drawString(value_x, line_y, line)
                else:
                    canvas_obj.drawRightString(right_edge, line_y, line)
                line_y -= m.line_height

            y -= units * m.line_height

        canvas_obj.restoreState()
