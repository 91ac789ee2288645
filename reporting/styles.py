"""
Palette and paragraph styles shared by both biodata renderers.
"""

from __future__ import annotations

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet


# =============================================================================
# Color Palette - Soft, print-friendly
# =============================================================================

class Palette:
    """
    Biodata colour palette.
    Light paper background, near-black ink, green accent.
    """
    # Text
    INK = colors.Color(0.11, 0.11, 0.12)
    MUTED = colors.Color(0.45, 0.45, 0.5)
    FAINT = colors.Color(0.58, 0.64, 0.72)
    WHITE = colors.white

    # Surfaces
    PAPER = colors.Color(0.99, 0.99, 0.995)
    HEADER_BAND = colors.Color(0.95, 0.99, 0.98)
    CARD = colors.Color(0.97, 0.98, 0.99)
    BLOCK = colors.Color(0.98, 0.98, 0.98)
    BORDER = colors.Color(0.87, 0.9, 0.92)

    # Accent
    PRIMARY = colors.Color(0.05, 0.45, 0.35)

    # Status badge text
    STATUS_DRAFT = colors.Color(0.45, 0.45, 0.5)
    STATUS_PENDING = colors.Color(0.31, 0.27, 0.9)
    STATUS_PUBLISHED = colors.Color(0.02, 0.47, 0.34)
    STATUS_REJECTED = colors.Color(0.73, 0.11, 0.11)


STATUS_COLORS = {
    "Draft": Palette.STATUS_DRAFT,
    "Pending Review": Palette.STATUS_PENDING,
    "Published": Palette.STATUS_PUBLISHED,
    "Rejected": Palette.STATUS_REJECTED,
}


def status_color(badge: str) -> colors.Color:
    """Badge colour for a prettified status; unknown statuses use the accent."""
    return STATUS_COLORS.get(badge, Palette.PRIMARY)


# =============================================================================
# Fonts
# =============================================================================

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


# =============================================================================
# Style Configuration
# =============================================================================

def get_biodata_styles() -> dict:
    """
    Create paragraph styles for the biodata page.
    Returns a StyleSheet with custom styles for each document element.
    """
    styles = getSampleStyleSheet()

    # Header band
    styles.add(ParagraphStyle(
        name='BiodataTitle',
        parent=styles['Normal'],
        fontSize=20,
        leading=24,
        textColor=Palette.INK,
        alignment=TA_LEFT,
        fontName=FONT_BOLD,
    ))

    styles.add(ParagraphStyle(
        name='BiodataSubtitle',
        parent=styles['Normal'],
        fontSize=10,
        leading=13,
        textColor=Palette.MUTED,
        alignment=TA_LEFT,
        fontName=FONT_REGULAR,
    ))

    styles.add(ParagraphStyle(
        name='BiodataMeta',
        parent=styles['Normal'],
        fontSize=9,
        leading=12,
        textColor=Palette.MUTED,
        fontName=FONT_REGULAR,
    ))

    styles.add(ParagraphStyle(
        name='BiodataBadge',
        parent=styles['Normal'],
        fontSize=9,
        leading=11,
        textColor=Palette.PRIMARY,
        alignment=TA_RIGHT,
        fontName=FONT_BOLD,
    ))

    # Section cards
    styles.add(ParagraphStyle(
        name='CardTitle',
        parent=styles['Normal'],
        fontSize=12,
        leading=15,
        textColor=Palette.PRIMARY,
        fontName=FONT_BOLD,
    ))

    styles.add(ParagraphStyle(
        name='CardDescription',
        parent=styles['Normal'],
        fontSize=8.5,
        leading=11,
        textColor=Palette.MUTED,
        fontName=FONT_REGULAR,
        spaceAfter=4,
    ))

    # Info rows - label left, value right
    styles.add(ParagraphStyle(
        name='RowLabel',
        parent=styles['Normal'],
        fontSize=9,
        leading=12,
        textColor=Palette.MUTED,
        fontName=FONT_REGULAR,
    ))

    styles.add(ParagraphStyle(
        name='RowValue',
        parent=styles['Normal'],
        fontSize=9.5,
        leading=12,
        textColor=Palette.INK,
        alignment=TA_RIGHT,
        fontName=FONT_REGULAR,
    ))

    # Free-text blocks
    styles.add(ParagraphStyle(
        name='BlockLabel',
        parent=styles['Normal'],
        fontSize=9,
        leading=12,
        textColor=Palette.MUTED,
        fontName=FONT_BOLD,
        spaceAfter=2,
    ))

    styles.add(ParagraphStyle(
        name='BlockText',
        parent=styles['Normal'],
        fontSize=9.5,
        leading=13.3,  # 9.5 * 1.4
        textColor=Palette.INK,
        fontName=FONT_REGULAR,
    ))

    return styles
