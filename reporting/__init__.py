"""
Reporting module for the biodata engine.

Renders a planned biodata document onto a single A4 PDF page with one of
two interchangeable back-ends.

Usage:
    from biodata import create_sample_biodata, Variant
    from reporting import download_biodata

    rendered = download_biodata(create_sample_biodata(), Variant.MINIMAL)
    print(rendered.filename, len(rendered.content))

Single back-end:
    from reporting import render_biodata

    rendered = render_biodata(record, Variant.COMPREHENSIVE, renderer="imperative")
"""

from .text_layout import (
    DEFAULT_METRICS,
    LayoutMetrics,
    row_line_count,
    section_height,
    wrap_text,
)
from .composer import PageLayout, Placement, compose_page
from .base import BiodataRenderer, RenderedBiodata
from .canvas_renderer import CanvasBiodataRenderer
from .flowable_renderer import FlowableBiodataRenderer
from .service import (
    DOWNLOAD_FAILED_MESSAGE,
    DocumentGenerationError,
    download_biodata,
    get_renderer,
    render_biodata,
    write_biodata,
)

__all__ = [
    # Text layout
    "DEFAULT_METRICS",
    "LayoutMetrics",
    "row_line_count",
    "section_height",
    "wrap_text",
    # Page composer
    "PageLayout",
    "Placement",
    "compose_page",
    # Renderers
    "BiodataRenderer",
    "RenderedBiodata",
    "CanvasBiodataRenderer",
    "FlowableBiodataRenderer",
    # Service
    "DOWNLOAD_FAILED_MESSAGE",
    "DocumentGenerationError",
    "download_biodata",
    "get_renderer",
    "render_biodata",
    "write_biodata",
]
