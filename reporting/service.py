"""
Biodata download service.

Entry points used by the web layer and the CLI:
- render_biodata: one named back-end, failures propagate unmodified
- download_biodata: the download fallback chain

Fallback chain (download_biodata):
1. Declarative renderer (flowable tree)
2. Imperative renderer (canvas), if the first one raised
3. DocumentGenerationError with a generic message, if both raised

An invalid record is rejected before any renderer runs and is never
retried: both back-ends would fail the same way.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Final, Optional, Sequence

from biodata.document import build_document
from biodata.models import BiodataRecord, Variant

from .base import BiodataRenderer, RenderedBiodata
from .canvas_renderer import CanvasBiodataRenderer
from .flowable_renderer import FlowableBiodataRenderer


logger = logging.getLogger(__name__)


DOWNLOAD_FAILED_MESSAGE: Final[str] = "Could not generate the PDF right now."

RENDERERS: Final[dict[str, type[BiodataRenderer]]] = {
    FlowableBiodataRenderer.name: FlowableBiodataRenderer,
    CanvasBiodataRenderer.name: CanvasBiodataRenderer,
}

FALLBACK_ORDER: Final[tuple[str, ...]] = (
    FlowableBiodataRenderer.name,
    CanvasBiodataRenderer.name,
)


class DocumentGenerationError(RuntimeError):
    """Raised when no renderer in the fallback chain produced a document."""


def get_renderer(name: str) -> BiodataRenderer:
    """Instantiate a renderer by name ('declarative' or 'imperative')."""
    try:
        return RENDERERS[name.lower().strip()]()
    except KeyError:
        raise ValueError(
            f"Unknown renderer: {name!r} (expected one of {', '.join(RENDERERS)})"
        ) from None


def render_biodata(
    record: BiodataRecord,
    variant: Variant = Variant.COMPREHENSIVE,
    renderer: str = CanvasBiodataRenderer.name,
    today: Optional[date] = None,
    generated_at: Optional[datetime] = None,
) -> RenderedBiodata:
    """
    Render a biodata PDF with a single back-end.

    Raises:
        InvalidRecordError: If full name or gender is missing
        ValueError: If the renderer name is unknown
        Exception: Any back-end failure, unmodified
    """
    backend = get_renderer(renderer)
    document = build_document(record, variant, today=today, generated_at=generated_at)
    return backend.render(document)


def download_biodata(
    record: BiodataRecord,
    variant: Variant = Variant.COMPREHENSIVE,
    today: Optional[date] = None,
    generated_at: Optional[datetime] = None,
    renderers: Optional[Sequence[BiodataRenderer]] = None,
) -> RenderedBiodata:
    """
    Render a biodata PDF, falling back to the next back-end on failure.

    Args:
        record: Finalized biodata record
        variant: Detail level
        today: Reference date for age derivation
        generated_at: Footer timestamp
        renderers: Back-ends to try in order (default: declarative, imperative)

    Returns:
        RenderedBiodata from the first back-end that succeeded

    Raises:
        InvalidRecordError: If full name or gender is missing
        DocumentGenerationError: If every back-end failed
    """
    document = build_document(record, variant, today=today, generated_at=generated_at)
    chain = list(renderers) if renderers is not None else [get_renderer(n) for n in FALLBACK_ORDER]

    last_error: Optional[Exception] = None
    for backend in chain:
        try:
            rendered = backend.render(document)
        except Exception as exc:
            logger.warning(
                "Renderer %s failed for %s: %s",
                backend.name,
                document.filename,
                exc,
                exc_info=True,
            )
            last_error = exc
            continue

        if rendered.dropped_sections:
            logger.info(
                "Rendered %s with %s; sections dropped by page clamp: %s",
                document.filename,
                backend.name,
                ", ".join(rendered.dropped_sections),
            )
        return rendered

    logger.error("All renderers failed for %s", document.filename)
    raise DocumentGenerationError(DOWNLOAD_FAILED_MESSAGE) from last_error


def write_biodata(rendered: RenderedBiodata, output_dir: Path) -> Path:
    """Write a rendered PDF under output_dir using its download filename."""
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / Path(rendered.filename).name
    output_path.write_bytes(rendered.content)
    return output_path
