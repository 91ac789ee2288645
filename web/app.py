"""
FastAPI application for the biodata PDF service.

Endpoints:
    GET  /health                  Liveness probe, no IO
    POST /api/biodata/pdf         Render a biodata record to a downloadable PDF
    POST /api/biodata/sections    Preview the sections a variant would render

Deployment configuration comes from environment variables via utils.config.
"""

import logging
from typing import Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from biodata import (
    BiodataRecord,
    InvalidRecordError,
    Variant,
    biodata_filename,
    build_document,
)
from reporting.service import (
    DOWNLOAD_FAILED_MESSAGE,
    FALLBACK_ORDER,
    DocumentGenerationError,
    download_biodata,
    render_biodata,
)
from utils.config import Config


logger = logging.getLogger(__name__)

AUTO_RENDERER = "auto"
DOWNLOAD_FAILED_TITLE = "Download failed"


# =============================================================================
# API Request Models
# =============================================================================

class BiodataPayload(BaseModel):
    """
    Finalized biodata record as sent by the client.

    Keys may be snake_case or camelCase. Required fields are checked by the
    record itself so that a missing name or gender is reported the same way
    for every caller.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    full_name: Optional[str] = None
    gender: Optional[str] = None

    id: Optional[int] = None
    token: Optional[str] = None
    status: Optional[str] = None
    date_of_birth: Optional[str] = None
    marital_status: Optional[str] = None
    nationality: Optional[str] = None

    height: Optional[str] = None
    weight: Optional[str] = None
    complexion: Optional[str] = None
    blood_group: Optional[str] = None

    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None

    education_level: Optional[str] = None
    education_details: Optional[str] = None

    profession: Optional[str] = None
    occupation: Optional[str] = None
    annual_income: Optional[str] = None
    work_location: Optional[str] = None

    father_name: Optional[str] = None
    father_occupation: Optional[str] = None
    mother_name: Optional[str] = None
    mother_occupation: Optional[str] = None
    siblings_count: Optional[int] = None
    siblings_details: Optional[str] = None

    religion: Optional[str] = None
    sect: Optional[str] = None
    religious_practice: Optional[str] = None
    prayer_frequency: Optional[str] = None
    fasting: Optional[str] = None
    quran_reading: Optional[str] = None

    preferred_age_min: Optional[int] = None
    preferred_age_max: Optional[int] = None
    preferred_education: Optional[str] = None
    preferred_profession: Optional[str] = None
    preferred_location: Optional[str] = None
    willing_to_relocate: Optional[bool] = None
    other_preferences: Optional[str] = None
    expectations: Optional[str] = None

    about_me: Optional[str] = None
    hobbies: Optional[str] = None
    languages: Optional[str] = None

    @field_validator(
        "id",
        "siblings_count",
        "preferred_age_min",
        "preferred_age_max",
        "willing_to_relocate",
        mode="before",
    )
    @classmethod
    def blank_as_absent(cls, value):
        """Unfilled form fields arrive as empty strings."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_record(self) -> BiodataRecord:
        return BiodataRecord.from_dict(self.model_dump())


# =============================================================================
# Helpers
# =============================================================================

def content_disposition(filename: str, variant: Variant) -> str:
    """
    Attachment header carrying the download filename.

    Non-ASCII names go in the RFC 5987 ``filename*`` parameter, with a plain
    ASCII fallback for clients that ignore it.
    """
    if filename.isascii():
        fallback = filename.replace('"', "")
    else:
        fallback = biodata_filename(None, variant)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _resolve_variant(value: Optional[str], config: Config) -> Variant:
    try:
        return Variant.from_string(value or config.default_variant)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _resolve_renderer(value: str) -> str:
    name = value.lower().strip()
    if name != AUTO_RENDERER and name not in FALLBACK_ORDER:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown renderer: {value!r} (expected auto, {', '.join(FALLBACK_ORDER)})",
        )
    return name


def _invalid_record_response(error: InvalidRecordError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": "Invalid biodata record", "errors": error.errors},
    )


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or Config.load()

    app = FastAPI(
        title="SabrSpace Biodata",
        description="Single-page PDF rendering for matrimonial biodata",
        version="0.1.0",
        debug=config.debug,
    )

    @app.get("/health", include_in_schema=False)
    def health():
        """Health endpoint. No dependencies, no IO."""
        return {"status": "healthy"}

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
            expose_headers=["Content-Disposition"],
        )

    @app.post("/api/biodata/pdf")
    def generate_biodata_pdf(
        payload: BiodataPayload,
        variant: Optional[str] = Query(None),
        renderer: str = Query(AUTO_RENDERER),
    ):
        """
        Render a biodata record as a single-page A4 PDF.

        With renderer=auto the declarative back-end is tried first and the
        imperative one is used if it fails. A named renderer is used alone.

        Returns:
            - 200 application/pdf with an attachment Content-Disposition
            - 400 for an unknown variant or renderer
            - 422 when full name or gender is missing
            - 500 with a generic message when rendering failed
        """
        selected_variant = _resolve_variant(variant, config)
        selected_renderer = _resolve_renderer(renderer)
        record = payload.to_record()

        try:
            if selected_renderer == AUTO_RENDERER:
                rendered = download_biodata(record, selected_variant)
            else:
                rendered = render_biodata(record, selected_variant, renderer=selected_renderer)
        except InvalidRecordError as e:
            return _invalid_record_response(e)
        except DocumentGenerationError:
            return JSONResponse(
                status_code=500,
                content={"title": DOWNLOAD_FAILED_TITLE, "detail": DOWNLOAD_FAILED_MESSAGE},
            )
        except Exception:
            logger.exception(
                "Renderer %s failed for biodata %s", selected_renderer, record.id
            )
            return JSONResponse(
                status_code=500,
                content={"title": DOWNLOAD_FAILED_TITLE, "detail": DOWNLOAD_FAILED_MESSAGE},
            )

        logger.info(
            "Generated %s (%d bytes) with %s",
            rendered.filename,
            len(rendered.content),
            rendered.renderer,
        )
        return Response(
            content=rendered.content,
            media_type=rendered.media_type,
            headers={
                "Content-Disposition": content_disposition(rendered.filename, selected_variant),
                "X-Biodata-Renderer": rendered.renderer,
            },
        )

    @app.post("/api/biodata/sections")
    def preview_biodata_sections(
        payload: BiodataPayload,
        variant: Optional[str] = Query(None),
    ):
        """
        Return the sections and rows a variant would render, without drawing.

        The page clamp is not applied here; see the PDF endpoint for what
        actually fits on the page.
        """
        selected_variant = _resolve_variant(variant, config)

        try:
            document = build_document(payload.to_record(), selected_variant)
        except InvalidRecordError as e:
            return _invalid_record_response(e)

        return {
            "title": document.title,
            "subtitle": document.subtitle,
            "variant": document.variant.value,
            "filename": document.filename,
            "sections": [section.to_dict() for section in document.sections],
        }

    return app


# Create app instance for uvicorn
app = create_app()
