"""FastAPI application exposing segmentation and export over HTTP.

WHY: Web players and other services (the recording app's backend, n8n,
curl) need the segmenter without importing Python code. FastAPI provides
request validation and automatic OpenAPI documentation.

HOW: Stateless endpoints that call straight into the core pipeline:
parse text into segments, export segments with a registered formatter,
look up the segment at a playback time, and resolve speaker colors.

RULES:
- No state is kept between requests
- Unknown modes, strategies or formats → 400 with an ErrorResponse body
- Export responses carry the formatter's media type
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from transcript_segmenter import __version__
from transcript_segmenter.cli import build_segments
from transcript_segmenter.config import API_HOST, API_PORT, LOG_LEVEL
from transcript_segmenter.core import find_segment_at_time, get_speaker_color, get_unique_speakers
from transcript_segmenter.formatters import FORMATTERS
from transcript_segmenter.server.models import (
    ErrorResponse,
    ExportRequest,
    FormatInfo,
    HealthResponse,
    LookupRequest,
    LookupResponse,
    SegmentModel,
    SegmentRequest,
    SegmentResponse,
    SpeakerInfo,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Transcript Segmenter API",
    description=(
        "Split raw transcript text into speaker segments, estimate timestamps, "
        "and export plain text, SRT, WebVTT or JSON."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Segments
# ---------------------------------------------------------------------------


@app.post(
    "/segments",
    response_model=SegmentResponse,
    tags=["segments"],
    summary="Parse transcript text into speaker segments",
    responses={400: {"model": ErrorResponse, "description": "Invalid mode or strategy"}},
)
async def create_segments(request: SegmentRequest) -> SegmentResponse:
    try:
        segments = build_segments(
            request.text,
            mode=request.mode,
            strategy=request.strategy,
            renames=list(request.renames.items()),
            remove_fillers=request.remove_fillers,
            merge=request.merge,
            duration=request.duration,
        )
    except ValueError as exc:
        logger.warning("Rejected segmentation request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    logger.info("Segmented %d characters into %d segment(s)", len(request.text), len(segments))
    return SegmentResponse(
        segments=[SegmentModel.from_segment(s) for s in segments],
        speakers=[
            SpeakerInfo(name=name, color=get_speaker_color(name))
            for name in get_unique_speakers(segments)
        ],
    )


@app.post(
    "/segments/lookup",
    response_model=LookupResponse,
    tags=["segments"],
    summary="Find the segment playing at a given time",
)
async def lookup_segment(request: LookupRequest) -> LookupResponse:
    segments = [model.to_segment() for model in request.segments]
    return LookupResponse(index=find_segment_at_time(segments, request.time))


@app.get(
    "/speakers/color",
    response_model=SpeakerInfo,
    tags=["segments"],
    summary="Resolve the display color for a speaker name",
)
async def speaker_color(
    name: str = Query(description="Speaker name."),
) -> SpeakerInfo:
    return SpeakerInfo(name=name, color=get_speaker_color(name))


# ---------------------------------------------------------------------------
# Endpoints: Exports and formats
# ---------------------------------------------------------------------------


@app.post(
    "/exports/{format_key}",
    tags=["exports"],
    summary="Serialize segments with a registered formatter",
    responses={400: {"model": ErrorResponse, "description": "Unknown format"}},
)
async def export_segments(format_key: str, request: ExportRequest) -> Response:
    if format_key not in FORMATTERS:
        logger.warning("Rejected export request for unknown format %r", format_key)
        raise HTTPException(
            status_code=400,
            detail="Unknown output format '{}'. Available: {}".format(
                format_key, ", ".join(sorted(FORMATTERS.keys()))
            ),
        )
    segments = [model.to_segment() for model in request.segments]
    output = FORMATTERS[format_key]().format(segments)[0]
    return Response(content=output.content, media_type=output.media_type)


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["exports"],
    summary="List available output formats",
)
async def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(key=key, name=formatter_cls().name)
        for key, formatter_cls in FORMATTERS.items()
    ]


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the transcript-segmenter-api console script."""
    import uvicorn

    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    uvicorn.run(app, host=API_HOST, port=API_PORT)
