"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request and response model. Segments
travel in the wire shape {start, end, text, speaker} and are converted to
TranscriptSegment at the edge of the API.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Response models never expose internal implementation details
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from transcript_segmenter.core.ir import TranscriptSegment


class SegmentModel(BaseModel):
    """One transcript segment on the wire."""

    start: float = Field(default=0.0, ge=0, description="Start time in seconds (inclusive).")
    end: float = Field(default=0.0, ge=0, description="End time in seconds (exclusive).")
    text: str = Field(description="Segment text.")
    speaker: Optional[str] = Field(
        default=None,
        description="Speaker name, or null when unattributed.",
    )

    def to_segment(self) -> TranscriptSegment:
        return TranscriptSegment(
            start=self.start, end=self.end, text=self.text, speaker=self.speaker,
        )

    @classmethod
    def from_segment(cls, segment: TranscriptSegment) -> "SegmentModel":
        return cls(**segment.to_dict())


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class SegmentRequest(BaseModel):
    """Raw transcript text plus pipeline options."""

    text: str = Field(description="Raw transcript text, optionally with 'Name: text' labels.")
    mode: str = Field(default="auto", description="Parser: 'auto', 'labels' or 'heuristic'.")
    strategy: Optional[str] = Field(
        default=None,
        description="Alternation strategy for unlabelled text. Defaults to the server setting.",
    )
    merge: bool = Field(default=False, description="Merge consecutive same-speaker segments.")
    remove_fillers: bool = Field(default=False, description="Remove filler words from text.")
    duration: Optional[float] = Field(
        default=None,
        description="Audio duration in seconds. When set, timestamps are estimated.",
    )
    renames: Dict[str, str] = Field(
        default_factory=dict,
        description="Speaker renames applied after parsing, as {old: new}.",
    )


class ExportRequest(BaseModel):
    """Segments to serialize with one formatter."""

    segments: List[SegmentModel] = Field(description="Segments in narrative order.")


class LookupRequest(BaseModel):
    """Segments plus a playback position."""

    segments: List[SegmentModel] = Field(description="Timed segments in narrative order.")
    time: float = Field(description="Playback position in seconds.")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SpeakerInfo(BaseModel):
    name: str = Field(description="Speaker name.")
    color: str = Field(description="CSS color token for the speaker.")


class SegmentResponse(BaseModel):
    segments: List[SegmentModel] = Field(description="Parsed segments.")
    speakers: List[SpeakerInfo] = Field(description="Unique speakers in order of appearance.")


class LookupResponse(BaseModel):
    index: int = Field(description="Index of the segment at the given time, or -1.")


class FormatInfo(BaseModel):
    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
