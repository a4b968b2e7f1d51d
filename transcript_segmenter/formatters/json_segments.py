"""JSON segment export for tools that re-import or post-process transcripts.

WHY: Subtitle formats lose the distinction between "no speaker" and a
speaker, and plain text loses timing. The JSON export keeps every field
of every segment plus the speaker legend (name and display color), so a
web player or another pipeline can pick the transcript back up exactly.

HOW: Serializes each segment with TranscriptSegment.to_dict(), lists
unique speakers in first-appearance order with get_speaker_color(), and
validates the payload against segments_schema.json before rendering.

RULES:
- Every payload is validated against segments_schema.json (shipped next
  to this file); a violation raises jsonschema.ValidationError
- speaker is null for unattributed segments
- duration is the last segment's end, or 0 for empty input
- Output suffix: "-segments.json"; media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import jsonschema

from transcript_segmenter.core.algebra import get_unique_speakers
from transcript_segmenter.core.colors import get_speaker_color
from transcript_segmenter.core.ir import TranscriptSegment
from transcript_segmenter.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "segments_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the segments export schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def segments_to_payload(segments: Sequence[TranscriptSegment]) -> Dict[str, Any]:
    return {
        "segments": [segment.to_dict() for segment in segments],
        "speakers": [
            {"name": name, "color": get_speaker_color(name)}
            for name in get_unique_speakers(segments)
        ],
        "duration": segments[-1].end if segments else 0.0,
    }


def segments_to_json(segments: Sequence[TranscriptSegment]) -> str:
    """Render the validated export payload as indented JSON.

    Raises:
        jsonschema.ValidationError: If the payload does not match the schema,
            e.g. a segment with a negative time.
    """
    payload = segments_to_payload(segments)
    jsonschema.validate(instance=payload, schema=_get_schema())
    return json.dumps(payload, ensure_ascii=False, indent=2)


class JSONSegmentsFormatter(BaseFormatter):
    """Formatter that produces the segment list and speaker legend as JSON."""

    @property
    def name(self) -> str:
        return "Segments JSON"

    def format(self, segments: Sequence[TranscriptSegment]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-segments.json",
                content=segments_to_json(segments),
                media_type="application/json",
            )
        ]
