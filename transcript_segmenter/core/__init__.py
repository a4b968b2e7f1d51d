"""Core segmentation, transformation and timing functions.

WHY: The core package is the algorithmic heart of the segmenter — parsing
raw text into speaker segments, transforming segment sequences, and timing
them. Formatters, the CLI and the HTTP API all build on it.

HOW: ir.py defines TranscriptSegment, labels.py and heuristics.py parse
text, algebra.py, cleaning.py and timeline.py transform segments,
timecode.py and colors.py render values for display. parse_transcript()
below picks the right parser for a given text.

RULES:
- Everything here is pure and synchronous — no I/O, no shared state
- Format-specific output logic belongs in formatters/, not here
"""

from __future__ import annotations

from typing import List, Optional

from transcript_segmenter.core.algebra import (
    get_unique_speakers,
    merge_adjacent_speaker_segments,
    rename_speaker,
    segments_to_text,
)
from transcript_segmenter.core.cleaning import (
    remove_filler_words,
    remove_filler_words_from_segments,
)
from transcript_segmenter.core.colors import get_speaker_color
from transcript_segmenter.core.heuristics import (
    ALTERNATION_STRATEGIES,
    parse_transcript_into_segments,
)
from transcript_segmenter.core.ir import (
    UNATTRIBUTED,
    TranscriptSegment,
    has_timestamps,
)
from transcript_segmenter.core.labels import (
    has_inline_labels,
    parse_inline_speaker_labels,
)
from transcript_segmenter.core.timecode import format_duration, format_timestamp
from transcript_segmenter.core.timeline import (
    estimate_segment_timestamps,
    find_segment_at_time,
)

PARSE_MODES = ("auto", "labels", "heuristic")


def parse_transcript(
    transcript: str,
    mode: str = "auto",
    strategy: Optional[object] = None,
) -> List[TranscriptSegment]:
    """Parse raw transcript text with the parser that fits it.

    Args:
        transcript: Raw transcript text.
        mode: "labels" forces the inline-label parser, "heuristic" the
              paragraph segmenter; "auto" uses labels when any line has
              a speaker marker.
        strategy: Alternation strategy for the heuristic segmenter.

    Raises:
        ValueError: If ``mode`` is not one of PARSE_MODES.
    """
    if mode not in PARSE_MODES:
        raise ValueError(
            "Unknown parse mode '{}'. Available: {}".format(mode, ", ".join(PARSE_MODES))
        )
    if mode == "labels" or (mode == "auto" and has_inline_labels(transcript)):
        return parse_inline_speaker_labels(transcript)
    return parse_transcript_into_segments(transcript, strategy=strategy)


__all__ = [
    "ALTERNATION_STRATEGIES",
    "PARSE_MODES",
    "UNATTRIBUTED",
    "TranscriptSegment",
    "estimate_segment_timestamps",
    "find_segment_at_time",
    "format_duration",
    "format_timestamp",
    "get_speaker_color",
    "get_unique_speakers",
    "has_inline_labels",
    "has_timestamps",
    "merge_adjacent_speaker_segments",
    "parse_inline_speaker_labels",
    "parse_transcript",
    "parse_transcript_into_segments",
    "remove_filler_words",
    "remove_filler_words_from_segments",
    "rename_speaker",
    "segments_to_text",
]
