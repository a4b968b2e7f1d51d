"""SubRip (SRT) subtitle formatter.

WHY: SRT is the lowest common denominator of subtitle formats — every
video editor and player reads it. Downstream tools are strict about the
grammar, so numbering, timecode punctuation and blank lines must be exact.

HOW: One cue per segment, in the given order: 1-based index line,
"HH:MM:SS,mmm --> HH:MM:SS,mmm", then the text prefixed with
"<speaker>: " when the segment is attributed. Cues are separated by one
blank line.

RULES:
- Never reorders segments by time
- Blank lines inside segment text (from merging) are collapsed to a single
  newline, since a blank line terminates an SRT cue
- Untimed input is a caller bug: it is logged and rendered with zero times
- An unattributed segment with empty text has no cue body and is skipped;
  the remaining cues are numbered consecutively
- Empty input → ""
- Media type: "application/x-subrip"
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

from transcript_segmenter.core.ir import TranscriptSegment, has_timestamps
from transcript_segmenter.core.timecode import format_srt_timestamp
from transcript_segmenter.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)

_BLANK_LINES_RE = re.compile(r"\n\s*\n+")


def cue_text(text: str) -> str:
    """Make segment text safe for a subtitle cue body."""
    return _BLANK_LINES_RE.sub("\n", text.strip())


def segments_to_srt(segments: Sequence[TranscriptSegment]) -> str:
    """Render segments as an SRT document."""
    if segments and not has_timestamps(segments):
        logger.warning("Exporting %d untimed segment(s) to SRT", len(segments))

    lines: List[str] = []
    index = 0
    for segment in segments:
        text = cue_text(segment.text)
        if segment.speaker is not None:
            text = "{}: {}".format(segment.speaker, text)
        elif not text:
            logger.debug("Skipping empty unattributed segment at %.3fs", segment.start)
            continue
        index += 1
        lines.append(str(index))
        lines.append("{} --> {}".format(
            format_srt_timestamp(segment.start),
            format_srt_timestamp(segment.end),
        ))
        lines.append(text)
        lines.append("")
    return "\n".join(lines)


class SRTFormatter(BaseFormatter):
    """Formatter that produces a single SRT subtitle file."""

    @property
    def name(self) -> str:
        return "SubRip (SRT)"

    def format(self, segments: Sequence[TranscriptSegment]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".srt",
                content=segments_to_srt(segments),
                media_type="application/x-subrip",
            )
        ]
