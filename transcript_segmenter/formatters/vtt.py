"""WebVTT subtitle formatter with voice spans for speakers.

WHY: Browsers only play WebVTT through <track>, and VTT's <v> voice span
lets players style or announce the speaker instead of baking the name
into the caption text.

HOW: A "WEBVTT" header and a blank line, then one cue per segment:
"HH:MM:SS.mmm --> HH:MM:SS.mmm" followed by "<v Speaker>text" for
attributed segments or the bare text otherwise. Cues are separated by
one blank line.

RULES:
- Never reorders segments by time
- "&", "<" and ">" in text and speaker names are escaped as entities
- Blank lines inside segment text are collapsed (they would end the cue)
- Unattributed segments with empty text are skipped, as in SRT
- Empty input → "WEBVTT\\n"
- Media type: "text/vtt"
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from transcript_segmenter.core.ir import TranscriptSegment, has_timestamps
from transcript_segmenter.core.timecode import format_vtt_timestamp
from transcript_segmenter.formatters.base import BaseFormatter, FormatterOutput
from transcript_segmenter.formatters.srt import cue_text

logger = logging.getLogger(__name__)

VTT_HEADER = "WEBVTT"


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def segments_to_vtt(segments: Sequence[TranscriptSegment]) -> str:
    """Render segments as a WebVTT document."""
    if segments and not has_timestamps(segments):
        logger.warning("Exporting %d untimed segment(s) to WebVTT", len(segments))

    lines: List[str] = [VTT_HEADER, ""]
    for segment in segments:
        text = _escape(cue_text(segment.text))
        if segment.speaker is not None:
            text = "<v {}>{}".format(_escape(segment.speaker), text)
        elif not text:
            continue
        lines.append("{} --> {}".format(
            format_vtt_timestamp(segment.start),
            format_vtt_timestamp(segment.end),
        ))
        lines.append(text)
        lines.append("")
    return "\n".join(lines)


class VTTFormatter(BaseFormatter):
    """Formatter that produces a single WebVTT subtitle file."""

    @property
    def name(self) -> str:
        return "WebVTT"

    def format(self, segments: Sequence[TranscriptSegment]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".vtt",
                content=segments_to_vtt(segments),
                media_type="text/vtt",
            )
        ]
