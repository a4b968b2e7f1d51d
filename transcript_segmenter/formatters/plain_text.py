"""Plain text transcript formatter with speaker-labeled paragraphs.

WHY: Editors need a simple, readable transcript for review, archival,
and pasting into documents — no timecodes, just text grouped by speaker.

HOW: Delegates to segments_to_text(), which joins segments with a blank
line and prefixes "<speaker>: " on attributed segments. Optionally each
timed paragraph is prefixed with its "[M:SS]" start position.

RULES:
- One paragraph per segment, double newline between paragraphs
- Unattributed segments are written without a label
- Non-empty output ends with a single newline
- Output suffix: "-transcript.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Sequence

from transcript_segmenter.core.algebra import MERGE_SEPARATOR, segments_to_text
from transcript_segmenter.core.ir import TranscriptSegment
from transcript_segmenter.core.timecode import format_timestamp
from transcript_segmenter.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces speaker-labeled plain text paragraphs."""

    def __init__(self, include_labels: bool = True, include_timestamps: bool = False) -> None:
        self.include_labels = include_labels
        self.include_timestamps = include_timestamps

    @property
    def name(self) -> str:
        return "Plain Text"

    def _render(self, segments: Sequence[TranscriptSegment]) -> str:
        if not self.include_timestamps:
            return segments_to_text(segments, include_labels=self.include_labels)
        paragraphs = []
        for segment in segments:
            body = segments_to_text([segment], include_labels=self.include_labels)
            if segment.is_timed:
                body = "[{}] {}".format(format_timestamp(segment.start), body)
            paragraphs.append(body)
        return MERGE_SEPARATOR.join(paragraphs)

    def format(self, segments: Sequence[TranscriptSegment]) -> List[FormatterOutput]:
        content = self._render(segments)
        if content:
            content += "\n"
        return [
            FormatterOutput(
                suffix="-transcript.txt",
                content=content,
                media_type="text/plain",
            )
        ]
