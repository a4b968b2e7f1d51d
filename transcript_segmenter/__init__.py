"""Transcript Segmenter — speaker segmentation and subtitle export for text transcripts.

WHY: Transcription backends hand back one long string, sometimes with
"Name: text" labels and sometimes without any structure at all. Editors,
players and subtitle tools need that text split into speaker turns with
time ranges, and need it back out as plain text, SRT or WebVTT.

HOW: Three-stage pipeline — parse (label parser or heuristic segmenter),
transform (merge, rename, clean, estimate timestamps), export (pluggable
formatters). Each stage is a set of pure functions over TranscriptSegment
sequences and is independently testable.

RULES:
- All formatters consume the same TranscriptSegment sequence
- No function mutates its input; every transform returns new segments
- Speaker identity comes from text structure only, never from audio
"""

__version__ = "0.1.0"
