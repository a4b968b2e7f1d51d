"""Parser for transcripts that carry inline "Name: text" speaker labels.

WHY: Most transcription backends and hand-edited transcripts mark speaker
turns as "Interviewer: ..." at the start of a line. Those labels are the
strongest speaker signal available from text alone, so when they exist the
segmenter uses them instead of guessing.

HOW: Each line is stripped and matched against _SPEAKER_LINE_RE. A match
with a different name closes the open turn and opens a new one; a match
with the same name, or a line without a marker, extends the open turn.
The open turn lives in a _TurnBuilder local to each call. Text before the
first marker belongs to the default speaker.

RULES:
- A name is one or more space-separated runs of letters, starting uppercase
- Digits, underscores or punctuation in the name invalidate the marker
- Only the first colon on the line can be the delimiter
- Continuation lines and repeated same-name markers are space-joined
- Blank lines are skipped and never close a turn
- "Name:" with nothing after it opens a segment with empty text
- No marker anywhere → one segment for DEFAULT_SPEAKER_NAME
- Timestamps are left at the unset sentinel
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from transcript_segmenter.config import DEFAULT_SPEAKER_NAME
from transcript_segmenter.core.ir import TranscriptSegment, untimed

logger = logging.getLogger(__name__)

# [^\W\d_] is "a Unicode letter": word characters minus digits and underscore.
_SPEAKER_LINE_RE = re.compile(
    r"^(?P<name>[^\W\d_]+(?:[ \t]+[^\W\d_]+)*)[ \t]*:(?:[ \t]+(?P<text>.*)|(?P<bare>.*))?$"
)


def _match_speaker_line(line: str) -> Optional[tuple]:
    """Return (name, text) when ``line`` starts with a valid speaker marker."""
    match = _SPEAKER_LINE_RE.match(line)
    if match is None:
        return None
    name = match.group("name")
    if not name[0].isupper():
        return None
    text = match.group("text")
    if text is None:
        text = match.group("bare") or ""
    return name, text.strip()


def has_inline_labels(transcript: str) -> bool:
    """True when at least one line of ``transcript`` carries a speaker marker."""
    if not transcript:
        return False
    return any(
        _match_speaker_line(line.strip()) is not None
        for line in transcript.splitlines()
    )


@dataclass
class _TurnBuilder:
    """Accumulates the lines of the speaker turn currently being read."""

    speaker: str
    parts: List[str] = field(default_factory=list)
    labelled: bool = False

    def add(self, text: str) -> None:
        if text:
            self.parts.append(text)

    def build(self) -> TranscriptSegment:
        return untimed(" ".join(self.parts), self.speaker)


def parse_inline_speaker_labels(transcript: str) -> List[TranscriptSegment]:
    """Parse a transcript with "Name: text" lines into speaker segments.

    Args:
        transcript: Raw transcript text, possibly empty.

    Returns:
        Segments in source order, untimed. Empty for blank input.
    """
    if not transcript or not transcript.strip():
        return []

    segments: List[TranscriptSegment] = []
    turn = _TurnBuilder(speaker=DEFAULT_SPEAKER_NAME)

    for raw_line in transcript.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        marker = _match_speaker_line(line)
        if marker is None:
            turn.add(line)
            continue

        name, text = marker
        if turn.labelled and name == turn.speaker:
            turn.add(text)
            continue

        # Unlabelled text before the first marker is only kept if it exists.
        if turn.labelled or turn.parts:
            segments.append(turn.build())
        turn = _TurnBuilder(speaker=name, labelled=True)
        turn.add(text)

    if turn.labelled or turn.parts:
        segments.append(turn.build())

    logger.debug(
        "Parsed %d labelled segment(s) from %d characters",
        len(segments),
        len(transcript),
    )
    return segments
