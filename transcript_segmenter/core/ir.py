"""Segment dataclass shared by every parser, transform and formatter.

WHY: Parsers, the timeline allocator and the subtitle formatters all speak
about the same thing — a span of transcript text attributed to one speaker
with a time range. A single, immutable type keeps them decoupled: a parser
never needs to know which formatter will consume its output.

HOW: TranscriptSegment is a frozen dataclass. Transforms build new
instances with dataclasses.replace() instead of mutating in place.

RULES:
- start / end are float seconds; start is inclusive, end exclusive at lookup
- start == end == 0 means "not yet timed" (a sentinel, not a real range)
- speaker is None for unattributed text; "Speaker 1" is a real name
- text is trimmed; one speaker turn never contains a raw newline from parsing
- to_dict()/from_dict() use the wire shape {start, end, text, speaker}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

UNSET_TIME = 0.0
"""Sentinel start/end value for segments that have not been timed yet."""


class _Unattributed:
    """Marker for "segments without a speaker" in rename_speaker()."""

    _instance: Optional["_Unattributed"] = None

    def __new__(cls) -> "_Unattributed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNATTRIBUTED"


UNATTRIBUTED = _Unattributed()


@dataclass(frozen=True)
class TranscriptSegment:
    """A contiguous span of transcript text attributed to one speaker.

    Attributes:
        start: Start time in seconds (inclusive).
        end: End time in seconds (exclusive when looking up a playback time).
        text: Trimmed segment text. May be "" for an empty labelled turn.
        speaker: Speaker display name, or None when unattributed.
    """

    start: float
    end: float
    text: str
    speaker: Optional[str] = None

    @property
    def duration(self) -> float:
        return max(0.0, self.end - self.start)

    @property
    def is_timed(self) -> bool:
        return not (self.start == UNSET_TIME and self.end == UNSET_TIME)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire shape used by the JSON formatter and HTTP API."""
        return {
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "speaker": self.speaker,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranscriptSegment":
        """Build a segment from a wire-shape dict.

        Missing times default to the unset sentinel; a missing or null
        speaker stays None.
        """
        speaker = data.get("speaker")
        return cls(
            start=float(data.get("start") or UNSET_TIME),
            end=float(data.get("end") or UNSET_TIME),
            text=str(data.get("text") or ""),
            speaker=str(speaker) if speaker is not None else None,
        )


def untimed(text: str, speaker: Optional[str] = None) -> TranscriptSegment:
    """Create a segment that carries the unset time sentinel."""
    return TranscriptSegment(start=UNSET_TIME, end=UNSET_TIME, text=text, speaker=speaker)


def has_timestamps(segments: Iterable[TranscriptSegment]) -> bool:
    """True when at least one segment carries a real time range."""
    return any(seg.is_timed for seg in segments)
