"""Heuristic speaker segmentation for transcripts without inline labels.

WHY: Plain transcription output has no speaker labels, but it usually has
structure — paragraph breaks, dialogue dashes, a question followed by an
answer. Splitting on that structure and alternating speakers gives editors
a usable starting point that they can then rename or merge.

HOW: The text is split into paragraphs on blank lines and before lines
that open with a dialogue dash. Speaker numbers are then assigned by an
alternation strategy: a plain function that receives the paragraph list and
returns one 1-based speaker number per paragraph. Strategies live in the
ALTERNATION_STRATEGIES registry so they can be swapped without touching
callers.

RULES:
- Empty or whitespace-only input → []
- One paragraph → one segment for "Speaker 1"
- Speaker numbers are 1 or 2; the first paragraph is always speaker 1
- All counters are local to one call (no module state)
- Timestamps are left at the unset sentinel
- Heuristic and approximate: attribution quality is not guaranteed
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional

from transcript_segmenter.config import (
    DEFAULT_SEGMENTATION_STRATEGY,
    default_speaker_name,
)
from transcript_segmenter.core.ir import TranscriptSegment, untimed

logger = logging.getLogger(__name__)

AlternationStrategy = Callable[[List[str]], List[int]]

# Blank line, or a newline right before a dialogue dash.
_PARAGRAPH_SPLIT_RE = re.compile(r"\n[ \t]*\n\s*|\n(?=[ \t]*[-–—]\s)")

# Paragraph shapes that read as a new line of dialogue.
_DIALOGUE_PATTERNS = (
    re.compile(r"^[\"'“].*[\"'”]$", re.DOTALL),
    re.compile(r"^[-–—]\s"),
    re.compile(r"^[A-Z][a-z]+:\s"),
    re.compile(r"^(speaker|person|interviewer|interviewee|host|guest|q|a)\s*\d*:\s", re.IGNORECASE),
)

# Openers that usually start a reply rather than continue a thought.
_TURN_INDICATORS = (
    re.compile(r"^(okay|ok|so|well|right|yeah|yes|no|um|uh|alright)\b", re.IGNORECASE),
    re.compile(r"^(i think|i believe|i mean|you know|in my opinion)\b", re.IGNORECASE),
)


def split_paragraphs(transcript: str) -> List[str]:
    """Split ``transcript`` into trimmed, non-empty paragraphs.

    Lines inside one paragraph are joined with a single space.
    """
    if not transcript or not transcript.strip():
        return []
    normalized = transcript.replace("\r\n", "\n").replace("\r", "\n")
    paragraphs: List[str] = []
    for chunk in _PARAGRAPH_SPLIT_RE.split(normalized):
        lines = [line.strip() for line in chunk.split("\n") if line.strip()]
        if lines:
            paragraphs.append(" ".join(lines))
    return paragraphs


def is_qa_boundary(previous: str, current: str) -> bool:
    """A question paragraph followed by a paragraph that is not a question."""
    return previous.rstrip().endswith("?") and not current.rstrip().endswith("?")


def _has_turn_cue(previous: str, current: str) -> bool:
    if any(pattern.search(current) for pattern in _DIALOGUE_PATTERNS):
        return True
    if is_qa_boundary(previous, current):
        return True
    return any(pattern.search(current) for pattern in _TURN_INDICATORS)


def _other(speaker: int) -> int:
    return 2 if speaker == 1 else 1


# ---------------------------------------------------------------------------
# Alternation strategies
# ---------------------------------------------------------------------------


def qa_resync_strategy(paragraphs: List[str]) -> List[int]:
    """Alternate by paragraph parity, re-anchoring at question/answer pairs.

    Outside a Q/A boundary the speaker is decided by the parity of the
    paragraph index counted from the last anchor. At a boundary the answer
    is forced to the other speaker and becomes the new anchor, so every
    later paragraph alternates from the answer's speaker.
    """
    if not paragraphs:
        return []

    numbers = [1]
    anchor_index = 0
    anchor_speaker = 1
    for index in range(1, len(paragraphs)):
        if is_qa_boundary(paragraphs[index - 1], paragraphs[index]):
            anchor_index = index
            anchor_speaker = _other(numbers[-1])
            numbers.append(anchor_speaker)
            continue
        offset = index - anchor_index
        numbers.append(anchor_speaker if offset % 2 == 0 else _other(anchor_speaker))
    return numbers


def cue_driven_strategy(paragraphs: List[str]) -> List[int]:
    """Switch speaker only when a paragraph carries a turn cue.

    Suited to long, monologue-like transcripts where blind alternation
    would attribute consecutive paragraphs of one speaker to two people.
    """
    if not paragraphs:
        return []

    numbers = [1]
    for index in range(1, len(paragraphs)):
        if _has_turn_cue(paragraphs[index - 1], paragraphs[index]):
            numbers.append(_other(numbers[-1]))
        else:
            numbers.append(numbers[-1])
    return numbers


ALTERNATION_STRATEGIES: Dict[str, AlternationStrategy] = {
    "qa_resync": qa_resync_strategy,
    "cue_driven": cue_driven_strategy,
}


def resolve_strategy(strategy: Optional[object] = None) -> AlternationStrategy:
    """Look up a strategy by name, or pass a callable straight through.

    Raises:
        ValueError: If ``strategy`` is an unknown name.
    """
    if strategy is None:
        strategy = DEFAULT_SEGMENTATION_STRATEGY
    if callable(strategy):
        return strategy
    if strategy not in ALTERNATION_STRATEGIES:
        raise ValueError(
            "Unknown segmentation strategy '{}'. Available: {}".format(
                strategy, ", ".join(sorted(ALTERNATION_STRATEGIES.keys()))
            )
        )
    return ALTERNATION_STRATEGIES[strategy]


def parse_transcript_into_segments(
    transcript: str,
    strategy: Optional[object] = None,
) -> List[TranscriptSegment]:
    """Split an unlabelled transcript into alternating-speaker segments.

    Args:
        transcript: Raw transcript text with no reliable inline labels.
        strategy: Strategy name from ALTERNATION_STRATEGIES, a strategy
                  callable, or None for the configured default.

    Returns:
        One untimed segment per paragraph, in source order.
    """
    assign = resolve_strategy(strategy)
    paragraphs = split_paragraphs(transcript)
    if not paragraphs:
        return []

    numbers = assign(paragraphs)
    segments = [
        untimed(text, default_speaker_name(number))
        for text, number in zip(paragraphs, numbers)
    ]
    logger.debug("Heuristic segmentation produced %d paragraph(s)", len(segments))
    return segments
