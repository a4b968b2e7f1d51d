"""Filler-word removal for transcript text and segment sequences.

WHY: Verbatim transcripts are full of "um", "uh" and "you know". Clean
exports for reading or subtitles should drop them, but without rewriting
what the speaker meant — "I like this" must survive, "it's, like, great"
should not.

HOW: Three conservative rule groups, all whole-word and case-insensitive:
  - hesitation sounds and hedge adverbs are always removed
  - "like" is removed only when set off by commas (or opening a line
    and followed by a comma)
  - "you know" / "I mean" are removed only when followed by a comma,
    sentence punctuation or the end of the text
A comma on the same line directly around a removed filler goes with it.
Each removal leaves a gap marker; spacing is then repaired only at those
gaps, so the rest of the text keeps its exact spacing and line breaks.

RULES:
- Text without fillers is returned unchanged ("?", "🙂", "Wait , what ?")
- Removal never reaches across a line break, so the blank line between
  merged turns survives
- Text reduced to punctuation by a removal becomes ""
- Never changes speaker, start or end; segment count and order are kept
- A filler inside a longer word ("umbrella", "likely") is never touched
- Known limitation: "like" as a verb followed by a comma ("I like, no,
  love it") is removed; fuller disambiguation would need a parser
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import List, Sequence

from transcript_segmenter.core.ir import TranscriptSegment

ALWAYS_FILLERS = (
    "um", "umm", "uh", "uhh", "er", "erm", "hmm",
    "basically", "actually", "literally",
)
PHRASE_FILLERS = ("you know", "i mean")

# Placeholder left where a filler was removed.
_GAP = "\x00"

_ALWAYS_RE = re.compile(
    r"(?:,[ \t]*)?\b(?:{})\b(?:[ \t]*,)?".format("|".join(ALWAYS_FILLERS)),
    re.IGNORECASE,
)
# "like" set off by commas: ", like," or a line-opening "Like,".
_LIKE_RE = re.compile(r"(?:^|,)[ \t]*\blike\b[ \t]*,", re.IGNORECASE | re.MULTILINE)
_PHRASE_RE = re.compile(
    r"(?:,[ \t]*)?\b(?:{})\b(?=[ \t]*(?:[,.!?;]|$))(?:[ \t]*,)?".format(
        "|".join(p.replace(" ", r"[ \t]+") for p in PHRASE_FILLERS)
    ),
    re.IGNORECASE | re.MULTILINE,
)

_GAP_RUN_RE = re.compile(r"[ \t]*{0}(?:[ \t]*{0})*[ \t]*".format(_GAP))
_GAP_AT_EDGE_RE = re.compile(r"^{0}|{0}$".format(_GAP), re.MULTILINE)
_GAP_BEFORE_PUNCT_RE = re.compile(r"{}(?=[,.!?;:])".format(_GAP))
_WORD_RE = re.compile(r"\w")


def _close_gaps(text: str) -> str:
    text = _GAP_RUN_RE.sub(_GAP, text)
    text = _GAP_AT_EDGE_RE.sub("", text)
    text = _GAP_BEFORE_PUNCT_RE.sub("", text)
    return text.replace(_GAP, " ").strip()


def remove_filler_words(text: str) -> str:
    """Remove filler words and phrases from a single string."""
    if not text:
        return text
    removed = 0
    cleaned = text
    for pattern in (_LIKE_RE, _PHRASE_RE, _ALWAYS_RE):
        cleaned, count = pattern.subn(_GAP, cleaned)
        removed += count
    if not removed:
        return text

    cleaned = _close_gaps(cleaned)
    # Nothing but punctuation left ("Um." → ".")
    if not _WORD_RE.search(cleaned):
        return ""
    return cleaned


def remove_filler_words_from_segments(
    segments: Sequence[TranscriptSegment],
) -> List[TranscriptSegment]:
    """Apply remove_filler_words() to every segment's text."""
    return [replace(segment, text=remove_filler_words(segment.text)) for segment in segments]
