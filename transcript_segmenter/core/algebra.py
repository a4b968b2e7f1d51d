"""Pure operations over segment sequences: merge, rename, list, flatten.

WHY: After parsing, editors tidy the result — collapse consecutive turns
of one speaker, replace "Speaker 1" with a real name, list who spoke, or
flatten everything back to text for copying. These are the operations the
UI, CLI and API call between parsing and export.

HOW: Each function walks the input once and builds a new list. Segments
are frozen, so changes go through dataclasses.replace().

RULES:
- Inputs are never mutated; outputs are fresh lists
- Speaker comparison is exact string equality; None only equals None
- Merged text is joined with a blank line ("\\n\\n")
- Non-adjacent turns of the same speaker are never merged
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence, Union

from transcript_segmenter.core.ir import UNATTRIBUTED, TranscriptSegment, _Unattributed

MERGE_SEPARATOR = "\n\n"


def merge_adjacent_speaker_segments(
    segments: Sequence[TranscriptSegment],
) -> List[TranscriptSegment]:
    """Combine runs of consecutive segments that share a speaker.

    Each run keeps the first segment's start and the last segment's end.
    Merging an already-merged sequence returns an equal sequence.
    """
    if len(segments) <= 1:
        return list(segments)

    merged: List[TranscriptSegment] = []
    current = segments[0]
    for segment in segments[1:]:
        if segment.speaker == current.speaker:
            current = replace(
                current,
                text=current.text + MERGE_SEPARATOR + segment.text,
                end=segment.end,
            )
        else:
            merged.append(current)
            current = segment
    merged.append(current)
    return merged


def get_unique_speakers(segments: Sequence[TranscriptSegment]) -> List[str]:
    """Return speaker names in order of first appearance, skipping None."""
    seen = set()
    speakers: List[str] = []
    for segment in segments:
        if segment.speaker is None or segment.speaker in seen:
            continue
        seen.add(segment.speaker)
        speakers.append(segment.speaker)
    return speakers


def rename_speaker(
    segments: Sequence[TranscriptSegment],
    old_name: Union[str, _Unattributed],
    new_name: Optional[str],
) -> List[TranscriptSegment]:
    """Rename every segment spoken by ``old_name``.

    Args:
        segments: Segments to rename.
        old_name: Exact speaker name to replace. Pass UNATTRIBUTED to
                  target segments whose speaker is None.
        new_name: Replacement name (may be "" or None).

    Returns:
        A new list; segments by other speakers are passed through as-is.
    """
    if old_name is UNATTRIBUTED:
        return [
            replace(s, speaker=new_name) if s.speaker is None else s
            for s in segments
        ]
    return [
        replace(s, speaker=new_name) if s.speaker is not None and s.speaker == old_name else s
        for s in segments
    ]


def segments_to_text(
    segments: Sequence[TranscriptSegment],
    include_labels: bool = True,
) -> str:
    """Flatten segments to text, one blank line between segments.

    With ``include_labels`` each attributed segment is prefixed with
    "<speaker>: "; unattributed segments are always emitted bare.
    """
    blocks: List[str] = []
    for segment in segments:
        if include_labels and segment.speaker is not None:
            blocks.append("{}: {}".format(segment.speaker, segment.text))
        else:
            blocks.append(segment.text)
    return MERGE_SEPARATOR.join(blocks)
