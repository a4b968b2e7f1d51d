"""Proportional timestamp estimation and playback-time lookup.

WHY: Text-only transcripts have no word timings, but the player still
needs to highlight the segment being spoken and the subtitle formatters
need cue times. Given the audio duration, a constant speaking rate is a
good enough approximation: longer text took longer to say.

HOW: estimate_segment_timestamps() weights every segment by its character
count and lays the segments end to end over [0, total_duration].
find_segment_at_time() scans the timed segments for the one containing a
playback position.

RULES:
- Empty input or total_duration <= 0 → input returned unchanged
- Output is contiguous: segments[i].end == segments[i + 1].start
- segments[0].start == 0 and segments[-1].end == total_duration exactly
- If every segment has empty text, the duration is split equally
- Lookup: start inclusive, end exclusive
- Before the first segment → -1; after the last → last index; gap → -1
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from transcript_segmenter.core.ir import TranscriptSegment


def estimate_segment_timestamps(
    segments: Sequence[TranscriptSegment],
    total_duration: float,
) -> List[TranscriptSegment]:
    """Assign start/end times proportional to each segment's text length.

    Args:
        segments: Segments in narrative order.
        total_duration: Audio duration in seconds.

    Returns:
        New segments covering [0, total_duration] without gaps.
    """
    if not segments or total_duration <= 0:
        return list(segments)

    weights = [len(segment.text) for segment in segments]
    total_weight = sum(weights)
    if total_weight == 0:
        weights = [1] * len(segments)
        total_weight = len(segments)

    timed: List[TranscriptSegment] = []
    cumulative = 0
    last_index = len(segments) - 1
    for index, (segment, weight) in enumerate(zip(segments, weights)):
        start = cumulative / total_weight * total_duration
        cumulative += weight
        if index == last_index:
            end = float(total_duration)
        else:
            end = cumulative / total_weight * total_duration
        timed.append(replace(segment, start=start, end=end))
    return timed


def find_segment_at_time(segments: Sequence[TranscriptSegment], time: float) -> int:
    """Return the index of the segment playing at ``time``, or -1.

    A position at or past the last segment's start that no segment
    contains resolves to the last segment, so trailing playback keeps
    the final segment highlighted.
    """
    for index, segment in enumerate(segments):
        if segment.start <= time < segment.end:
            return index
    if segments and time >= segments[-1].start:
        return len(segments) - 1
    return -1
