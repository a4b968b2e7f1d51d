"""Unit tests for segment merge, rename, speaker listing and text flattening."""

from transcript_segmenter.core.algebra import (
    get_unique_speakers,
    merge_adjacent_speaker_segments,
    rename_speaker,
    segments_to_text,
)
from transcript_segmenter.core.ir import UNATTRIBUTED, TranscriptSegment
from transcript_segmenter.core.labels import parse_inline_speaker_labels


def _seg(start, end, text, speaker=None):
    return TranscriptSegment(start=start, end=end, text=text, speaker=speaker)


class TestMergeAdjacentSpeakerSegments:
    def test_empty(self):
        assert merge_adjacent_speaker_segments([]) == []

    def test_single_segment_unchanged(self):
        segments = [_seg(0, 10, "Hello", "Alice")]
        assert merge_adjacent_speaker_segments(segments) == segments

    def test_merges_consecutive_runs(self):
        segments = [
            _seg(0, 10, "First part.", "Speaker A"),
            _seg(10, 20, "Second part.", "Speaker A"),
            _seg(20, 30, "Different speaker.", "Speaker B"),
            _seg(30, 40, "Back to first.", "Speaker A"),
        ]
        merged = merge_adjacent_speaker_segments(segments)
        assert len(merged) == 3
        assert merged[0] == _seg(0, 20, "First part.\n\nSecond part.", "Speaker A")
        assert merged[2].text == "Back to first."

    def test_alternating_speakers_are_not_merged(self):
        segments = [_seg(0, 1, "a", "X"), _seg(1, 2, "b", "Y"), _seg(2, 3, "c", "X")]
        assert merge_adjacent_speaker_segments(segments) == segments

    def test_none_speaker_merges_only_with_none(self):
        segments = [_seg(0, 1, "a"), _seg(1, 2, "b"), _seg(2, 3, "c", "Speaker 1")]
        merged = merge_adjacent_speaker_segments(segments)
        assert [s.speaker for s in merged] == [None, "Speaker 1"]
        assert merged[0].text == "a\n\nb"

    def test_idempotent(self):
        segments = [
            _seg(0, 1, "a", "X"), _seg(1, 2, "b", "X"),
            _seg(2, 3, "c", "Y"), _seg(3, 4, "d", "Y"), _seg(4, 5, "e", "X"),
        ]
        once = merge_adjacent_speaker_segments(segments)
        assert merge_adjacent_speaker_segments(once) == once

    def test_input_is_not_mutated(self):
        segments = [_seg(0, 1, "a", "X"), _seg(1, 2, "b", "X")]
        snapshot = list(segments)
        merge_adjacent_speaker_segments(segments)
        assert segments == snapshot


class TestGetUniqueSpeakers:
    def test_first_occurrence_order(self):
        segments = [_seg(0, 0, "a", "Bob"), _seg(0, 0, "b", "Alice"), _seg(0, 0, "c", "Bob")]
        assert get_unique_speakers(segments) == ["Bob", "Alice"]

    def test_skips_unattributed(self):
        segments = [_seg(0, 0, "a"), _seg(0, 0, "b", "Alice"), _seg(0, 0, "c")]
        assert get_unique_speakers(segments) == ["Alice"]

    def test_empty(self):
        assert get_unique_speakers([]) == []


class TestRenameSpeaker:
    def test_renames_all_matching(self):
        segments = [_seg(0, 1, "a", "Speaker 1"), _seg(1, 2, "b", "Speaker 2"), _seg(2, 3, "c", "Speaker 1")]
        renamed = rename_speaker(segments, "Speaker 1", "Alice")
        assert [s.speaker for s in renamed] == ["Alice", "Speaker 2", "Alice"]
        assert [s.text for s in renamed] == ["a", "b", "c"]
        assert [(s.start, s.end) for s in renamed] == [(0, 1), (1, 2), (2, 3)]

    def test_unknown_speaker_is_noop(self):
        segments = [_seg(0, 1, "a", "Alice")]
        assert rename_speaker(segments, "Nobody", "Bob") == segments

    def test_does_not_touch_unattributed(self):
        segments = [_seg(0, 1, "a"), _seg(1, 2, "b", "Alice")]
        renamed = rename_speaker(segments, "Alice", "Bob")
        assert renamed[0].speaker is None

    def test_unattributed_sentinel_targets_none(self):
        segments = [_seg(0, 1, "a"), _seg(1, 2, "b", "Alice")]
        renamed = rename_speaker(segments, UNATTRIBUTED, "Narrator")
        assert [s.speaker for s in renamed] == ["Narrator", "Alice"]

    def test_empty_new_name(self):
        renamed = rename_speaker([_seg(0, 1, "a", "Alice")], "Alice", "")
        assert renamed[0].speaker == ""

    def test_original_list_unchanged(self):
        segments = [_seg(0, 1, "a", "Alice")]
        rename_speaker(segments, "Alice", "Bob")
        assert segments[0].speaker == "Alice"


class TestSegmentsToText:
    def test_with_labels(self):
        segments = [_seg(0, 0, "Hello", "John"), _seg(0, 0, "Hi", "Jane")]
        assert segments_to_text(segments) == "John: Hello\n\nJane: Hi"

    def test_without_labels(self):
        segments = [_seg(0, 0, "Hello", "John"), _seg(0, 0, "Hi", "Jane")]
        assert segments_to_text(segments, include_labels=False) == "Hello\n\nHi"

    def test_unattributed_segment_is_bare(self):
        segments = [_seg(0, 0, "Narration"), _seg(0, 0, "Hi", "Jane")]
        assert segments_to_text(segments, include_labels=True) == "Narration\n\nJane: Hi"

    def test_empty(self):
        assert segments_to_text([]) == ""

    def test_round_trip_through_label_parser(self):
        original = [
            _seg(0, 0, "Can you hear me?", "Interviewer"),
            _seg(0, 0, "Yes, loud and clear. It is 10:30 here.", "Sarah Chen"),
            _seg(0, 0, "Great.", "Interviewer"),
        ]
        text = segments_to_text(original, include_labels=True)
        reparsed = parse_inline_speaker_labels(text)
        assert [(s.speaker, s.text) for s in reparsed] == [
            (s.speaker, s.text) for s in original
        ]
        assert segments_to_text(reparsed, include_labels=True) == text
