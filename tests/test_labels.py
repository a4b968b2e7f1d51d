"""Unit tests for the inline speaker-label parser.

WHY: Labelled transcripts are the most reliable speaker signal we get.
A parser that mistakes a clock time for a label, or splits one speaker's
multi-line turn, corrupts every export downstream.

HOW: Tests cover the marker grammar (name tokens, first colon only),
turn accumulation, the default-speaker fallback, and has_inline_labels().
"""

from transcript_segmenter.core.labels import has_inline_labels, parse_inline_speaker_labels


class TestBasicParsing:
    def test_empty_input_returns_empty_list(self):
        assert parse_inline_speaker_labels("") == []
        assert parse_inline_speaker_labels("   \n\t ") == []

    def test_three_alternating_turns(self):
        segments = parse_inline_speaker_labels("John: Hello\nJane: Hi\nJohn: Bye")
        assert [s.speaker for s in segments] == ["John", "Jane", "John"]
        assert [s.text for s in segments] == ["Hello", "Hi", "Bye"]

    def test_segments_are_untimed(self):
        segments = parse_inline_speaker_labels("John: Hello\nJane: Hi")
        assert all(s.start == 0 and s.end == 0 for s in segments)

    def test_multi_word_speaker_names(self):
        segments = parse_inline_speaker_labels("Doctor John Smith Junior: Hello there")
        assert segments[0].speaker == "Doctor John Smith Junior"
        assert segments[0].text == "Hello there"

    def test_single_letter_names(self):
        segments = parse_inline_speaker_labels(
            "Q: What is the capital of France?\nA: Paris.\nQ: When was it founded?\nA: Long ago."
        )
        assert len(segments) == 4
        assert [s.speaker for s in segments] == ["Q", "A", "Q", "A"]

    def test_unicode_names(self):
        segments = parse_inline_speaker_labels("Zoë: Bonjour\nÅsa: Hej")
        assert [s.speaker for s in segments] == ["Zoë", "Åsa"]


class TestTurnAccumulation:
    def test_continuation_lines_join_with_space(self):
        transcript = (
            "Speaker One: This is my opening statement.\n"
            "I want to make several points today.\n"
            "Second, we need to review the timeline.\n"
            "\n"
            "Speaker Two: Thank you for that overview."
        )
        segments = parse_inline_speaker_labels(transcript)
        assert len(segments) == 2
        assert segments[0].text == (
            "This is my opening statement. I want to make several points today. "
            "Second, we need to review the timeline."
        )
        assert segments[1].speaker == "Speaker Two"

    def test_repeated_marker_for_same_speaker_accumulates(self):
        segments = parse_inline_speaker_labels("John: Hello\nJohn: Again\nJane: Hi")
        assert len(segments) == 2
        assert segments[0].text == "Hello Again"

    def test_unlabelled_preamble_goes_to_default_speaker(self):
        segments = parse_inline_speaker_labels("Recorded on Monday\nJohn: Hello")
        assert [s.speaker for s in segments] == ["Speaker 1", "John"]
        assert segments[0].text == "Recorded on Monday"

    def test_empty_text_after_marker_opens_segment(self):
        segments = parse_inline_speaker_labels("John: \nJane: Hello")
        assert len(segments) == 2
        assert segments[0].speaker == "John"
        assert segments[0].text == ""
        assert segments[1].text == "Hello"


class TestMarkerEdgeCases:
    def test_lowercase_names_do_not_match(self):
        segments = parse_inline_speaker_labels("john: Hello\njane: Hi")
        assert len(segments) == 1
        assert segments[0].speaker == "Speaker 1"
        assert segments[0].text == "john: Hello jane: Hi"

    def test_digits_in_name_fall_back_to_default_speaker(self):
        segments = parse_inline_speaker_labels("Speaker1: Hello")
        assert len(segments) == 1
        assert segments[0].speaker == "Speaker 1"
        assert segments[0].text == "Speaker1: Hello"

    def test_clock_time_is_not_a_delimiter(self):
        segments = parse_inline_speaker_labels("John: The time is 10:30 AM")
        assert segments[0].speaker == "John"
        assert segments[0].text == "The time is 10:30 AM"

    def test_line_starting_with_clock_time_is_continuation(self):
        segments = parse_inline_speaker_labels("John: Agenda\n10:30 coffee break")
        assert len(segments) == 1
        assert segments[0].text == "Agenda 10:30 coffee break"

    def test_space_before_colon_is_trimmed_from_name(self):
        segments = parse_inline_speaker_labels("John : Hello")
        assert segments[0].speaker == "John"

    def test_punctuation_in_name_does_not_match(self):
        segments = parse_inline_speaker_labels("Dr. Smith: Hello")
        assert segments[0].speaker == "Speaker 1"


class TestHasInlineLabels:
    def test_detects_labels(self):
        assert has_inline_labels("Intro text\nHost: Welcome")

    def test_plain_text_has_no_labels(self):
        assert not has_inline_labels("Just a paragraph.\n\nAnother one at 10:30.")

    def test_empty_text(self):
        assert not has_inline_labels("")
