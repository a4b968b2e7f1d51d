"""Shared test fixtures for the transcript_segmenter test suite.

WHY: Several test modules need the same labelled transcripts and small
hand-built segment lists. Centralizing them here avoids duplication and
keeps the accuracy fixtures in one place.

HOW: The JSON files under tests/fixtures/ hold a transcript and its
ground-truth speaker per segment. Pytest fixtures load them by name and
provide a few timed and untimed segment lists.

RULES:
- Fixture files are read-only test data; tests never write to them
- Segment fixtures are fresh lists per test
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from transcript_segmenter.core.ir import TranscriptSegment

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_fixture(name: str) -> Dict[str, Any]:
    with open(FIXTURES_DIR / "{}.json".format(name), encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def interview_fixture():
    return load_fixture("interview-transcript")


@pytest.fixture
def podcast_fixture():
    return load_fixture("podcast-transcript")


@pytest.fixture
def meeting_fixture():
    return load_fixture("meeting-transcript")


@pytest.fixture
def qa_no_labels_fixture():
    return load_fixture("qa-no-labels")


@pytest.fixture
def timed_segments() -> List[TranscriptSegment]:
    """Two labelled, contiguous segments covering 0–10 s."""
    return [
        TranscriptSegment(start=0.0, end=4.5, text="How are you doing today?", speaker="John"),
        TranscriptSegment(start=4.5, end=10.0, text="I am fantastic, thank you.", speaker="Jane"),
    ]


@pytest.fixture
def untimed_segments() -> List[TranscriptSegment]:
    return [
        TranscriptSegment(start=0.0, end=0.0, text="Hello", speaker="Alice"),
        TranscriptSegment(start=0.0, end=0.0, text="World", speaker="Bob"),
    ]
