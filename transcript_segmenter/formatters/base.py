"""Abstract base formatter and output container.

WHY: Every output format consumes the same TranscriptSegment sequence but
produces different file content. This base class enforces a consistent
interface so the CLI and HTTP API can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; every current formatter returns one item
- ``suffix`` starts with a hyphen or dot, e.g. ``".srt"``
- The caller is responsible for prepending the source filename stem
- Formatters never reorder or modify the segments they receive
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from transcript_segmenter.core.ir import TranscriptSegment


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``".srt"`` → ``"interview.srt"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/x-subrip"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SubRip (SRT)'."""

    @abstractmethod
    def format(self, segments: Sequence[TranscriptSegment]) -> List[FormatterOutput]:
        """Convert segments into one or more output files.

        Args:
            segments: Segments in narrative order. Subtitle formats expect
                      them to be timed already.

        Returns:
            List of FormatterOutput objects.
        """
