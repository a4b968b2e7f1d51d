"""Output formatter registry — pluggable export formats.

WHY: The CLI and HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags, config, API paths)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from transcript_segmenter.formatters.json_segments import JSONSegmentsFormatter
from transcript_segmenter.formatters.plain_text import PlainTextFormatter
from transcript_segmenter.formatters.srt import SRTFormatter
from transcript_segmenter.formatters.vtt import VTTFormatter

if TYPE_CHECKING:
    from transcript_segmenter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "srt": SRTFormatter,
    "vtt": VTTFormatter,
    "plain_text": PlainTextFormatter,
    "json": JSONSegmentsFormatter,
}
