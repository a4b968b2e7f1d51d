"""Configuration constants, speaker naming defaults, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Default speaker naming, the segmentation strategy,
output formats and server settings are plain data — not buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level strings and lists. Values that are part of the parsing
contract (the default speaker name) are fixed; operational defaults can be
overridden via environment variables.

RULES:
- DEFAULT_SPEAKER_NAME is "Speaker 1" and is never overridable
- Default speaker names are built from SPEAKER_NAME_TEMPLATE ("Speaker {}")
- All other defaults can be overridden via environment variables
- Nothing in this module is mutated at runtime
"""

from __future__ import annotations

import os
from typing import List

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Speaker naming
# ---------------------------------------------------------------------------

SPEAKER_NAME_TEMPLATE = "Speaker {}"
"""Template for default speaker names, filled with a 1-based number."""

DEFAULT_SPEAKER_NAME = SPEAKER_NAME_TEMPLATE.format(1)
"""Speaker assigned to text that carries no usable label."""


def default_speaker_name(number: int) -> str:
    """Return the default display name for speaker ``number`` (1-based)."""
    return SPEAKER_NAME_TEMPLATE.format(number)


# ---------------------------------------------------------------------------
# Segmentation and export defaults
# ---------------------------------------------------------------------------

DEFAULT_SEGMENTATION_STRATEGY = os.getenv("DEFAULT_SEGMENTATION_STRATEGY", "qa_resync")


def _split_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


DEFAULT_OUTPUT_FORMATS: List[str] = _split_list(
    os.getenv("DEFAULT_OUTPUT_FORMATS", "srt,vtt,plain_text")
)

SUPPORTED_INPUT_FORMATS: set[str] = {".txt", ".md", ".text"}
"""Transcript file extensions accepted by the CLI (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# Logging and server
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
