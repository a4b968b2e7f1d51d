"""Deterministic speaker-to-color mapping for speaker chips and highlights.

WHY: Every view that shows a speaker (transcript list, legend, exports
with styling) must draw the same speaker in the same color, across
renders and across processes, without storing an assignment anywhere.

HOW: A 32-bit string hash (h = h * 31 + code unit, wrapped to signed
32 bits, over the UTF-16 code units of the name) picks an entry from a
fixed palette. Results are memoized with functools.lru_cache, whose
lookups are safe to share between threads.

RULES:
- Same name → same color, always (no random seed, no counters)
- Any string, including "" and very long names, maps into the palette
- Palette entries are CSS tokens: a var() reference or a hex literal
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

SPEAKER_PALETTE: Tuple[str, ...] = (
    "var(--primary)",
    "#10b981",  # emerald
    "#f59e0b",  # amber
    "#8b5cf6",  # violet
    "#ec4899",  # pink
    "#06b6d4",  # cyan
    "#f97316",  # orange
    "#84cc16",  # lime
)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def speaker_hash(name: str) -> int:
    """Signed 32-bit rolling hash of ``name`` over UTF-16 code units."""
    encoded = name.encode("utf-16-le", errors="surrogatepass")
    value = 0
    for index in range(0, len(encoded), 2):
        unit = encoded[index] | (encoded[index + 1] << 8)
        value = _to_int32((value << 5) - value + unit)
    return value


@lru_cache(maxsize=1024)
def get_speaker_color(name: str) -> str:
    """Return the palette color for speaker ``name``."""
    return SPEAKER_PALETTE[abs(speaker_hash(name)) % len(SPEAKER_PALETTE)]
