"""Seconds-to-string conversion for the UI clock and subtitle timecodes.

WHY: The player UI shows positions as "M:SS", session lists show durations
that may run past an hour, and the subtitle formats need millisecond
timecodes with format-specific punctuation. Keeping all of them here means
the formatters never do their own arithmetic on seconds.

HOW: UI strings floor to whole seconds. Subtitle timecodes round to the
nearest millisecond first and then split into hours, minutes, seconds and
milliseconds with integer arithmetic, so 59.9996 s becomes 00:01:00,000
rather than 00:00:59,1000.

RULES:
- format_timestamp: "M:SS", minutes unbounded, never rounds up
- format_duration: "M:SS" below one hour, "H:MM:SS" from 3600 s
- SRT uses a comma before milliseconds, WebVTT a dot
- Negative input is clamped to zero
"""

from __future__ import annotations

import math


def _whole_seconds(seconds: float) -> int:
    if seconds <= 0:
        return 0
    return int(math.floor(seconds))


def format_timestamp(seconds: float) -> str:
    """Format seconds as ``M:SS`` for the playback clock.

    >>> format_timestamp(125.9)
    '2:05'
    """
    total = _whole_seconds(seconds)
    minutes, secs = divmod(total, 60)
    return "{}:{:02d}".format(minutes, secs)


def format_duration(seconds: float) -> str:
    """Format seconds as ``M:SS``, or ``H:MM:SS`` once an hour is reached."""
    total = _whole_seconds(seconds)
    if total < 3600:
        return format_timestamp(total)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return "{}:{:02d}:{:02d}".format(hours, minutes, secs)


def _split_millis(seconds: float) -> tuple:
    total_ms = int(round(seconds * 1000)) if seconds > 0 else 0
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)
    return hours, minutes, secs, millis


def format_srt_timestamp(seconds: float) -> str:
    """Convert seconds to SRT timestamp format: HH:MM:SS,mmm"""
    return "{:02d}:{:02d}:{:02d},{:03d}".format(*_split_millis(seconds))


def format_vtt_timestamp(seconds: float) -> str:
    """Convert seconds to WebVTT timestamp format: HH:MM:SS.mmm"""
    return "{:02d}:{:02d}:{:02d}.{:03d}".format(*_split_millis(seconds))
