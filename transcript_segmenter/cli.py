"""Command-line interface for the Transcript Segmenter.

WHY: Users need a simple way to turn a transcript text file into speaker
segments and subtitle files from the terminal. The CLI wires together the
full pipeline — file validation, parsing, optional cleaning/renaming/
merging, timestamp estimation, pluggable formatter output and file
saving — behind a single command.

HOW: Uses argparse to accept an input file and pipeline options, runs the
pure core functions in order, then saves every requested formatter output
next to the source (or to --output-dir). Status messages go to stderr.

RULES:
- Positional argument: input transcript file path
- Validates the file extension against SUPPORTED_INPUT_FORMATS
- Pipeline order: parse → rename → remove fillers → merge → estimate times
- --formats: comma-separated formatter keys (default: DEFAULT_OUTPUT_FORMATS)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-transcript-2.txt)
- Status output goes to stderr (not stdout); errors exit with status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from transcript_segmenter.config import (
    DEFAULT_OUTPUT_FORMATS,
    DEFAULT_SEGMENTATION_STRATEGY,
    LOG_LEVEL,
    SUPPORTED_INPUT_FORMATS,
)
from transcript_segmenter.core import (
    ALTERNATION_STRATEGIES,
    PARSE_MODES,
    estimate_segment_timestamps,
    get_unique_speakers,
    merge_adjacent_speaker_segments,
    parse_transcript,
    remove_filler_words_from_segments,
    rename_speaker,
)
from transcript_segmenter.core.ir import TranscriptSegment
from transcript_segmenter.core.timecode import format_duration
from transcript_segmenter.formatters import FORMATTERS
from transcript_segmenter.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def parse_rename(value: str) -> Tuple[str, str]:
    """Split an ``OLD=NEW`` rename argument.

    Raises:
        ValueError: If there is no "=" or the old name is empty.
    """
    if "=" not in value:
        raise ValueError("Rename must look like OLD=NEW, got '{}'".format(value))
    old_name, new_name = value.split("=", 1)
    old_name = old_name.strip()
    if not old_name:
        raise ValueError("Rename is missing the speaker to replace: '{}'".format(value))
    return old_name, new_name.strip()


def parse_format_keys(raw: Optional[str]) -> List[str]:
    """Resolve the --formats value to registered formatter keys.

    Raises:
        ValueError: If a key is not in FORMATTERS.
    """
    if raw:
        keys = [key.strip() for key in raw.split(",") if key.strip()]
    else:
        keys = list(DEFAULT_OUTPUT_FORMATS)
    for key in keys:
        if key not in FORMATTERS:
            raise ValueError(
                "Unknown output format '{}'. Available: {}".format(
                    key, ", ".join(sorted(FORMATTERS.keys()))
                )
            )
    return keys


def build_segments(
    text: str,
    mode: str = "auto",
    strategy: Optional[str] = None,
    renames: Sequence[Tuple[str, str]] = (),
    remove_fillers: bool = False,
    merge: bool = False,
    duration: Optional[float] = None,
) -> List[TranscriptSegment]:
    """Run the segmentation pipeline on raw transcript text.

    Shared by the CLI and the HTTP API so both apply the steps in the
    same order.
    """
    segments = parse_transcript(text, mode=mode, strategy=strategy)
    for old_name, new_name in renames:
        segments = rename_speaker(segments, old_name, new_name)
    if remove_fillers:
        segments = remove_filler_words_from_segments(segments)
    if merge:
        segments = merge_adjacent_speaker_segments(segments)
    if duration is not None:
        segments = estimate_segment_timestamps(segments, duration)
    return segments


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. interview.srt)
    - Conflict: insert counter before the extension (interview-2.srt)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx >= 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    RULES:
    - Positional: input_file (required)
    - Optional: --mode, --strategy, --duration, --merge, --remove-fillers
    - Optional: --rename OLD=NEW (repeatable), --formats, --output-dir
    - Optional: --list-speakers, --log-level
    """
    parser = argparse.ArgumentParser(
        prog="transcript_segmenter",
        description="Split a text transcript into speaker segments and export "
                    "plain text, SRT, WebVTT or JSON.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the transcript text file.",
    )

    parser.add_argument(
        "--mode",
        choices=PARSE_MODES,
        default="auto",
        help="Parser to use: inline labels, paragraph heuristics, or auto-detect "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "--strategy",
        choices=sorted(ALTERNATION_STRATEGIES.keys()),
        default=DEFAULT_SEGMENTATION_STRATEGY,
        help="Speaker alternation strategy for unlabelled text (default: %(default)s).",
    )

    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Audio duration in seconds; estimates segment timestamps when given.",
    )

    parser.add_argument(
        "--merge",
        action="store_true",
        help="Merge consecutive segments from the same speaker.",
    )

    parser.add_argument(
        "--remove-fillers",
        action="store_true",
        help="Remove filler words (um, uh, you know, ...) from segment text.",
    )

    parser.add_argument(
        "--rename",
        action="append",
        default=None,
        metavar="OLD=NEW",
        help="Rename a speaker. Can be specified multiple times.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), ",".join(DEFAULT_OUTPUT_FORMATS)
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--list-speakers",
        action="store_true",
        help="Print the detected speakers to stdout instead of writing files.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s).",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute the pipeline for parsed arguments and return an exit status."""
    input_path = Path(args.input_file)
    if not input_path.is_file():
        _status("Error: file not found: {}".format(input_path))
        return 1
    if input_path.suffix.lower() not in SUPPORTED_INPUT_FORMATS:
        _status("Error: unsupported file type '{}'. Supported: {}".format(
            input_path.suffix, ", ".join(sorted(SUPPORTED_INPUT_FORMATS))
        ))
        return 1

    try:
        renames = [parse_rename(value) for value in (args.rename or [])]
        format_keys = parse_format_keys(args.formats)
    except ValueError as exc:
        _status("Error: {}".format(exc))
        return 1

    text = input_path.read_text(encoding="utf-8")
    segments = build_segments(
        text,
        mode=args.mode,
        strategy=args.strategy,
        renames=renames,
        remove_fillers=args.remove_fillers,
        merge=args.merge,
        duration=args.duration,
    )
    speakers = get_unique_speakers(segments)
    _status("Parsed {} segment(s) from {} speaker(s)".format(len(segments), len(speakers)))

    if args.list_speakers:
        for name in speakers:
            print(name)
        return 0

    if args.duration is None and any(key in ("srt", "vtt") for key in format_keys):
        _status("Warning: no --duration given; subtitle cues will have zero timestamps")
    elif args.duration is not None:
        _status("Estimated timestamps over {}".format(format_duration(args.duration)))

    output_dir = Path(args.output_dir) if args.output_dir else input_path.parent
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(segments):
            path = _save_output(output, input_path.stem, output_dir)
            _status("Saved {}: {}".format(formatter.name, path))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    status = run(args)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
