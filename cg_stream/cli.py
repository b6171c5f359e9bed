"""Command-line interface for cg_stream.

WHY: CG streams usually arrive as files or on a pipe from another CG tool.
The CLI wires the pieces together behind one command: read the stream,
parse it, run the selected formatters, and write the results.

HOW: argparse accepts an input path (or "-" for stdin), a comma-separated
list of formats, and where to put the output. The text is parsed once
with parse_with_stats(); every formatter receives the same cohort list.
Outputs are saved next to the input (or in --output-dir) or written to
stdout with --stdout. Status messages go to stderr.

RULES:
- Positional argument: input file path, or "-" for stdin
- --formats: comma-separated formatter keys (default: CG_STREAM_DEFAULT_FORMATS)
- Output naming: {stem}{suffix}, numeric suffix on conflict (-canonical-2.cg)
- Existing files are never overwritten
- stdin input needs --stdout or --output-dir (stem "stdin")
- --encoding applies to files, stdin and stdout alike
- Status output goes to stderr (not stdout)
- Exit code 1 on user errors: missing file, unknown format, bad directory,
  undecodable input, invalid configuration
"""

from __future__ import annotations

import argparse
import itertools
import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from cg_stream.config import DEFAULT_ENCODING, default_format_keys, load_log_level
from cg_stream.core.builder import parse_with_stats
from cg_stream.formatters import FORMATTERS
from cg_stream.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"
STDIN_STEM = "stdin"


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Pick a path in output_dir that does not exist yet.

    corpus + "-cohorts.json" gives corpus-cohorts.json, then
    corpus-cohorts-2.json, corpus-cohorts-3.json, ... when taken.
    """
    name, ext = os.path.splitext(suffix)
    candidate = output_dir / "{}{}".format(stem, suffix)
    for counter in itertools.count(2):
        if not candidate.exists():
            return candidate
        candidate = output_dir / "{}{}-{}{}".format(stem, name, counter, ext)


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
    encoding: str,
) -> Path:
    """Write one formatter output to a conflict-free path and return it."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    # newline="" keeps "\n" terminators on every platform
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(output.content)
    return path


def _resolve_format_keys(formats: Optional[str]) -> List[str]:
    if formats:
        keys = [f.strip() for f in formats.split(",") if f.strip()]
    else:
        keys = default_format_keys()

    if not keys:
        _fail("No output formats selected.")

    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return keys


def _read_input(input_file: str, encoding: str) -> str:
    if input_file == STDIN_MARKER:
        # decode the raw bytes ourselves; the locale encoding of sys.stdin
        # does not apply to CG streams
        return sys.stdin.buffer.read().decode(encoding)
    # newline="" so "\r\n" reaches the parser untranslated
    with open(input_file, encoding=encoding, newline="") as f:
        return f.read()


def _write_stdout(content: str, encoding: str) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(content.encode(encoding))
    sys.stdout.buffer.flush()


def _run_pipeline(args: argparse.Namespace) -> None:
    """Execute read → parse → format → write.

    RULES:
    - Validate formats, input and output directory before parsing
    - Every formatter receives the same cohort list
    - With --stdout, outputs are written to stdout in --formats order
    """
    format_keys = _resolve_format_keys(args.formats)
    from_stdin = args.input_file == STDIN_MARKER

    if from_stdin:
        stem = STDIN_STEM
        source_dir = None
    else:
        input_path = Path(args.input_file).resolve()
        if not input_path.is_file():
            _fail("File not found: {}".format(input_path))
        stem = input_path.stem
        source_dir = input_path.parent

    output_dir: Optional[Path] = None
    if not args.stdout:
        if args.output_dir:
            output_dir = Path(args.output_dir).resolve()
        elif source_dir is not None:
            output_dir = source_dir
        else:
            _fail("Reading from stdin requires --stdout or --output-dir.")
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    try:
        text = _read_input(args.input_file, args.encoding)
    except UnicodeDecodeError as e:
        _fail("Cannot decode input as {}: {}".format(args.encoding, e))

    cohorts, stats = parse_with_stats(text)
    _status("Parsed {} cohorts, {} readings from {} lines".format(
        stats.cohorts, stats.readings, stats.lines,
    ))
    if stats.orphan_readings:
        logger.warning(
            "Dropped %d reading line(s) that appeared before the first cohort",
            stats.orphan_readings,
        )

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        logger.info("Running %s formatter", formatter.name)
        for output in formatter.format(cohorts):
            if args.stdout:
                _write_stdout(output.content, args.encoding)
            else:
                saved_path = _save_output(output, stem, output_dir, args.encoding)
                saved_files.append(saved_path)
                _status("  Saved: {}".format(saved_path.name))

    if not args.stdout:
        _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect it without running
    the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="cg-stream",
        description="Parse constraint-grammar cohort streams and write them "
                    "out as canonical CG text or JSON.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the CG stream file, or '-' to read from stdin.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())),
                 ",".join(default_format_keys()) or "none",
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write outputs to stdout instead of files.",
    )

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Text encoding of input and output files (default: %(default)s).",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: CG_STREAM_LOG_LEVEL or WARNING).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``cg-stream`` and ``python -m cg_stream``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = load_log_level(args.log_level)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _run_pipeline(args)
    except UnicodeEncodeError as e:
        _fail("Cannot encode output as {}: {}".format(args.encoding, e))
    except LookupError as e:
        # unknown --encoding name
        _fail(str(e))
    except OSError as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
