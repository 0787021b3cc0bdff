"""Command-line interface for the concatenate-between filter.

WHY: Tuning marker and separator options is easiest by trying them on
real text. The CLI tokenizes text on whitespace, runs it through a
configured ConcatenateBetweenFilter, and prints the resulting tokens.

HOW: argparse collects the filter options, which are handed to the
filter factory exactly as a config file would supply them. The chosen
formatter renders the drained token list to stdout or --output.

RULES:
- Positional argument: input text file; "-" or omitted reads stdin
- Invalid filter options are usage errors (exit code 2)
- Unreadable input or unwritable output exits with code 1
- Status and errors go to stderr; tokens go to stdout unless --output
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from concat_between.config import DEFAULT_SEPARATOR, ConfigError, load_log_level
from concat_between.core.ir import TokenHandling
from concat_between.core.stream import WhitespaceTokenizer
from concat_between.filters import create_filter
from concat_between.formatters import FORMATTERS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="concat_between",
        description="Concatenate runs of whitespace-separated tokens between "
                    "optional start and end marker tokens.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help="Text file to analyze ('-' or omitted reads stdin).",
    )

    parser.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Text inserted between concatenated tokens (default: %(default)r).",
    )

    parser.add_argument(
        "--start-token",
        default="",
        help="Token that starts a concatenated run. "
             "If unset, concatenation starts at the beginning of the stream.",
    )

    parser.add_argument(
        "--end-token",
        default="",
        help="Token that ends a concatenated run. "
             "If unset, a run lasts until the end of the stream.",
    )

    handling_choices = [h.value for h in TokenHandling]

    parser.add_argument(
        "--start-token-handling",
        choices=handling_choices,
        default=TokenHandling.drop.value,
        help="What to do with the start token (default: %(default)s).",
    )

    parser.add_argument(
        "--end-token-handling",
        choices=handling_choices,
        default=TokenHandling.drop.value,
        help="What to do with the end token (default: %(default)s).",
    )

    parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(FORMATTERS.keys()),
        default="plain_text",
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "--output",
        default=None,
        help="Write output to this file instead of stdout. If this is a "
             "directory, the file is named {input stem}{format suffix}.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )

    return parser


def _filter_options(args: argparse.Namespace) -> Dict[str, str]:
    """Translate parsed CLI flags into factory option keys."""
    return {
        "separator": args.separator,
        "startToken": args.start_token,
        "endToken": args.end_token,
        "startTokenHandling": args.start_token_handling,
        "endTokenHandling": args.end_token_handling,
    }


def _read_input(input_file: str) -> str:
    if input_file == "-":
        return sys.stdin.read()
    return Path(input_file).read_text(encoding="utf-8")


def _resolve_output_path(output: str, input_file: str, suffix: str) -> Path:
    """Return the file to write: ``output`` itself, or a name inside it.

    RULES:
    - A directory gets {stem}{suffix}, e.g. notes.txt -> notes-tokens.json
    - Input from stdin uses the stem "stdin"
    """
    path = Path(output)
    if not path.is_dir():
        return path
    stem = "stdin" if input_file == "-" else Path(input_file).stem
    return path / "{}{}".format(stem, suffix)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else load_log_level()
    except ConfigError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        text = _read_input(args.input_file)
    except (OSError, UnicodeDecodeError) as exc:
        _status("Error: cannot read {}: {}".format(args.input_file, exc))
        sys.exit(1)

    try:
        stream = create_filter(
            "concatenate_between",
            WhitespaceTokenizer(text),
            _filter_options(args),
        )
    except ConfigError as exc:
        parser.error(str(exc))

    tokens = list(stream)
    output = FORMATTERS[args.output_format]().format(tokens, stream.end())
    logger.debug("Produced %d tokens", len(tokens))

    if args.output is None:
        sys.stdout.write(output.content)
        return

    output_path = _resolve_output_path(args.output, args.input_file, output.suffix)
    try:
        output_path.write_text(output.content, encoding="utf-8")
    except OSError as exc:
        _status("Error: cannot write {}: {}".format(output_path, exc))
        sys.exit(1)
    _status("Wrote {} tokens to {}".format(len(tokens), output_path))


if __name__ == "__main__":
    main()
