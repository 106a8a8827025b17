from __future__ import annotations

import argparse
import io
import logging
from pathlib import Path
import sys

from jsontabledoc import process_json
from jsontabledoc.errors import JsonTableDocError
from jsontabledoc.io import STDIN_SOURCE
from jsontabledoc.sample import SAMPLE_JSON

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _ensure_utf8_stdout() -> None:
    """Reconfigure stdout to UTF-8 when supported.

    Consoles with a legacy code page can raise encoding errors when piping
    non-ASCII field names or examples.
    """

    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="strict")  # type: ignore[union-attr]
    except (AttributeError, ValueError):
        return


def _configure_logging(level: str) -> None:
    """Configure root logging for the CLI process.

    Args:
        level: Logging level name.
    """
    logging.basicConfig(
        level=level.upper(),
        handlers=[logging.StreamHandler(sys.stderr)],
        format=_LOG_FORMAT,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="jsontabledoc",
        description="Describe a JSON document as nested Markdown tables.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIN_SOURCE,
        help="JSON file to describe. Reads stdin when omitted or '-'.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output path. If omitted, writes to stdout.",
    )
    parser.add_argument(
        "-f",
        "--format",
        default="markdown",
        choices=["markdown", "md", "json", "yaml", "yml"],
        help="Output format. json/yaml emit the table tree instead of Markdown.",
    )
    parser.add_argument(
        "-t",
        "--title",
        default="Main Structure",
        help="Title of the top-level table.",
    )
    parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Sort fields by name at every level. Default keeps document order.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum object nesting depth before rendering fails.",
    )
    parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Emit cell text as-is, without escaping pipes and line breaks.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output (indent=2). Default is compact JSON.",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Describe the built-in sample document instead of reading input.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv: Optional argument list for testing.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    _ensure_utf8_stdout()
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    source = io.StringIO(SAMPLE_JSON) if args.sample else args.input
    try:
        process_json(
            source,
            output_path=args.output,
            out_fmt=args.format,
            title=args.title,
            sort_keys=args.sort_keys,
            max_depth=args.max_depth,
            escape_cells=not args.no_escape,
            pretty=args.pretty,
        )
        return 0
    except JsonTableDocError as e:
        logger.debug("Rendering failed.", exc_info=True)
        print(f"Error: {e}", file=sys.stderr, flush=True)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
