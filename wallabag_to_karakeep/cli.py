"""Command-line entry point: `wb2kk INPUT [OUTPUT] [-t TAG]...`."""
from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import get_settings
from .errors import FatalInputError
from .io_utils import configure_logging, read_export_content
from .pipeline import parse_export, stream_bookmarks

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wb2kk",
        description="Convert Wallabag export JSON to Karakeep format",
    )
    parser.add_argument("input", help="Input wallabag export JSON file (use '-' for stdin)")
    parser.add_argument("output", nargs="?", default=None,
                        help="Output file path (defaults to stdout if not specified)")
    parser.add_argument("-t", "--tag", dest="tags", action="append", default=[],
                        help="Additional tag to add to every bookmark (can be used multiple times)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details and a run summary")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Do not report records that failed to convert")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return read_export_content(source)


def write_to_stdout(records, tags: List[str]):
    sys.stdout.flush()
    if not hasattr(sys.stdout, "buffer"):
        return stream_bookmarks(records, sys.stdout, tags)

    # stdout is not UTF-8 on every platform.
    out = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    try:
        return stream_bookmarks(records, out, tags)
    finally:
        out.flush()
        out.detach()


def write_to_file(records, path: str, tags: List[str]):
    with open(path, "w", encoding="utf-8") as f:
        return stream_bookmarks(records, f, tags)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level = settings.log_level
    if args.verbose:
        level = "DEBUG"
    elif args.quiet:
        level = "ERROR"
    configure_logging(level, sys.stderr)

    tags = [*settings.extra_tags, *args.tags]
    logger.debug("Extra tags: %s", tags)

    try:
        records = parse_export(read_input(args.input))
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1
    except FatalInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    # The output is only opened once the export is known to be usable.
    try:
        if args.output is None:
            report = write_to_stdout(records, tags)
        else:
            report = write_to_file(records, args.output, tags)
    except OSError as e:
        print(f"error: cannot write {args.output or 'stdout'}: {e}", file=sys.stderr)
        return 1

    logger.debug("%d of %d records converted", report.converted, report.total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
