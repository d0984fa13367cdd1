#!/usr/bin/env python3
"""
mdlinks CLI - extract link data from markdown files as JSON or delimited text.

Records go to stdout, diagnostics to stderr.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import Config
from .link_extractor import LinkExtractor
from .logging_config import get_logger, setup_logging
from .serializers import SerializationError, write_records

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlinks",
        description=(
            "Extracts link data from markdown files producing json or "
            "character-delimited text. Output is sent to STDOUT."
        ),
    )
    parser.add_argument("filenames", nargs="*", help="Input markdown files")
    parser.add_argument("-j", "--json", action="store_true", help="Output JSON format")
    parser.add_argument("-s", "--separator", help="Field separator (default: ,)")
    parser.add_argument(
        "--fields",
        help="Comma-separated output columns (default: description,url,source_file)",
    )
    parser.add_argument("--no-header", action="store_true", help="Omit the header row")
    parser.add_argument("-c", "--config", help="Config file (default: mdlinks.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _log_level(config: Config, verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level = getattr(logging, str(config.logging.level).upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def run(args: argparse.Namespace) -> int:
    """Extract links from the files named in ``args`` and write them to stdout."""
    config = Config.load(Path(args.config) if args.config else None)
    setup_logging(_log_level(config, args.verbose), config.logging.file)

    output = config.output
    fmt = "json" if args.json else output.format
    separator = args.separator if args.separator is not None else output.separator
    fields = args.fields.split(",") if args.fields else output.fields
    header = output.header and not args.no_header

    records = LinkExtractor.extract_links_from_files(args.filenames)
    logger.debug("Extracted %d links from %d file(s)", len(records), len(args.filenames))

    try:
        write_records(
            records,
            sys.stdout,
            fmt=fmt,
            separator=separator,
            fields=fields,
            header=header,
            json_indent=output.json_indent,
        )
    except SerializationError as e:
        print(f"mdlinks: {e}", file=sys.stderr)
        return 2
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.filenames:
        parser.print_help(sys.stderr)
        return 1

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
