"""
Command line entry for edge_gedcom.

This module is intentionally thin:
- argument parsing
- logging and configuration setup
- running the conversion and writing the result

Usage:
    python -m edge_gedcom person.doc family.doc -o family.ged --verify
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from edge_gedcom.config import ConverterConfig
from edge_gedcom.converter import EdgeConverter
from edge_gedcom.errors import CrossReferenceError, ParseError
from edge_gedcom.gedcom_check import GedcomChecker

logger = logging.getLogger("edge_gedcom")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edge-gedcom",
        description="Convert Family Edge person and family reports to GEDCOM 5.5.1",
    )
    parser.add_argument("person_file", type=Path, help="Person report exported by Family Edge")
    parser.add_argument("family_file", type=Path, help="Family report exported by Family Edge")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="GEDCOM output file (default: standard output)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file overriding the default configuration",
    )
    parser.add_argument(
        "--ancestry",
        action="store_true",
        help="Write dates and event notes the way Ancestry.com expects",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Re-read the output file and check line lengths and pointers (needs --output)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)
    if args.verify and not args.output:
        ap.error("--verify needs --output")

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ConverterConfig.from_yaml(args.config) if args.config else ConverterConfig()
        if args.ancestry:
            config.ancestry_format = True
        converter = EdgeConverter(config)
        text = converter.convert(args.person_file, args.family_file)
    except (ParseError, CrossReferenceError, ValueError, FileNotFoundError) as exc:
        logger.error(f"Conversion failed: {exc}")
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="\n") as out:
            out.write(text)
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(text)

    if args.verify:
        report = GedcomChecker(args.output, config.max_line_length).check()
        if not report.ok:
            logger.error(f"Check of {args.output} failed: {len(report.long_lines)} long lines, "
                         f"{len(report.dangling_pointers)} dangling pointers")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
