"""
Command-line entry point: repair a project JSON file.

Usage:
    layout-repair project.json --output repaired.json
    layout-repair project.json --navbar-only
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from layout_repair.core.config import settings
from layout_repair.core.logging_config import configure_logging
from layout_repair.repair import repair_project_layout

logger = logging.getLogger(__name__)


def load_pages(data):
    """Pages list from a project document (a list, or an object with ``pages``)."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("pages"), list):
        return data["pages"]
    raise ValueError("expected a list of pages or an object with a 'pages' list")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Repair navbar and footer layout in a generated project file."
    )
    parser.add_argument("input", type=Path, help="Project JSON file.")
    parser.add_argument(
        "--output", type=Path, default=None,
        help="Where to write the repaired project (stdout when omitted).",
    )
    passes = parser.add_mutually_exclusive_group()
    passes.add_argument("--footer-only", action="store_true", help="Only run the footer pass.")
    passes.add_argument("--navbar-only", action="store_true", help="Only run the navbar pass.")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries the repaired document
    configure_logging(args.log_level, stream=sys.stderr)

    try:
        document = json.loads(args.input.read_text(encoding="utf-8"))
        pages = load_pages(document)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read project from {args.input}: {e}")
        return 1

    report = repair_project_layout(
        pages,
        footer=settings.FOOTER_REPAIR_ENABLED and not args.navbar_only,
        navbar=settings.NAVBAR_REPAIR_ENABLED and not args.footer_only,
    )
    logger.info(report.describe())

    rendered = json.dumps(document, indent=2, ensure_ascii=False)
    if args.output is None:
        sys.stdout.write(rendered + "\n")
    else:
        args.output.write_text(rendered + "\n", encoding="utf-8")
        logger.info(f"Wrote repaired project to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
