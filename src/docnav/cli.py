"""Command-line entry point: build the navigation and patch the site config."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from docnav.categories import categories_from_table, list_categories
from docnav.config import (
    DEFAULT_CATEGORIES,
    DOCNAV_CONFIG_PATH,
    DOCNAV_DOCS_ROOT,
    DOCNAV_INDEX_FILENAME,
    DOCNAV_LOG_LEVEL,
    EXCLUDED_DIRECTORIES,
)
from docnav.exceptions import DocnavError
from docnav.navigation import build_navigation
from docnav.patcher import patch_config_file, render_nav
from docnav.schemas import NavTree
from docnav.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docnav",
        description="Generate the site navigation from category index headings.",
    )
    parser.add_argument(
        "--docs-root",
        type=Path,
        default=DOCNAV_DOCS_ROOT,
        help=f"Documents root directory (default: {DOCNAV_DOCS_ROOT})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DOCNAV_CONFIG_PATH,
        help=f"Configuration file to patch (default: {DOCNAV_CONFIG_PATH})",
    )
    parser.add_argument(
        "--index-name",
        default=DOCNAV_INDEX_FILENAME,
        help=f"Index document name inside each category (default: {DOCNAV_INDEX_FILENAME})",
    )
    parser.add_argument(
        "--discover",
        action="store_true",
        help="Discover categories from the subdirectories of the documents root",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the navigation without patching the configuration file",
    )
    parser.add_argument(
        "--format",
        choices=("js", "json"),
        default="js",
        help="Output format for the printed navigation",
    )
    parser.add_argument("--log-level", default=DOCNAV_LOG_LEVEL, help="Logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.discover:
        categories = list_categories(args.docs_root, DEFAULT_CATEGORIES, EXCLUDED_DIRECTORIES)
    else:
        categories = categories_from_table(DEFAULT_CATEGORIES)

    tree = build_navigation(categories, args.docs_root, index_name=args.index_name)
    print(format_tree(tree, args.format))

    if args.dry_run:
        return 0

    try:
        patch_config_file(tree, args.config)
    except DocnavError as exc:
        logger.error("Navigation patch failed", extra={"path": str(args.config)})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Updated {args.config} with {len(tree)} navigation entries")
    return 0


def format_tree(tree: NavTree, output_format: str) -> str:
    """Render ``tree`` for display."""
    if output_format == "json":
        return json.dumps([item.to_config() for item in tree], ensure_ascii=False, indent=2)
    return render_nav(tree)
