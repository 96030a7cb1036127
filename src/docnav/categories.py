"""Resolve categories into navigation entries."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from docnav.config import DOCNAV_INDEX_FILENAME
from docnav.headings import extract_headings, heading_anchor
from docnav.schemas import Category, NavGroup, NavLink
from docnav.utils.logging_config import get_logger

logger = get_logger(__name__)


def categories_from_table(display_names: Mapping[str, str]) -> list[Category]:
    """Build the declared category list from an ordered id -> name table."""
    return [
        Category(id=category_id, display_name=name)
        for category_id, name in display_names.items()
    ]


def list_categories(
    docs_root: Path,
    display_names: Mapping[str, str],
    exclusions: Iterable[str] = (),
) -> list[Category]:
    """Discover categories from the subdirectories of ``docs_root``.

    Subdirectories are visited in sorted name order. Hidden directories,
    names in ``exclusions`` and names missing from ``display_names`` are
    skipped.

    Args:
        docs_root: Documents root directory.
        display_names: Known category ids mapped to their menu labels.
        exclusions: Tooling or internal directory names to ignore.

    Returns:
        Discovered categories; empty if ``docs_root`` is not a directory.
    """
    if not docs_root.is_dir():
        logger.warning("Documents root not found", extra={"docs_root": str(docs_root)})
        return []

    excluded = set(exclusions)
    categories: list[Category] = []
    for entry in sorted(docs_root.iterdir(), key=lambda path: path.name):
        name = entry.name
        if not entry.is_dir() or name.startswith(".") or name in excluded:
            continue
        display_name = display_names.get(name)
        if display_name is None:
            logger.debug("Skipping unknown directory %s", name)
            continue
        categories.append(Category(id=name, display_name=display_name))
    return categories


def resolve_category(
    category: Category,
    docs_root: Path,
    *,
    index_name: str = DOCNAV_INDEX_FILENAME,
) -> NavLink | NavGroup:
    """Turn one category into a flat link or a drop-down of its headings.

    Each ``##``/``###`` heading of the category's index document becomes a
    link to ``/<id>/#<anchor>``. When the document is missing, unreadable or
    has no headings, the category degrades to a link to ``/<id>/``.

    Args:
        category: Category to resolve.
        docs_root: Documents root directory.
        index_name: File name of the index document inside the category
            directory.
    """
    index_path = docs_root / category.id / index_name

    try:
        text = index_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            "Index document unavailable, using plain link for %s: %s",
            category.id,
            exc,
            extra={"category": category.id, "path": str(index_path)},
        )
        return _category_link(category)

    links = [
        NavLink(
            text=heading.text,
            href=f"/{category.id}/#{heading_anchor(heading)}",
        )
        for heading in extract_headings(text)
    ]
    if not links:
        logger.warning(
            "No headings found, using plain link for %s",
            category.id,
            extra={"category": category.id, "path": str(index_path)},
        )
        return _category_link(category)

    return NavGroup(text=category.display_name, children=links)


def _category_link(category: Category) -> NavLink:
    return NavLink(text=category.display_name, href=f"/{category.id}/")
