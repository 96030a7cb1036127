"""Assemble the site's top-level navigation tree."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Sequence

from docnav.categories import resolve_category
from docnav.config import DOCNAV_HOME_TEXT, DOCNAV_INDEX_FILENAME
from docnav.schemas import Category, NavLink, NavTree


def home_link(text: str = DOCNAV_HOME_TEXT) -> NavLink:
    """Return the fixed first menu entry."""
    return NavLink(text=text, href="/")


def build_navigation(
    categories: Sequence[Category],
    docs_root: Path,
    *,
    home: NavLink | None = None,
    index_name: str = DOCNAV_INDEX_FILENAME,
) -> NavTree:
    """Build the navigation tree: the home link, then one entry per category.

    Categories are resolved in declaration order, which is the menu order.
    """
    tree: NavTree = [home or home_link()]
    tree.extend(
        resolve_category(category, docs_root, index_name=index_name)
        for category in categories
    )
    return tree


async def build_navigation_async(
    categories: Sequence[Category],
    docs_root: Path,
    *,
    home: NavLink | None = None,
    index_name: str = DOCNAV_INDEX_FILENAME,
) -> NavTree:
    """Like :func:`build_navigation`, reading index documents in worker threads.

    ``asyncio.gather`` returns results in argument order, so the menu order
    matches the declaration order regardless of which read finishes first.
    """
    resolved = await asyncio.gather(
        *(
            asyncio.to_thread(
                resolve_category, category, docs_root, index_name=index_name
            )
            for category in categories
        )
    )
    return [home or home_link(), *resolved]
