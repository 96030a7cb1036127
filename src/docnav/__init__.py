"""docnav: build a documentation site's navigation from index headings."""

from docnav.categories import categories_from_table, list_categories, resolve_category
from docnav.exceptions import (
    ConfigFileError,
    DocnavError,
    PatchError,
    PatchTargetNotFoundError,
)
from docnav.headings import extract_headings, heading_anchor
from docnav.navigation import build_navigation, build_navigation_async, home_link
from docnav.patcher import patch_config_file, patch_config_source, render_nav
from docnav.schemas import Category, Heading, NavGroup, NavLink, NavTree, SiteConfig
from docnav.slugs import encode_slug

__all__ = [
    "Category",
    "ConfigFileError",
    "DocnavError",
    "Heading",
    "NavGroup",
    "NavLink",
    "NavTree",
    "PatchError",
    "PatchTargetNotFoundError",
    "SiteConfig",
    "build_navigation",
    "build_navigation_async",
    "categories_from_table",
    "encode_slug",
    "extract_headings",
    "heading_anchor",
    "home_link",
    "list_categories",
    "patch_config_file",
    "patch_config_source",
    "render_nav",
    "resolve_category",
]
