"""Shared schemas for docnav."""

from docnav.schemas.categories import Category
from docnav.schemas.headings import Heading
from docnav.schemas.navigation import NavGroup, NavItem, NavLink, NavTree
from docnav.schemas.site import SiteConfig

__all__ = [
    "Category",
    "Heading",
    "NavGroup",
    "NavItem",
    "NavLink",
    "NavTree",
    "SiteConfig",
]
