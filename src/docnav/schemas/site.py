"""Site configuration model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from docnav.schemas.navigation import NavGroup, NavLink


class SiteConfig(BaseModel):
    """Site-wide options consumed by the documentation theme.

    Attributes:
        title: Site title shown in the header and ``<title>``.
        description: Meta description.
        sitemap_hostname: Absolute origin used when emitting a sitemap.
        head: Extra ``<head>`` entries as ``[tag, attributes]`` pairs.
        search: Search provider name, or ``None`` to disable search.
        footer: Footer text.
        edit_link_pattern: URL pattern for "edit this page" links, with
            ``:path`` standing for the document path.
        nav: Top-level navigation tree.
    """

    title: str
    description: str = ""
    sitemap_hostname: str | None = None
    head: list[tuple[str, dict[str, str]]] = Field(default_factory=list)
    search: str | None = None
    footer: str | None = None
    edit_link_pattern: str | None = None
    nav: list[NavLink | NavGroup] = Field(default_factory=list)

    def with_navigation(self, tree: list[NavLink | NavGroup]) -> SiteConfig:
        """Return a copy of this configuration carrying ``tree``."""
        return self.model_copy(update={"nav": list(tree)})

    def to_config(self) -> dict[str, Any]:
        """Render the site/theme configuration mapping."""
        theme: dict[str, Any] = {"nav": [item.to_config() for item in self.nav]}
        if self.search:
            theme["search"] = self.search
        if self.footer:
            theme["footer"] = self.footer
        if self.edit_link_pattern:
            theme["editLinkPattern"] = self.edit_link_pattern

        config: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "head": [[tag, dict(attrs)] for tag, attrs in self.head],
            "themeConfig": theme,
        }
        if self.sitemap_hostname:
            config["sitemap"] = {"hostname": self.sitemap_hostname}
        return config
