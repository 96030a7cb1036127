"""Navigation tree models."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class NavLink(BaseModel):
    """A leaf navigation entry.

    ``href`` is an absolute site-relative path, optionally carrying a
    ``#fragment``.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    href: str

    def to_config(self) -> dict[str, str]:
        """Return the theme's ``{text, link}`` shape."""
        return {"text": self.text, "link": self.href}


class NavGroup(BaseModel):
    """A drop-down entry holding at least one link."""

    model_config = ConfigDict(frozen=True)

    text: str
    children: list[NavLink] = Field(..., min_length=1)

    def to_config(self) -> dict[str, object]:
        """Return the theme's ``{text, items}`` shape."""
        return {
            "text": self.text,
            "items": [child.to_config() for child in self.children],
        }


NavItem = Union[NavLink, NavGroup]
NavTree = list[NavItem]
