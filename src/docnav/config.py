"""Local configuration for docnav."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DOCS_ROOT = "docs"
DEFAULT_CONFIG_PATH = "docs/.vuepress/config.js"
DEFAULT_INDEX_FILENAME = "index.md"
DEFAULT_HOME_TEXT = "Home"
DEFAULT_LOG_LEVEL = "WARNING"

DOCNAV_DOCS_ROOT = Path(os.getenv("DOCNAV_DOCS_ROOT", DEFAULT_DOCS_ROOT)).expanduser()
DOCNAV_CONFIG_PATH = Path(os.getenv("DOCNAV_CONFIG_PATH", DEFAULT_CONFIG_PATH)).expanduser()
DOCNAV_INDEX_FILENAME = os.getenv("DOCNAV_INDEX_FILENAME", DEFAULT_INDEX_FILENAME)
DOCNAV_HOME_TEXT = os.getenv("DOCNAV_HOME_TEXT", DEFAULT_HOME_TEXT)
DOCNAV_LOG_LEVEL = os.getenv("DOCNAV_LOG_LEVEL", DEFAULT_LOG_LEVEL)

# Menu order follows insertion order.
DEFAULT_CATEGORIES: dict[str, str] = {
    "ruby": "Ruby",
    "rails": "Rails",
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "react": "React",
    "vue": "Vue",
    "graphql": "GraphQL",
    "docker": "Docker",
    "aws": "AWS",
    "git": "Git",
}

# Tooling and internal directories never treated as categories.
EXCLUDED_DIRECTORIES: frozenset[str] = frozenset(
    {".vuepress", ".git", ".github", "node_modules", "public", "assets"}
)
